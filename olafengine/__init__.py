"""Core pieces of a small 3D engine: input state, ECS bitmasks, containers, transforms, camera and shapes."""

__version__ = "0.1.0"