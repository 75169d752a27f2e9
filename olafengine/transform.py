"""Vertices, buffer handles, meshes and the transform that places a model.

Matrices are 4x4 numpy arrays in the usual mathematical layout: they act on
column vectors, and the translation sits in the last column.
Quaternions are numpy arrays ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .colors import RGBA

__all__ = [
    "Vertex",
    "VertexBuffer",
    "Mesh",
    "Transform",
    "Model",
    "quat_from_euler",
]


def _vec(values, size: int) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"expected {size} components, got shape {arr.shape}")
    return arr


def quat_from_euler(angles) -> np.ndarray:
    """Return the quaternion ``(w, x, y, z)`` for Euler angles in radians."""
    half = _vec(angles, 3) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def _quat_matrix(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y), 0.0],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x), 0.0],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


@dataclass(frozen=True)
class Vertex:
    """Position, texture coordinate and normal of one vertex."""

    x: float
    y: float
    z: float
    u: float = 0.0
    v: float = 0.0
    nx: float = 0.0
    ny: float = 0.0
    nz: float = 0.0


@dataclass
class VertexBuffer:
    """Handles of the GPU objects holding one shape's vertex data."""

    vao: int = 0
    vbo: int = 0
    mbo: int = 0
    cbo: int = 0
    vertex_count: int = 0


@dataclass
class Mesh:
    """The shader program and texture a model is drawn with."""

    shader: int = 0
    tex_id: int = 0


@dataclass(eq=False)
class Transform:
    """Position, rotation, scale and colour of a model."""

    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    color: RGBA = RGBA(1.0, 1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        self.pos = _vec(self.pos, 3)
        self.rotation = _vec(self.rotation, 4)
        self.scale = _vec(self.scale, 3)
        self.color = RGBA(*self.color)

    def compose(self) -> np.ndarray:
        """Return the model matrix: translation, then rotation, then scale."""
        scale_mat = np.diag([*self.scale, 1.0])
        trans_mat = np.identity(4)
        trans_mat[:3, 3] = self.pos
        return trans_mat @ _quat_matrix(self.rotation) @ scale_mat

    def set_scale(self, sx: float, sy: float, sz: float) -> None:
        """Set the scale along each axis."""
        self.scale = np.array([sx, sy, sz], dtype=float)

    def move(self, dx: float, dy: float, dz: float) -> None:
        """Shift the position by the given amounts."""
        self.pos = self.pos + np.array([dx, dy, dz], dtype=float)

    def set_pos(self, x: float, y: float, z: float) -> None:
        """Place the model at the given position."""
        self.pos = np.array([x, y, z], dtype=float)


@dataclass
class Model:
    """Everything the renderer needs to draw one object."""

    vb: VertexBuffer = field(default_factory=VertexBuffer)
    mesh: Mesh = field(default_factory=Mesh)
    transform: Transform = field(default_factory=Transform)