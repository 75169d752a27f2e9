[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olafengine"
version = "0.1.0"
description = "Core pieces of a small 3D engine: input state, ECS bitmasks, containers, transforms, camera maths and primitive shapes."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "engine", "ecs", "camera", "graphics", "shapes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["olafengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
