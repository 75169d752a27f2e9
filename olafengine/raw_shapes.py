"""Vertex and index data of the built-in shapes, and how their sizes map to scale.

Every shape is modelled in a cube spanning -1..1 on each axis. A shape is sized
by scaling that unit model, so each ``*_scale`` function turns the shape's own
dimensions into an ``(x, y, z)`` scale vector.
"""

from __future__ import annotations

import math

import numpy as np

from .transform import Vertex

__all__ = [
    "BOX_VERTEX_COUNT",
    "PRISM_VERTEX_COUNT",
    "PRISM_INDEX_COUNT",
    "MAX_CYLINDER_DETAIL",
    "box_vertices",
    "box_scale",
    "prism_vertices",
    "prism_indices",
    "prism_scale",
    "cylinder_vertices",
    "cylinder_indices",
    "cylinder_scale",
]

BOX_VERTEX_COUNT = 36
PRISM_VERTEX_COUNT = 5
PRISM_INDEX_COUNT = 18
MAX_CYLINDER_DETAIL = 40

_BOX_POSITIONS = (
    # front (+z)
    (-1, -1, 1), (1, -1, 1), (1, 1, 1),
    (-1, -1, 1), (1, 1, 1), (-1, 1, 1),
    # back (-z)
    (1, -1, -1), (-1, -1, -1), (1, -1, -1),
    (1, -1, -1), (-1, 1, -1), (1, 1, -1),
    # left (-x)
    (-1, -1, -1), (-1, -1, 1), (-1, 1, 1),
    (-1, -1, -1), (-1, 1, 1), (-1, 1, -1),
    # right (+x)
    (1, -1, 1), (1, -1, -1), (1, 1, -1),
    (1, -1, 1), (1, 1, -1), (1, 1, 1),
    # top (+y)
    (-1, 1, 1), (1, 1, 1), (1, 1, -1),
    (-1, 1, 1), (1, 1, -1), (-1, 1, -1),
    # bottom (-y)
    (-1, -1, -1), (1, -1, -1), (1, -1, 1),
    (-1, -1, -1), (1, -1, 1), (-1, -1, 1),
)

_BOX_VERTICES = tuple(Vertex(float(x), float(y), float(z)) for x, y, z in _BOX_POSITIONS)

_PRISM_VERTICES = (
    Vertex(1.0, -1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    Vertex(1.0, -1.0, -1.0, 1.0, 1.0, 1.0, 1.0),
    Vertex(-1.0, -1.0, -1.0, 1.0, 1.0, 1.0, 1.0),
    Vertex(-1.0, -1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    Vertex(0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0),
)

_PRISM_INDICES = (
    0, 1, 4, 1, 2, 4, 2, 3, 4, 3, 0, 4,
    0, 1, 2, 0, 2, 3,
)


def box_vertices() -> tuple[Vertex, ...]:
    """Return the 36 vertices of the box, as six faces of two triangles."""
    return _BOX_VERTICES


def box_scale(w: float, h: float, l: float) -> np.ndarray:
    """Return the scale that gives a box of width ``w``, height ``h``, length ``l``."""
    return np.array([w, h, l], dtype=float)


def prism_vertices() -> tuple[Vertex, ...]:
    """Return the five vertices of the square-based pyramid: base corners, then apex."""
    return _PRISM_VERTICES


def prism_indices() -> tuple[int, ...]:
    """Return the 18 vertex indices: four side triangles, then two base triangles."""
    return _PRISM_INDICES


def prism_scale(w: float, h: float, l: float) -> np.ndarray:
    """Return the scale that gives a pyramid of width ``w``, height ``h``, length ``l``."""
    return np.array([w, h, l], dtype=float)


def _check_detail(detail: int) -> int:
    if isinstance(detail, bool) or not isinstance(detail, int):
        raise TypeError(f"detail must be an int, got {detail!r}")
    if not 1 <= detail <= MAX_CYLINDER_DETAIL:
        raise ValueError(f"detail must be between 1 and {MAX_CYLINDER_DETAIL}, got {detail}")
    return detail


def cylinder_vertices(detail: int) -> tuple[Vertex, ...]:
    """Return the ``2 * (detail + 1)`` vertices of a cylinder along the z axis.

    The first ``detail`` vertices ring the cap at z = 1, the next ``detail`` ring
    the cap at z = -1, and the last two are the centres of those caps.
    """
    detail = _check_detail(detail)
    step = 2 * math.pi / detail
    ring = [(math.cos(i * step), math.sin(i * step)) for i in range(detail)]
    top = [Vertex(x, y, 1.0) for x, y in ring]
    bottom = [Vertex(x, y, -1.0) for x, y in ring]
    centres = [Vertex(0.0, 0.0, 1.0), Vertex(0.0, 0.0, -1.0)]
    return tuple(top + bottom + centres)


def cylinder_indices(detail: int) -> tuple[int, ...]:
    """Return the ``12 * detail`` vertex indices of a cylinder's triangles.

    They list the top cap fan, then the bottom cap fan, then two triangles for
    each quad of the side wall.
    """
    detail = _check_detail(detail)
    top_centre = 2 * detail
    bottom_centre = 2 * detail + 1
    indices: list[int] = []
    for i in range(detail):
        indices += (i, (i + 1) % detail, top_centre)
    for i in range(detail):
        indices += (i + detail, (i + 1) % detail + detail, bottom_centre)
    for k in range(detail):
        nxt = (k + 1) % detail
        indices += (k, k + detail, nxt + detail, k, nxt, nxt + detail)
    return tuple(indices)


def cylinder_scale(rad: float, l: float) -> np.ndarray:
    """Return the scale that gives a cylinder of radius ``rad`` and length ``l``."""
    return np.array([rad, rad, l], dtype=float)