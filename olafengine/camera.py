"""A perspective camera and the view and projection matrices it produces.

Matrices are 4x4 numpy arrays acting on column vectors, right-handed, with
clip-space depth running from -1 at the near plane to +1 at the far plane.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

__all__ = ["Camera", "look_at", "perspective"]


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / norm


def look_at(eye, center, up) -> np.ndarray:
    """Return the view matrix of an eye at ``eye`` looking toward ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye)],
            [u[0], u[1], u[2], -np.dot(u, eye)],
            [-f[0], -f[1], -f[2], np.dot(f, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection with vertical field of view ``fov`` radians."""
    if aspect == 0:
        raise ValueError("aspect ratio cannot be zero")
    if far == near:
        raise ValueError("near and far planes cannot coincide")
    tan_half = math.tan(fov / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


@dataclass(eq=False)
class Camera:
    """Position, direction and lens settings of the scene camera."""

    pos: np.ndarray = field(default_factory=lambda: np.array([0.0, 2.0, 10.0]))
    forward: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))
    fov: float = 1.0
    near: float = 0.1
    far: float = 400.0
    _alternate: tuple = field(
        default_factory=lambda: (
            0.1,
            np.array([100.0, 100.0, 100.0]),
            np.array([-1.0, -1.0, -1.0]),
        ),
        repr=False,
    )

    def __post_init__(self) -> None:
        self.pos = np.array(self.pos, dtype=float)
        self.forward = np.array(self.forward, dtype=float)
        self.up = np.array(self.up, dtype=float)

    def view(self) -> np.ndarray:
        """Return the view matrix."""
        return look_at(self.pos, self.pos + self.forward, self.up)

    def projection(self, width: float, height: float) -> np.ndarray:
        """Return the projection matrix for a viewport of the given size."""
        if height == 0:
            raise ValueError("viewport height cannot be zero")
        return perspective(self.fov, width / float(height), self.near, self.far)

    def move_horizontal(self, amount: float) -> None:
        """Slide sideways, perpendicular to ``up`` and ``forward``."""
        self.pos = self.pos - self.right() * amount

    def move_vertical(self, amount: float) -> None:
        """Move along the ``up`` direction."""
        self.pos = self.pos + _normalize(self.up) * amount

    def move_forward(self, amount: float) -> None:
        """Move along the viewing direction."""
        self.pos = self.pos + _normalize(self.forward) * amount

    def right(self) -> np.ndarray:
        """Return the unit vector ``up x forward``."""
        return _normalize(np.cross(self.up, self.forward))

    def toggle_orthographic(self) -> None:
        """Swap between the current view and a distant, narrow-angle one."""
        fov, pos, forward = self._alternate
        self._alternate = (self.fov, self.pos, self.forward)
        self.fov, self.pos, self.forward = fov, pos, forward