"""Handles on drawable shapes that track position, rotation, scale and colour."""

from __future__ import annotations

from dataclasses import replace

import numpy as np

from .colors import RGBA
from .transform import Model, Transform, quat_from_euler

__all__ = ["ShapeAPI", "Box3D", "Cylinder3D", "Prism3D"]


def _vec3(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {arr.shape}")
    return arr


class ShapeAPI:
    """A shape built from a :class:`Model`, with convenient transform helpers.

    Only the model's buffers, mesh, position and scale are taken over; the
    rotation starts at zero and the colour at opaque white. Rotation is kept as
    Euler angles in radians and turned into a quaternion by :meth:`to_model`.
    """

    def __init__(self, model: Model) -> None:
        self._vb = replace(model.vb)
        self._mesh = replace(model.mesh)
        self._ang = np.zeros(3)
        self.pos = np.array(model.transform.pos, dtype=float)
        self.scale = np.array(model.transform.scale, dtype=float)
        self.color = RGBA(1.0, 1.0, 1.0, 1.0)

    @property
    def angles(self) -> np.ndarray:
        """The rotation about the x, y and z axes, in radians."""
        return self._ang.copy()

    def to_model(self) -> Model:
        """Return a model the renderer can draw, reflecting the current state."""
        return Model(
            vb=replace(self._vb),
            mesh=replace(self._mesh),
            transform=Transform(
                pos=self.pos.copy(),
                rotation=quat_from_euler(self._ang),
                scale=self.scale.copy(),
                color=self.color,
            ),
        )

    def rotate_x(self, angle_deg: float) -> None:
        """Rotate about the x axis by ``angle_deg`` degrees."""
        self._ang[0] += np.radians(angle_deg)

    def rotate_y(self, angle_deg: float) -> None:
        """Rotate about the y axis by ``angle_deg`` degrees."""
        self._ang[1] += np.radians(angle_deg)

    def rotate_z(self, angle_deg: float) -> None:
        """Rotate about the z axis by ``angle_deg`` degrees."""
        self._ang[2] += np.radians(angle_deg)

    def rotate(self, angles, axis) -> None:
        """Add the per-axis rotations in ``angles`` (degrees); ``axis`` is not used."""
        self._ang = self._ang + np.radians(_vec3(angles))

    def set_pos(self, position) -> None:
        """Place the shape at ``position``."""
        self.pos = _vec3(position)

    def move(self, delta) -> None:
        """Shift the shape by ``delta``."""
        self.pos = self.pos + _vec3(delta)


class _BoxLike(ShapeAPI):
    @property
    def w(self) -> float:
        """Width: the x scale."""
        return float(self.scale[0])

    @w.setter
    def w(self, value: float) -> None:
        self.scale[0] = value

    @property
    def h(self) -> float:
        """Height: the y scale."""
        return float(self.scale[1])

    @h.setter
    def h(self, value: float) -> None:
        self.scale[1] = value

    @property
    def l(self) -> float:  # noqa: E743
        """Length: the z scale."""
        return float(self.scale[2])

    @l.setter
    def l(self, value: float) -> None:  # noqa: E743
        self.scale[2] = value


class Box3D(_BoxLike):
    """A rectangular box."""

    def clone(self) -> Box3D:
        """Return a new box with the same buffers, mesh, position and scale."""
        return Box3D(self.to_model())


class Prism3D(_BoxLike):
    """A square-based pyramid."""

    def clone(self) -> Prism3D:
        """Return a new pyramid with the same buffers, mesh, position and scale."""
        return Prism3D(self.to_model())


class Cylinder3D(ShapeAPI):
    """A cylinder along the z axis."""

    DEFAULT_DETAIL = 12

    @property
    def rad(self) -> float:
        """Radius: the x scale."""
        return float(self.scale[0])

    @rad.setter
    def rad(self, value: float) -> None:
        self.scale[0] = value

    @property
    def l(self) -> float:  # noqa: E743
        """Length: the z scale."""
        return float(self.scale[2])

    @l.setter
    def l(self, value: float) -> None:  # noqa: E743
        self.scale[2] = value