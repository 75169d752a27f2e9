"""Per-frame record of the mouse position, motion, wheel and buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

__all__ = ["MouseButton", "MouseState"]


class MouseButton(IntFlag):
    """Bit masks of the mouse buttons."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 4
    X1 = 8
    X2 = 16


@dataclass
class MouseState:
    """Mouse position, per-frame deltas, wheel motion and pressed buttons."""

    position: tuple[float, float] = (0.0, 0.0)
    delta: tuple[float, float] = (0.0, 0.0)
    scroll: tuple[float, float] = (0.0, 0.0)
    flags: int = 0

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def delta_x(self) -> float:
        return self.delta[0]

    @property
    def delta_y(self) -> float:
        return self.delta[1]

    @property
    def scroll_x(self) -> float:
        return self.scroll[0]

    @property
    def scroll_y(self) -> float:
        return self.scroll[1]

    def is_pressed(self, button: MouseButton) -> bool:
        """Return True if ``button`` is down this frame."""
        return bool(self.flags & button)

    @property
    def left_clicked(self) -> bool:
        return self.is_pressed(MouseButton.LEFT)

    @property
    def right_clicked(self) -> bool:
        return self.is_pressed(MouseButton.RIGHT)

    @property
    def middle_clicked(self) -> bool:
        return self.is_pressed(MouseButton.MIDDLE)

    @property
    def x1_clicked(self) -> bool:
        return self.is_pressed(MouseButton.X1)

    @property
    def x2_clicked(self) -> bool:
        return self.is_pressed(MouseButton.X2)

    def update(self, position, delta, flags: int) -> None:
        """Record the current position, relative motion and button mask."""
        px, py = position
        dx, dy = delta
        self.position = (float(px), float(py))
        self.delta = (float(dx), float(dy))
        self.flags = int(flags)

    def set_scroll(self, x: float, y: float) -> None:
        """Record the wheel motion reported by a wheel event."""
        self.scroll = (float(x), float(y))

    def clear_scroll(self) -> None:
        """Reset the wheel motion to zero."""
        self.scroll = (0.0, 0.0)