"""RGBA colour values and a palette of named colours."""

from __future__ import annotations

from types import SimpleNamespace
from typing import NamedTuple

__all__ = [
    "RGBA",
    "red",
    "orange",
    "yellow",
    "green",
    "blue",
    "purple",
    "light_blue",
    "pink",
    "white",
    "black",
    "exact",
]


class RGBA(NamedTuple):
    """A colour with red, green, blue and alpha channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


red = RGBA(1.0, 0.235, 0.235, 1.0)
orange = RGBA(1.0, 0.65, 0.0, 1.0)
yellow = RGBA(1.0, 1.0, 0.235, 1.0)
green = RGBA(0.4, 0.8, 0.4, 1.0)
blue = RGBA(0.475, 0.67, 1.0, 1.0)
purple = RGBA(0.8, 0.35, 1.0, 1.0)
light_blue = RGBA(0.55, 0.9, 1.0, 1.0)
pink = RGBA(1.0, 0.67, 0.67, 1.0)
white = RGBA(0.9, 0.9, 0.9, 0.9)
black = RGBA(0.075, 0.075, 0.075, 1.0)

exact = SimpleNamespace(
    red=RGBA(1.0, 0.0, 0.0, 1.0),
    green=RGBA(0.0, 1.0, 0.0, 1.0),
    blue=RGBA(0.0, 0.0, 1.0, 1.0),
    magenta=RGBA(1.0, 0.0, 1.0, 1.0),
    yellow=RGBA(1.0, 1.0, 0.0, 1.0),
    cyan=RGBA(0.0, 1.0, 1.0, 1.0),
    white=RGBA(1.0, 1.0, 1.0, 1.0),
    black=RGBA(0.0, 0.0, 0.0, 1.0),
    transparent=RGBA(0.0, 0.0, 0.0, 0.0),
)