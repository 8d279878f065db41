"""Floating-point RGB colour."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class Channel(IntEnum):
    """Index of a colour component."""

    RED = 0
    GREEN = 1
    BLUE = 2


_NAMES = ("r", "g", "b")


def _to_byte(value: float) -> int:
    return math.floor(value * 255) % 256


@dataclass
class Colour:
    """An RGB colour with float components, black by default."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def set(self, r: float, g: float, b: float) -> None:
        """Replace all three components."""
        self.r, self.g, self.b = r, g, b

    def __getitem__(self, channel: Channel | int) -> float:
        return getattr(self, _NAMES[Channel(channel)])

    def __setitem__(self, channel: Channel | int, value: float) -> None:
        setattr(self, _NAMES[Channel(channel)], value)

    def clamp(self) -> None:
        """Limit each component to at most 1 in place."""
        self.r = min(self.r, 1.0)
        self.g = min(self.g, 1.0)
        self.b = min(self.b, 1.0)

    def to_rgb(self) -> tuple[int, int, int]:
        """Convert to 8-bit channel values by flooring component * 255."""
        return _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)

    def __mul__(self, other: Colour | float) -> Colour:
        if isinstance(other, Colour):
            return Colour(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Colour(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Colour:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __add__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.r + other.r, self.g + other.g, self.b + other.b)