"""Homogeneous four-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_FIELDS = ("x", "y", "z", "w")


@dataclass
class Vec4:
    """A 4D vector with x, y, z and a homogeneous w component (default 1)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def display(self) -> None:
        """Print the components separated by tabs."""
        print(f"{self.x}\t{self.y}\t{self.z}\t{self.w}")

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __mul__(self, scalar: float) -> Vec4:
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def divide_w(self) -> None:
        """Divide x, y and z by w in place and set w to 1."""
        self.x /= self.w
        self.y /= self.w
        self.z /= self.w
        self.w = 1.0

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 4:
            raise IndexError(f"Vec4 index out of range: {index}")
        return getattr(self, _FIELDS[index])

    def __setitem__(self, index: int, value: float) -> None:
        if not 0 <= index < 4:
            raise IndexError(f"Vec4 index out of range: {index}")
        setattr(self, _FIELDS[index], value)

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, 0.0)

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, 0.0)

    @staticmethod
    def cross(v1: Vec4, v2: Vec4) -> Vec4:
        """Cross product of the xyz parts; the result has w = 0."""
        return Vec4(
            v1.y * v2.z - v1.z * v2.y,
            v1.z * v2.x - v1.x * v2.z,
            v1.x * v2.y - v1.y * v2.x,
            0.0,
        )

    @staticmethod
    def dot(v1: Vec4, v2: Vec4) -> float:
        """Dot product of the xyz parts."""
        return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z

    def normalise(self) -> None:
        """Scale x, y and z in place to unit length; w is left alone."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        self.x /= length
        self.y /= length
        self.z /= length