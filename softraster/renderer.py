"""Frame state for rasterising: canvas, depth buffer and lighting."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass, field
from typing import Callable, Optional

from softraster.colour import Colour
from softraster.vec4 import Vec4
from softraster.window import Window

_FAR_DEPTH = 1.0


@dataclass
class Light:
    """A directional light: direction, diffuse intensity and ambient intensity."""

    omega_i: Vec4 = field(default_factory=lambda: Vec4(0.0, 1.0, 1.0, 0.0))
    diffuse: Colour = field(default_factory=lambda: Colour(1.0, 1.0, 1.0))
    ambient: Colour = field(default_factory=lambda: Colour(0.2, 0.2, 0.2))


class DepthBuffer:
    """Per-pixel depth values indexed by (x, y)."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid depth buffer size: {width}x{height}")
        self.width = width
        self.height = height
        self._depth = array("f", [_FAR_DEPTH]) * (width * height)

    def _index(self, xy: tuple[int, int]) -> int:
        x, y = xy
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"depth ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def __getitem__(self, xy: tuple[int, int]) -> float:
        return self._depth[self._index(xy)]

    def __setitem__(self, xy: tuple[int, int], value: float) -> None:
        self._depth[self._index(xy)] = value

    def clear(self) -> None:
        """Reset every entry to the farthest depth."""
        self._depth = array("f", [_FAR_DEPTH]) * (self.width * self.height)


class Renderer:
    """Owns the canvas and depth buffer that triangles are drawn into."""

    def __init__(
        self,
        width: int = 1024,
        height: int = 768,
        on_present: Optional[Callable[[Window], None]] = None,
    ) -> None:
        self.fov = math.radians(90.0)
        self.aspect = 4.0 / 3.0
        self.near = 0.1
        self.far = 100.0
        self.canvas = Window(width, height, "Raster", on_present)
        self.zbuffer = DepthBuffer(width, height)

    def clear(self) -> None:
        """Blank the canvas and reset the depth buffer."""
        self.canvas.clear()
        self.zbuffer.clear()

    def present(self) -> None:
        """Hand the current frame on for display."""
        self.canvas.present()