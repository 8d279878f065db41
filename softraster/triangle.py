"""Screen-space triangles and their rasterisation."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Optional, TypeVar

from softraster.mesh import Vertex
from softraster.renderer import Light, Renderer
from softraster.vec4 import Vec4
from softraster.window import Window

T = TypeVar("T")


@dataclass
class Vec2:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_vec4(cls, v: Vec4) -> Vec2:
        """The x and y components of a 4D vector."""
        return cls(v[0], v[1])

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def display(self) -> None:
        """Print the components separated by a tab."""
        print(f"{self.x}\t{self.y}")


class Triangle:
    """A triangle of three screen-space vertices."""

    def __init__(self, v1: Vertex, v2: Vertex, v3: Vertex) -> None:
        self.v = (copy.deepcopy(v1), copy.deepcopy(v2), copy.deepcopy(v3))
        e1 = Vec2.from_vec4(self.v[1].p - self.v[0].p)
        e2 = Vec2.from_vec4(self.v[2].p - self.v[0].p)
        self.area = math.fabs(e1.x * e2.y - e1.y * e2.x)

    def edge_function(self, v1: Vec2, v2: Vec2, p: Vec2) -> float:
        """Signed cross product of edge v1->v2 with v1->p."""
        e = v2 - v1
        q = p - v1
        return q.y * e.x - q.x * e.y

    def coordinates(self, p: Vec2) -> Optional[tuple[float, float, float]]:
        """Barycentric (alpha, beta, gamma) of p, or None when p lies outside."""
        a, b, c = (Vec2.from_vec4(vertex.p) for vertex in self.v)
        alpha = self.edge_function(a, b, p) / self.area
        beta = self.edge_function(b, c, p) / self.area
        gamma = self.edge_function(c, a, p) / self.area
        if alpha < 0.0 or beta < 0.0 or gamma < 0.0:
            return None
        return alpha, beta, gamma

    def interpolate(
        self, alpha: float, beta: float, gamma: float, a1: T, a2: T, a3: T
    ) -> T:
        """Weighted sum a1 * alpha + a2 * beta + a3 * gamma."""
        return (a1 * alpha) + (a2 * beta) + (a3 * gamma)

    def draw(self, renderer: Renderer, light: Light, ka: float, kd: float) -> None:
        """Rasterise with depth testing and ambient plus diffuse shading."""
        min_v, max_v = self.bounds_in_window(renderer.canvas)
        if self.area < 1.0:
            return
        v0, v1, v2 = self.v
        for y in range(int(min_v.y), math.ceil(max_v.y)):
            for x in range(int(min_v.x), math.ceil(max_v.x)):
                coords = self.coordinates(Vec2(float(x), float(y)))
                if coords is None:
                    continue
                alpha, beta, gamma = coords
                c = self.interpolate(beta, gamma, alpha, v0.rgb, v1.rgb, v2.rgb)
                c.clamp()
                depth = self.interpolate(
                    beta, gamma, alpha, v0.p[2], v1.p[2], v2.p[2]
                )
                normal = self.interpolate(
                    beta, gamma, alpha, v0.normal, v1.normal, v2.normal
                )
                normal.normalise()
                if renderer.zbuffer[x, y] > depth and depth > 0.001:
                    light.omega_i.normalise()
                    dot = max(Vec4.dot(light.omega_i, normal), 0.0)
                    shaded = (c * kd) * (light.diffuse * dot) + (light.ambient * ka)
                    renderer.canvas.draw(x, y, *shaded.to_rgb())
                    renderer.zbuffer[x, y] = depth

    def bounds(self) -> tuple[Vec2, Vec2]:
        """Minimum and maximum corners of the 2D bounding box."""
        xs = [vertex.p[0] for vertex in self.v]
        ys = [vertex.p[1] for vertex in self.v]
        return Vec2(min(xs), min(ys)), Vec2(max(xs), max(ys))

    def bounds_in_window(self, canvas: Window) -> tuple[Vec2, Vec2]:
        """The bounding box clipped to the canvas."""
        min_v, max_v = self.bounds()
        min_v.x = max(min_v.x, 0.0)
        min_v.y = max(min_v.y, 0.0)
        max_v.x = min(max_v.x, float(canvas.width))
        max_v.y = min(max_v.y, float(canvas.height))
        return min_v, max_v

    def draw_bounds(self, canvas: Window) -> None:
        """Fill the bounding box in red, for debugging."""
        min_v, max_v = self.bounds()
        for y in range(int(min_v.y), int(max_v.y)):
            for x in range(int(min_v.x), int(max_v.x)):
                canvas.draw(x, y, 255, 0, 0)

    def display(self) -> None:
        """Print the vertex positions."""
        for vertex in self.v:
            vertex.p.display()
        print()