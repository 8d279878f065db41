"""Triangle meshes and simple procedural shapes."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Any

from softraster.colour import Colour
from softraster.vec4 import Vec4


@dataclass
class Vertex:
    """A mesh vertex: position, normal and colour."""

    p: Vec4 = field(default_factory=Vec4)
    normal: Vec4 = field(default_factory=Vec4)
    rgb: Colour = field(default_factory=Colour)


def _fmt(value: float) -> str:
    return f"{value:g}"


class Mesh:
    """Vertices and index triangles sharing one colour and world transform."""

    def __init__(self) -> None:
        self.col = Colour(1.0, 1.0, 1.0)
        self.ka = 0.75
        self.kd = 0.75
        self.world: Any = None
        self.vertices: list[Vertex] = []
        self.triangles: list[tuple[int, int, int]] = []

    def set_colour(self, colour: Colour, ka: float, kd: float) -> None:
        """Set the colour given to new vertices and the reflection coefficients."""
        self.col = copy.copy(colour)
        self.ka = ka
        self.kd = kd

    def add_vertex(self, position: Vec4, normal: Vec4) -> None:
        """Append a vertex coloured with the mesh colour."""
        self.vertices.append(
            Vertex(copy.copy(position), copy.copy(normal), copy.copy(self.col))
        )

    def add_triangle(self, v1: int, v2: int, v3: int) -> None:
        """Append a triangle given by three vertex indices."""
        self.triangles.append((v1, v2, v3))

    def display(self) -> None:
        """Print the vertices, normals and triangles."""
        print("Vertices and Normals:")
        for i, vertex in enumerate(self.vertices):
            p = ", ".join(_fmt(c) for c in vertex.p)
            n = ", ".join(_fmt(c) for c in vertex.normal)
            print(f"{i}: Vertex ({p}) Normal ({n})")
        print()
        print("Triangles:")
        for a, b, c in self.triangles:
            print(f"({a}, {b}, {c})")

    @classmethod
    def make_rectangle(cls, x1: float, y1: float, x2: float, y2: float) -> Mesh:
        """A rectangle in the z = 0 plane with the given opposite corners."""
        mesh = cls()
        corners = [
            Vec4(x1, y1, 0.0),
            Vec4(x2, y1, 0.0),
            Vec4(x2, y2, 0.0),
            Vec4(x1, y2, 0.0),
        ]
        normal = Vec4.cross(corners[1] - corners[0], corners[3] - corners[0])
        normal.normalise()
        for corner in corners:
            mesh.add_vertex(corner, normal)
        mesh.add_triangle(0, 2, 1)
        mesh.add_triangle(0, 3, 2)
        return mesh

    @classmethod
    def make_cube(cls, size: float) -> Mesh:
        """An axis-aligned cube centred on the origin, four vertices per face."""
        mesh = cls()
        h = size / 2.0
        positions = [
            Vec4(-h, -h, -h),
            Vec4(h, -h, -h),
            Vec4(h, h, -h),
            Vec4(-h, h, -h),
            Vec4(-h, -h, h),
            Vec4(h, -h, h),
            Vec4(h, h, h),
            Vec4(-h, h, h),
        ]
        normals = [
            Vec4(0, 0, -1, 0),
            Vec4(0, 0, 1, 0),
            Vec4(-1, 0, 0, 0),
            Vec4(1, 0, 0, 0),
            Vec4(0, -1, 0, 0),
            Vec4(0, 1, 0, 0),
        ]
        faces = [
            (1, 0, 3, 2),
            (4, 5, 6, 7),
            (3, 0, 4, 7),
            (5, 1, 2, 6),
            (0, 1, 5, 4),
            (2, 3, 7, 6),
        ]
        for face_no, (face, normal) in enumerate(zip(faces, normals)):
            for corner in face:
                mesh.add_vertex(positions[corner], normal)
            base = face_no * 4
            mesh.add_triangle(base, base + 2, base + 1)
            mesh.add_triangle(base, base + 3, base + 2)
        return mesh

    @classmethod
    def make_sphere(
        cls, radius: float, latitude_divisions: int, longitude_divisions: int
    ) -> Mesh:
        """A UV sphere centred on the origin."""
        if latitude_divisions < 2 or longitude_divisions < 3:
            raise ValueError(
                "Latitude divisions must be >= 2 and longitude divisions >= 3"
            )
        mesh = cls()
        for lat in range(latitude_divisions + 1):
            theta = math.pi * lat / latitude_divisions
            sin_t, cos_t = math.sin(theta), math.cos(theta)
            for lon in range(longitude_divisions + 1):
                phi = 2 * math.pi * lon / longitude_divisions
                position = Vec4(
                    radius * sin_t * math.cos(phi),
                    radius * sin_t * math.sin(phi),
                    radius * cos_t,
                    1.0,
                )
                normal = copy.copy(position)
                normal.normalise()
                normal.w = 0.0
                mesh.add_vertex(position, normal)

        row = longitude_divisions + 1
        for lat in range(latitude_divisions):
            for lon in range(longitude_divisions):
                v0 = lat * row + lon
                v1 = v0 + 1
                v2 = (lat + 1) * row + lon
                v3 = v2 + 1
                mesh.add_triangle(v0, v1, v2)
                mesh.add_triangle(v1, v3, v2)
        return mesh