"""Tetrahedra and triangulated polyhedra."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from yagl.simple_tri import SimpleTriangle
from yagl.vectors import Vector3


@dataclass(frozen=True)
class Tetrahedron:
    """A tetrahedron given by an origin and three edge vectors leaving it."""

    origin: Vector3
    a: Vector3
    b: Vector3
    c: Vector3

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3, c: Vector3, d: Vector3) -> Tetrahedron:
        """Tetrahedron with corners ``a``, ``b``, ``c`` and ``d``, rooted at ``a``."""
        return cls(a, b - a, c - a, d - a)

    def volume(self) -> float:
        """Signed volume: the scalar triple product of the edges divided by six."""
        return self.a.dot(self.b.cross(self.c)) / 6.0

    def pt_1(self) -> Vector3:
        return self.origin

    def pt_2(self) -> Vector3:
        return self.origin + self.a

    def pt_3(self) -> Vector3:
        return self.origin + self.b

    def pt_4(self) -> Vector3:
        return self.origin + self.c

    def point_in(self, point: Vector3) -> bool:
        offset = point - self.origin
        local = Vector3(
            offset.dot(self.a) / self.a.dot(self.a),
            offset.dot(self.b) / self.b.dot(self.b),
            offset.dot(self.c) / self.c.dot(self.c),
        )
        return (
            local.x >= 0.0
            and local.y >= 0.0
            and local.z >= 0.0
            and local.dot(Vector3(1.0, 1.0, 1.0)) <= 1.0
        )

    def surface(self) -> tuple[SimpleTriangle, SimpleTriangle, SimpleTriangle, SimpleTriangle]:
        """The four faces; normals point outward when the volume is positive."""
        p1, p2, p3, p4 = self.pt_1(), self.pt_2(), self.pt_3(), self.pt_4()
        return (
            SimpleTriangle(p1, p3, p2),
            SimpleTriangle(p1, p4, p3),
            SimpleTriangle(p1, p2, p4),
            SimpleTriangle(p2, p3, p4),
        )

    def surface_area(self) -> float:
        return sum(face.area() for face in self.surface())


def _format_number(value: float) -> str:
    """Shortest plain decimal form, integers without a fractional part."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        return "-0" if value == 0.0 and math.copysign(1.0, value) < 0 else text
    text = repr(value)
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


@dataclass(frozen=True)
class Polyhedron:
    """A closed surface of triangles given as indices into a list of points."""

    points: tuple[Vector3, ...]
    faces: tuple[tuple[int, int, int], ...]

    def __init__(
        self, points: Iterable[Vector3], faces: Iterable[tuple[int, int, int]]
    ) -> None:
        object.__setattr__(self, "points", tuple(points))
        object.__setattr__(self, "faces", tuple(tuple(face) for face in faces))

    @classmethod
    def cube(cls) -> Polyhedron:
        return cls(
            [
                Vector3.zero(),
                Vector3.ihat(),
                Vector3.jhat(),
                Vector3.khat(),
                Vector3(0.0, 1.0, 1.0),
                Vector3(1.0, 0.0, 1.0),
                Vector3(1.0, 1.0, 0.0),
                Vector3(1.0, 1.0, 1.0),
            ],
            [
                (0, 2, 1),
                (0, 1, 3),
                (0, 3, 2),
                (6, 1, 2),
                (5, 3, 1),
                (4, 2, 3),
                (4, 5, 7),
                (4, 7, 6),
                (5, 6, 7),
                (4, 3, 5),
                (4, 6, 2),
                (5, 1, 6),
            ],
        )

    def triangles(self) -> list[SimpleTriangle]:
        """The faces as triangles."""
        return [
            SimpleTriangle(self.points[i], self.points[j], self.points[k])
            for i, j, k in self.faces
        ]

    def volume(self) -> float:
        """Signed volume as a sum of tetrahedra rooted at the first point."""
        apex = self.points[0]
        return sum(
            Tetrahedron.from_points(
                apex, self.points[i], self.points[j], self.points[k]
            ).volume()
            for i, j, k in self.faces
        )

    def to_obj(self) -> str:
        """The polyhedron as Wavefront OBJ text with one-based face indices."""
        lines = ["# Automatically generated from polyhederon by YAGL"]
        lines.extend(
            f"v {_format_number(p.x)} {_format_number(p.y)} {_format_number(p.z)}"
            for p in self.points
        )
        lines.extend(f"f {i + 1} {j + 1} {k + 1}" for i, j, k in self.faces)
        return "\n".join(lines) + "\n"