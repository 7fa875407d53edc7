"""Polygons in the plane."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from yagl.vectors import Vector2


@dataclass(frozen=True)
class _Triangle:
    a: Vector2
    b: Vector2
    c: Vector2

    def area(self) -> float:
        """Signed area, positive for counter-clockwise corners."""
        return (self.b - self.a).cross(self.c - self.b) / 2.0

    def point_intersects(self, point: Vector2) -> bool:
        offset = point - self.a
        ab = self.b - self.a
        ac = self.c - self.a
        x = ab / ab.dot(ab)
        y = ac / ac.dot(ac)
        u, v = x.dot(offset), y.dot(offset)
        return u >= 0.0 and v >= 0.0 and u + v <= 1.0


@dataclass(frozen=True)
class Polygon:
    """A polygon given by its corners in order."""

    points: tuple[Vector2, ...]

    def __init__(self, points: Iterable[Vector2]) -> None:
        object.__setattr__(self, "points", tuple(points))

    def area(self) -> float:
        """Signed area by fanning triangles from the first corner."""
        if not self.points:
            raise ValueError("a polygon needs at least one point")
        first = self.points[0]
        rest = self.points[1:]
        return sum(
            _Triangle(first, b, c).area() for b, c in zip(rest, rest[1:])
        )