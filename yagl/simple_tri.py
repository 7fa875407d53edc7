"""Triangles in three-dimensional space."""

from __future__ import annotations

from dataclasses import dataclass

from yagl.ray import IntersectionError, Ray
from yagl.vectors import Vector2, Vector3


@dataclass(frozen=True)
class SimpleTriangle:
    """An immutable triangle with corners ``a``, ``b`` and ``c``."""

    a: Vector3
    b: Vector3
    c: Vector3

    def normal(self) -> Vector3:
        """``AB x BC / 2``: a normal whose length is the triangle's area."""
        return (self.b - self.a).cross(self.c - self.b) / 2.0

    def center(self) -> Vector3:
        return (self.a + self.b + self.c) / 3.0

    def normal_ray(self) -> Ray:
        return Ray(self.center(), self.normal())

    def area(self) -> float:
        return self.normal().magnitude()

    def point_intersects(self, point: Vector3) -> bool:
        offset = point - self.a
        b_adj = self.b - self.a
        c_adj = self.c - self.a
        if offset.dot(self.normal()) != 0.0:
            return False
        coord = Vector2(
            offset.dot(b_adj) / b_adj.dot(b_adj),
            offset.dot(c_adj) / c_adj.dot(c_adj),
        )
        return coord.x >= 0.0 and coord.y >= 0.0 and coord.x + coord.y <= 1.0

    def ray_intersects(self, ray: Ray) -> Vector3:
        """The point where ``ray`` hits the triangle; raises IntersectionError otherwise."""
        normal = self.normal()
        origin = ray.origin - self.a
        direction = ray.direction
        nv = normal.dot(direction)
        if nv == 0.0:
            if origin.dot(normal) != 0.0:
                raise IntersectionError("Ray is perpendicular to plane")
            raise IntersectionError("Ray lies completely on plane")
        t = -normal.dot(origin) / nv
        if t < 0.0:
            raise IntersectionError("Ray points away from plane")
        point = origin + direction * t + self.a
        if not self.point_intersects(point):
            raise IntersectionError("Ray intersects outside of triangle")
        return point