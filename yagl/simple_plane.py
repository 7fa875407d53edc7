"""Infinite planes and their intersections with points, rays, lines and segments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from yagl.line import Line, LineSegment
from yagl.matrix import Matrix3
from yagl.ray import IntersectionError, Ray
from yagl.vectors import Vector3


@dataclass(frozen=True)
class SimplePlane:
    """A plane through ``origin``; ``normal`` is normalised on construction."""

    origin: Vector3
    normal: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", self.normal.normd())

    @classmethod
    def from_mxb(cls, mx: float, my: float, c: float) -> SimplePlane:
        """The plane ``z = mx*x + my*y + c``."""
        return cls(Vector3(0.0, 0.0, c), Vector3(mx, my, -1.0))

    @classmethod
    def regress(cls, points: Iterable[Vector3]) -> tuple[SimplePlane, float]:
        """Fit ``z = mx*x + my*y + c`` to ``points``; returns the plane and squared error.

        Raises SingularMatrixError when the normal equations have no unique solution.
        """
        points = list(points)
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        sum_z = sum(p.z for p in points)
        sum_x2 = sum(p.x * p.x for p in points)
        sum_y2 = sum(p.y * p.y for p in points)
        sum_xy = sum(p.x * p.y for p in points)
        sum_xz = sum(p.x * p.z for p in points)
        sum_yz = sum(p.y * p.z for p in points)
        forward = Matrix3(
            (
                (sum_x2, sum_xy, sum_x),
                (sum_xy, sum_y2, sum_y),
                (sum_x, sum_y, 1.0),
            )
        )
        params = forward.inverse() * Vector3(sum_xz, sum_yz, sum_z)
        mx, my, c = params.x, params.y, params.z
        square_error = sum((p.x * mx + p.y * my + c - p.z) ** 2 for p in points)
        return cls.from_mxb(mx, my, c), square_error

    def point_intersects(self, point: Vector3) -> bool:
        return self.normal.dot(self.origin - point) == 0.0

    def ray_intersects(self, ray: Ray) -> Vector3:
        """Where ``ray`` meets the plane; a ray lying in the plane gives its origin."""
        origin = ray.origin - self.origin
        direction = ray.direction
        nv = direction.dot(self.normal)
        if nv == 0.0:
            if origin.dot(self.normal) != 0.0:
                raise IntersectionError("Ray is perpendicular to plane")
            return ray.origin
        t = -self.normal.dot(origin) / nv
        if t < 0.0:
            raise IntersectionError("Ray points away from plane")
        return origin + direction * t + self.origin

    def line_intersects(self, line: Line) -> Vector3:
        """Where ``line`` meets the plane; a line lying in the plane gives its origin."""
        adjusted = Line(line.origin - self.origin, line.direction)
        nv = adjusted.direction.dot(self.normal)
        if nv == 0.0:
            if adjusted.origin.dot(self.normal) != 0.0:
                raise IntersectionError("Line is perpendicular to plane")
            return line.origin
        t = -self.normal.dot(adjusted.origin) / nv
        return adjusted.origin + adjusted.direction * t + self.origin

    def segment_intersects(self, segment: LineSegment) -> Vector3:
        """Where ``segment`` meets the plane; a segment lying in the plane gives ``a``."""
        a = segment.a - self.origin
        b = segment.b - self.origin
        nv = self.normal.dot(b - a)
        if nv == 0.0:
            if a.dot(self.normal) != 0.0:
                raise IntersectionError("Line is perpendicular to plane")
            return segment.a
        t = -self.normal.dot(a) / nv
        if not 0.0 <= t <= 1.0:
            raise IntersectionError("Segment is outside the plane")
        return b * t + self.origin


@dataclass(frozen=True)
class CoordinatePlane:
    """A plane with an origin and two orthogonal axes."""

    origin: Vector3
    x: Vector3
    y: Vector3

    def __post_init__(self) -> None:
        if self.x.dot(self.y) != 0.0:
            raise ValueError("Non-orthagnal vectors cannot form a plane")