"""Rays and the error raised when an intersection does not exist."""

from __future__ import annotations

from dataclasses import dataclass

from yagl.vectors import Vector3


class IntersectionError(ValueError):
    """Raised when a geometric intersection cannot be found."""


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` heading along ``direction``."""

    origin: Vector3
    direction: Vector3

    def points_away(self, point: Vector3) -> int:
        """Return 1 if the ray points away from ``point``, -1 if towards it, 0 if neither."""
        alignment = (point - self.origin).dot(self.direction)
        if alignment == 0.0:
            return 0
        return -1 if alignment > 0.0 else 1