"""Infinite lines and line segments."""

from __future__ import annotations

from dataclasses import dataclass

from yagl.vectors import Vector3


@dataclass(frozen=True)
class Line:
    """A line through ``origin``; ``direction`` is normalised on construction."""

    origin: Vector3
    direction: Vector3

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.direction.normd())

    def at(self, t: float) -> Vector3:
        """The point at parameter ``t`` along the line."""
        return self.origin + self.direction * t


@dataclass(frozen=True)
class LineSegment:
    """The segment between points ``a`` and ``b``."""

    a: Vector3
    b: Vector3