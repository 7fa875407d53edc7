"""Positions paired with orientations."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from yagl.rotation3 import Rotation3
from yagl.vectors import Vector3


@dataclass(frozen=True)
class Pose3:
    """An immutable position and orientation in three dimensions."""

    position: Vector3
    orientation: Rotation3

    @classmethod
    def zero(cls) -> Pose3:
        return cls(Vector3.zero(), Rotation3.identity())

    def _compose(self, other: Pose3) -> Pose3:
        return Pose3(
            self.position + self.orientation.rotate_vector(other.position),
            other.orientation + self.orientation,
        )

    def __add__(self, other: Pose3) -> Pose3:
        if not isinstance(other, Pose3):
            return NotImplemented
        return self._compose(other)

    def __neg__(self) -> Pose3:
        inverse = -self.orientation
        return Pose3(inverse.rotate_vector(-self.position), inverse)

    def __sub__(self, other: Pose3) -> Pose3:
        """Composes exactly as addition does."""
        if not isinstance(other, Pose3):
            return NotImplemented
        return self._compose(other)

    def __mul__(self, factor: float) -> Pose3:
        if not isinstance(factor, Real):
            return NotImplemented
        return Pose3(self.position * factor, self.orientation * factor)