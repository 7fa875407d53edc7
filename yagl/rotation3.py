"""Rotations in three dimensions backed by quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real

from yagl.quaternion import Quaternion
from yagl.vectors import Vector3


@dataclass(frozen=True)
class Rotation3:
    """An immutable rotation stored as a quaternion."""

    q: Quaternion = field(default_factory=Quaternion)

    @classmethod
    def identity(cls) -> Rotation3:
        return cls(Quaternion())

    @classmethod
    def from_axis_angle(cls, v: Vector3) -> Rotation3:
        """Rotation about ``v`` by its magnitude in radians."""
        return cls(Quaternion.from_rotation_vector(v))

    def rotate_vector(self, vector: Vector3) -> Vector3:
        """Vector part of ``v * q * v⁻¹`` with ``v`` taken as a pure quaternion."""
        as_quaternion = Quaternion.from_scalar_vector(0.0, vector)
        return (as_quaternion * self.q * as_quaternion.inverse()).vector

    def __neg__(self) -> Rotation3:
        return Rotation3(self.q.inverse())

    def __add__(self, other: Rotation3) -> Rotation3:
        if not isinstance(other, Rotation3):
            return NotImplemented
        return Rotation3(other.q * self.q)

    def __sub__(self, other: Rotation3) -> Rotation3:
        if not isinstance(other, Rotation3):
            return NotImplemented
        return Rotation3(other.q.inverse() * self.q)

    def __mul__(self, factor: float) -> Rotation3:
        if not isinstance(factor, Real):
            return NotImplemented
        w = self.q.w
        axis = self.q.vector
        if w >= 0.0:
            return Rotation3.from_axis_angle(axis.with_magnitude(2.0 * factor * math.acos(w)))
        return Rotation3.from_axis_angle(-axis.with_magnitude(2.0 * factor * math.acos(-w)))

    def __truediv__(self, divisor: float) -> Rotation3:
        if not isinstance(divisor, Real):
            return NotImplemented
        return self * (1.0 / divisor)