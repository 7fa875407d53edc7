"""Quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from yagl.vectors import Vector3


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion ``w + xi + yj + zk``; defaults to the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_rotation_vector(cls, rvec: Vector3) -> Quaternion:
        """Unit quaternion for a rotation about ``rvec`` by its magnitude in radians."""
        theta = rvec.magnitude()
        if abs(theta) < 1e-9:
            return cls()
        half = theta / 2.0
        return cls.from_scalar_vector(math.cos(half), rvec.normd() * math.sin(half))

    @classmethod
    def from_scalar_vector(cls, scalar: float, vector: Vector3) -> Quaternion:
        return cls(scalar, vector.x, vector.y, vector.z)

    @property
    def scalar(self) -> float:
        return self.w

    @property
    def vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def dot(self, other: Quaternion) -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        return self.conjugate() / self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    def hat(self) -> Quaternion:
        """Unit quaternion in the same direction; the zero quaternion gives the identity."""
        norm = self.norm()
        if norm == 0.0:
            return Quaternion()
        return Quaternion(self.w / norm, self.x / norm, self.y / norm, self.z / norm)

    def exp(self) -> Quaternion:
        scalar_exp = math.exp(self.scalar)
        vector = self.vector
        magnitude = vector.magnitude()
        if magnitude < 1e-9:
            mag2 = magnitude**2
            axial_scalar = 1.0 - mag2 / 6.0 + mag2 * mag2 / 120.0
        else:
            axial_scalar = math.sin(magnitude) / magnitude
        return Quaternion.from_scalar_vector(
            math.cos(magnitude) * scalar_exp,
            vector * axial_scalar * scalar_exp,
        )

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.w - other.w, self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        if isinstance(other, Quaternion):
            a, b = self.vector, other.vector
            v = b * self.w + a * other.w + a.cross(b)
            return Quaternion(self.w * other.w - a.dot(b), v.x, v.y, v.z)
        if isinstance(other, Real):
            return Quaternion(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.w / scalar, self.x / scalar, self.y / scalar, self.z / scalar)