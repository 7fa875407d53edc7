"""Two- and three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector3:
    """An immutable vector in three-dimensional space."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def ihat(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def jhat(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def khat(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle_cosine(self, other: Vector3) -> float:
        """Cosine of the angle between this vector and ``other``."""
        return self.dot(other) / (self.magnitude() * other.magnitude())

    def normd(self) -> Vector3:
        """Unit vector in the same direction.

        A vector whose x and y components are both zero is returned unchanged.
        """
        if self.x == 0.0 and self.y == 0.0:
            return self
        return self / self.magnitude()

    def with_magnitude(self, magnitude: float) -> Vector3:
        return self.normd() * magnitude

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Vector2:
    """An immutable vector in the plane."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """The z component of the three-dimensional cross product."""
        return self.x * other.y - self.y * other.x

    def angle_cosine(self, other: Vector2) -> float:
        """Cosine of the angle between this vector and ``other``."""
        return self.dot(other) / (self.magnitude() * other.magnitude())

    def normd(self) -> Vector2:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        if self.x == 0.0 and self.y == 0.0:
            return self
        return self / self.magnitude()

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)