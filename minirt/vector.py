"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector; also used for points and RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return self * -1

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not scalar:
            raise ZeroDivisionError("Divider is 0")
        return self * (1 / scalar)

    def dot(self, other: Vec3) -> float:
        """Inner product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Outer product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def mult(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit(self) -> Vec3:
        """The vector scaled to length one; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def minimum(self, other: Vec3) -> Vec3:
        """Component-wise minimum of two vectors."""
        return Vec3(
            other.x if self.x > other.x else self.x,
            other.y if self.y > other.y else self.y,
            other.z if self.z > other.z else self.z,
        )

    def up(self) -> Vec3:
        """An up vector that is not parallel to this one when it points along y."""
        if self == Vec3(0, 1, 0):
            return Vec3(0, 0, 1)
        if self == Vec3(0, -1, 0):
            return Vec3(0, 0, -1)
        return Vec3(0, 1, 0)


Point3 = Vec3
Color3 = Vec3


def coordinate_system(w: Vec3) -> tuple[Vec3, Vec3]:
    """Return unit vectors (u, v) completing an orthonormal basis with ``w``."""
    u = w.up().cross(w).unit()
    v = w.cross(u).unit()
    return u, v