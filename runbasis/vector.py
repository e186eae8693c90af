"""Small 3- and 4-component vectors used by the math and graphics code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def splat(cls, n: float) -> Vec4:
        """Build a vector with every component set to ``n``."""
        return cls(n, n, n, n)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Vec4) -> Vec4:
        """Component-wise product."""
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)

    def __neg__(self) -> Vec4:
        return self.negate()

    def negate(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def normalize(self) -> Vec4:
        """Return the unit vector pointing the same way."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec4(self.x / length, self.y / length, self.z / length, self.w / length)

    def scale(self, n: float) -> Vec4:
        return Vec4(self.x * n, self.y * n, self.z * n, self.w * n)

    def cross(self, v: Vec4) -> Vec4:
        """Cross product of the xyz parts; the result has ``w`` set to zero."""
        return Vec4(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
            0.0,
        )


@dataclass
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, n: float) -> Vec3:
        """Build a vector with every component set to ``n``."""
        return cls(n, n, n)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __neg__(self) -> Vec3:
        return self.negate()

    def negate(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def normalize(self) -> Vec3:
        """Return the unit vector pointing the same way; a zero vector is returned unchanged."""
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if length == 0.0:
            return Vec3(self.x, self.y, self.z)
        return Vec3(self.x / length, self.y / length, self.z / length)

    def scale(self, n: float) -> Vec3:
        return Vec3(self.x * n, self.y * n, self.z * n)

    def cross(self, v: Vec3) -> Vec3:
        """Vector perpendicular to both operands; zero when they are parallel."""
        return Vec3(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
        )