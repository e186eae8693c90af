"""Quaternions used to represent rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from runbasis.vector import Vec3


@dataclass
class Quaternion:
    """A rotation quaternion; the default value is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quaternion | float) -> Quaternion:
        """Hamilton product with another quaternion, or scaling by a number.

        Quaternion multiplication is not commutative.
        """
        if isinstance(other, Quaternion):
            return Quaternion(
                x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, (int, float)):
            return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    @classmethod
    def from_euler_angles(cls, axis: Vec3, radians: float) -> Quaternion:
        """Rotation of ``radians`` around ``axis``."""
        half_sin = math.sin(radians / 2.0)
        return cls(
            x=axis.x * half_sin,
            y=axis.y * half_sin,
            z=axis.z * half_sin,
            w=math.cos(radians / 2.0),
        )

    def normalize(self) -> Quaternion:
        magnitude = math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)
        if magnitude == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quaternion(
            self.x / magnitude, self.y / magnitude, self.z / magnitude, self.w / magnitude
        )

    def rotate(self, quaternion: Quaternion) -> Quaternion:
        """Return this rotation followed by ``quaternion``."""
        return quaternion * self

    def rotate_mut(self, quaternion: Quaternion) -> Quaternion:
        """Apply ``quaternion`` in place and return self."""
        rotated = self.rotate(quaternion)
        self.x, self.y, self.z, self.w = rotated.x, rotated.y, rotated.z, rotated.w
        return self