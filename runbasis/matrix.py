"""Column-major 4x4 matrices for model, view and projection transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from runbasis.quaternion import Quaternion
from runbasis.vector import Vec3, Vec4


def _format_component(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value)) if value != 0 or math.copysign(1.0, value) > 0 else "-0"
    return repr(float(value))


@dataclass
class Mat4:
    """A 4x4 matrix stored as four columns.

    The transform methods multiply a new transform on the left of this matrix,
    update the matrix in place and return it so calls can be chained.
    """

    c0: Vec4 = field(default_factory=Vec4)
    c1: Vec4 = field(default_factory=Vec4)
    c2: Vec4 = field(default_factory=Vec4)
    c3: Vec4 = field(default_factory=Vec4)

    def _columns(self) -> tuple[tuple[float, ...], ...]:
        return tuple(tuple(column) for column in (self.c0, self.c1, self.c2, self.c3))

    @classmethod
    def _from_columns(cls, columns: list[list[float]]) -> Mat4:
        return cls(*(Vec4(*column) for column in columns))

    def _assign(self, other: Mat4) -> Mat4:
        self.c0, self.c1, self.c2, self.c3 = other.c0, other.c1, other.c2, other.c3
        return self

    def __mul__(self, other: Mat4) -> Mat4:
        """Matrix product ``self * other``."""
        if not isinstance(other, Mat4):
            return NotImplemented
        left = self._columns()
        right = other._columns()
        return Mat4._from_columns(
            [
                [sum(left[k][row] * column[k] for k in range(4)) for row in range(4)]
                for column in right
            ]
        )

    @classmethod
    def from_diagonal(cls, vec: Vec4) -> Mat4:
        """Matrix with ``vec`` on the diagonal and zeros elsewhere."""
        return cls(
            Vec4(vec.x, 0.0, 0.0, 0.0),
            Vec4(0.0, vec.y, 0.0, 0.0),
            Vec4(0.0, 0.0, vec.z, 0.0),
            Vec4(0.0, 0.0, 0.0, vec.w),
        )

    @classmethod
    def identity(cls) -> Mat4:
        return cls.from_diagonal(Vec4.splat(1.0))

    @classmethod
    def splat(cls, n: float) -> Mat4:
        """Matrix with every element set to ``n``."""
        return cls(Vec4.splat(n), Vec4.splat(n), Vec4.splat(n), Vec4.splat(n))

    @classmethod
    def ortho(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Mat4:
        """Orthographic projection built from the scene's extents."""
        result = cls.identity()
        result.c0.x = (2.0 / (right - left)) - 1.0
        result.c1.y = (2.0 / (top - bottom)) - 1.0
        result.c2.z = -(2.0 / (far - near)) - 1.0
        return result

    @classmethod
    def symmetric_perspective(
        cls, fov: float, aspect_ratio: float, near: float, far: float
    ) -> Mat4:
        """Perspective projection with a symmetric frustum; ``fov`` is in radians."""
        half_tangent = math.tan(fov / 2.0)
        half_right = near * half_tangent
        half_top = half_right / aspect_ratio

        projection = cls.identity()
        projection.c0.x = near / half_right
        projection.c1.y = near / half_top
        projection.c2.z = -(far + near) / (far - near)
        projection.c2.w = -1.0
        projection.c3.z = -(2.0 * far * near) / (far - near)
        projection.c3.w = 0.0
        return projection

    @classmethod
    def look_at(cls, position: Vec3, target: Vec3, up_dir: Vec3) -> Mat4:
        """View matrix for an eye at ``position`` looking at ``target``."""
        forward = (position - target).normalize()
        left = up_dir.cross(forward).normalize()
        up = forward.cross(left)

        view = cls.identity()
        for row, axis in enumerate((left, up, forward)):
            for column, value in zip((view.c0, view.c1, view.c2), axis):
                setattr(column, "xyz"[row], value)
            setattr(
                view.c3,
                "xyz"[row],
                -axis.x * position.x - axis.y * position.y - axis.z * position.z,
            )
        return view

    def translate(self, vec: Vec3) -> Mat4:
        translation = Mat4.identity()
        translation.c3.x = vec.x
        translation.c3.y = vec.y
        translation.c3.z = vec.z
        return self._assign(translation * self)

    def rotate_euler(self, radians: float, r: Vec3) -> Mat4:
        """Rotate by ``radians`` around the normalized axis ``r``."""
        if not all(-1.0 <= component <= 1.0 for component in r):
            raise ValueError("rotation axis components must lie between -1 and 1")

        cos = math.cos(radians)
        sin = math.sin(radians)
        one_minus_cos = 1.0 - cos

        rotation = Mat4(
            Vec4(
                cos + r.x * r.x * one_minus_cos,
                r.y * r.x * one_minus_cos + r.z * sin,
                r.z * r.x * one_minus_cos - r.y * sin,
                0.0,
            ),
            Vec4(
                r.x * r.y * one_minus_cos - r.z * sin,
                cos + r.y * r.y * one_minus_cos,
                r.z * r.y * one_minus_cos + r.x * sin,
                0.0,
            ),
            Vec4(
                r.x * r.z * one_minus_cos + r.y * sin,
                r.y * r.z * one_minus_cos - r.x * sin,
                cos + r.z * r.z * one_minus_cos,
                0.0,
            ),
            Vec4(0.0, 0.0, 0.0, 1.0),
        )
        return self._assign(rotation * self)

    def rotate(self, quaternion: Quaternion) -> Mat4:
        """Rotate by a normalized quaternion."""
        q = quaternion
        if not all(-1.0 <= component <= 1.0 for component in (q.x, q.y, q.z, q.w)):
            raise ValueError("quaternion components must lie between -1 and 1")

        xx, yy, zz, ww = q.x * q.x, q.y * q.y, q.z * q.z, q.w * q.w
        rotation = Mat4(
            Vec4(
                ww + xx - yy - zz,
                2.0 * q.x * q.y + 2.0 * q.w * q.z,
                2.0 * q.x * q.z - 2.0 * q.w * q.y,
                0.0,
            ),
            Vec4(
                2.0 * q.x * q.y - 2.0 * q.w * q.z,
                ww - xx + yy - zz,
                2.0 * q.y * q.z + 2.0 * q.w * q.x,
                0.0,
            ),
            Vec4(
                2.0 * q.x * q.z + 2.0 * q.w * q.y,
                2.0 * q.y * q.z - 2.0 * q.w * q.x,
                ww - xx - yy + zz,
                0.0,
            ),
            Vec4(0.0, 0.0, 0.0, 1.0),
        )
        return self._assign(rotation * self)

    def rotate_around_center(self, center: Vec3, quaternion: Quaternion) -> Mat4:
        """Translate by ``center`` and then rotate by ``quaternion``."""
        self.translate(center)
        return self.rotate(quaternion)

    def scale(self, vec: Vec3) -> Mat4:
        scaling = Mat4.from_diagonal(Vec4(vec.x, vec.y, vec.z, 1.0))
        return self._assign(scaling * self)

    def to_list(self) -> list[float]:
        """The sixteen elements in column-major order, as shaders expect them."""
        return [value for column in self._columns() for value in column]

    def __str__(self) -> str:
        columns = self._columns()
        rows = [
            "     " + " ".join(_format_component(column[row]).ljust(10) for column in columns)
            for row in range(4)
        ]
        return "Mat4 {\n" + "\n".join(rows) + "\n}"