"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from runbasis.vector import Vec3, Vec4


@dataclass
class AABB:
    """Box given by its minimum and maximum corners."""

    min: Vec3
    max: Vec3

    @classmethod
    def from_vertices(cls, vertices: Sequence[Vec4]) -> AABB:
        """Smallest box holding the xyz parts of every vertex."""
        if not vertices:
            raise ValueError("cannot build a bounding box from no vertices")
        xs = [v.x for v in vertices]
        ys = [v.y for v in vertices]
        zs = [v.z for v in vertices]
        return cls(
            min=Vec3(min(xs), min(ys), min(zs)),
            max=Vec3(max(xs), max(ys), max(zs)),
        )