"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from raytracer.interval import Interval
from raytracer.ray import Ray
from raytracer.vector import Point3


def _inverse(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(frozen=True, slots=True)
class AABB:
    """A box given by one interval per axis."""

    x: Interval
    y: Interval
    z: Interval

    EMPTY: ClassVar[AABB]
    UNIVERSE: ClassVar[AABB]

    @classmethod
    def from_points(cls, a: Point3, b: Point3) -> AABB:
        """The box with opposite corners ``a`` and ``b``."""
        return cls(
            Interval(min(a.x, b.x), max(a.x, b.x)) if a.x <= b.x else Interval(b.x, a.x),
            Interval(a.y, b.y) if a.y <= b.y else Interval(b.y, a.y),
            Interval(a.z, b.z) if a.z <= b.z else Interval(b.z, a.z),
        )

    @staticmethod
    def enclose(a: AABB, b: AABB) -> AABB:
        return AABB(
            Interval.enclose(a.x, b.x),
            Interval.enclose(a.y, b.y),
            Interval.enclose(a.z, b.z),
        )

    def expand(self, delta: float) -> AABB:
        return AABB(self.x.expand(delta), self.y.expand(delta), self.z.expand(delta))

    def test(self, ray: Ray, ray_t: Interval) -> Interval | None:
        """The part of ``ray_t`` during which ``ray`` is inside the box, if any."""
        lo, hi = ray_t.min, ray_t.max
        axes = (
            (self.x, ray.origin.x, ray.direction.x),
            (self.y, ray.origin.y, ray.direction.y),
            (self.z, ray.origin.z, ray.direction.z),
        )
        for interval, origin, direction in axes:
            adinv = _inverse(direction)
            t0 = (interval.min - origin) * adinv
            t1 = (interval.max - origin) * adinv
            if t0 < t1:
                if t0 > lo:
                    lo = t0
                if t1 < hi:
                    hi = t1
            else:
                if t1 > lo:
                    lo = t1
                if t0 < hi:
                    hi = t0
            if hi <= lo:
                return None
        return Interval(lo, hi)

    def longest_axis(self) -> int:
        """Index of the axis to split along: 0 for x, 1 for y, 2 for z."""
        if self.x.size() > self.z.size():
            return 0
        return 1 if self.y.size() > self.z.size() else 2

    def is_norm(self) -> bool:
        return self.x.is_norm() and self.y.is_norm() and self.z.is_norm()


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)