"""Curves that objects move along."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from raytracer.aabb import AABB
from raytracer.interval import Interval
from raytracer.vector import Point3, lerp


def _segment_index(value: float) -> int:
    # Negative and NaN parameters fall into the first segment.
    if not value > 0.0:
        return 0
    if math.isinf(value):
        raise IndexError("spline parameter out of range")
    return int(value)


class Curve(ABC):
    """A parametric curve in space."""

    @abstractmethod
    def sample(self, u: float) -> Point3:
        """The point on the curve at parameter ``u``."""


class BoundedCurve(Curve):
    """A curve that can report boxes enclosing parts of itself."""

    @abstractmethod
    def bound_interval(self, interval: Interval) -> AABB:
        """A box enclosing the curve over the parameters in ``interval``."""

    def bound(self) -> AABB:
        return self.bound_interval(Interval.UNIVERSE)

    def bound_radius(self, radius: float) -> AABB:
        """A box enclosing a ball of ``radius`` moved along the whole curve."""
        return self.bound().expand(radius)

    def bound_segment_radius(self, interval: Interval, radius: float) -> AABB:
        return self.bound_interval(interval).expand(radius)


class LinearSpline(BoundedCurve):
    """Straight segments between control points, one per unit of parameter."""

    def __init__(self, controls: Iterable[Point3]) -> None:
        self.controls: tuple[Point3, ...] = tuple(controls)

    def bound_segment(self, segment: int) -> AABB:
        if not 0 <= segment < len(self.controls) - 1:
            raise IndexError(f"spline has no segment {segment}")
        return AABB.from_points(self.controls[segment], self.controls[segment + 1])

    def sample(self, u: float) -> Point3:
        segment = _segment_index(math.floor(u))
        t = math.modf(u)[0]
        if segment + 1 >= len(self.controls):
            raise IndexError(f"spline parameter {u} is past the last control point")
        return lerp(self.controls[segment], self.controls[segment + 1], t)

    def bound_interval(self, interval: Interval) -> AABB:
        if len(self.controls) < 2:
            raise ValueError("a linear spline needs at least two control points")
        segments = Interval(0.0, float(len(self.controls) - 2))
        first = _segment_index(segments.clamp(interval.min))
        last = _segment_index(segments.clamp(interval.max))
        return AABB.enclose(self.bound_segment(first), self.bound_segment(last))


class ConstantSpline(BoundedCurve):
    """A curve that stays at one point."""

    def __init__(self, point: Point3) -> None:
        self.point = point

    def sample(self, u: float) -> Point3:
        return self.point

    def bound_interval(self, interval: Interval) -> AABB:
        return AABB.from_points(self.point, self.point)