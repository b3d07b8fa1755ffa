"""Movement of an object of a given size along a curve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from raytracer.aabb import AABB
from raytracer.spline import BoundedCurve, ConstantSpline, LinearSpline
from raytracer.vector import Point3


@dataclass(frozen=True, slots=True)
class Animation:
    """A path for an object that extends ``size`` around each point of it."""

    curve: BoundedCurve
    size: float

    @classmethod
    def linear(cls, controls: Iterable[Point3], size: float) -> Animation:
        return cls(LinearSpline(controls), size)

    @classmethod
    def constant(cls, point: Point3, size: float) -> Animation:
        return cls(ConstantSpline(point), size)

    def bound_all(self) -> AABB:
        """A box enclosing the object over the whole animation."""
        return self.curve.bound_radius(self.size)

    def sample(self, t: float) -> Point3:
        return self.curve.sample(t)