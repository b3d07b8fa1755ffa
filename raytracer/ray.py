"""Rays and the recursive colour estimate along them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from raytracer.color import Color
from raytracer.interval import Interval
from raytracer.vector import Point3, Vector3, lerp

_SKY_TOP = Color(0.5, 0.7, 1.0)
_SKY_BOTTOM = Color(1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Ray:
    """A ray from ``origin`` along ``direction`` at a given ``time``."""

    origin: Point3
    direction: Vector3
    time: float = 0.0

    def at(self, t: float) -> Point3:
        return self.origin + self.direction * t

    def color(self, max_depth: int, world: Any) -> Color:
        """The colour seen along this ray, bouncing at most ``max_depth`` times.

        ``world`` provides ``hit(ray, ray_t)`` returning a hit record or None;
        the record's material provides ``scatter(ray, hit)`` returning an
        ``(attenuation, scattered_ray)`` pair or None.
        """
        attenuation = Color.WHITE
        ray = self
        for _ in range(max_depth):
            hit = world.hit(ray, Interval(0.001, math.inf))
            if hit is None:
                unit_dir = ray.direction.unit()
                a = 0.5 * (unit_dir.y + 1.0)
                return attenuation * lerp(_SKY_BOTTOM, _SKY_TOP, a)
            scattered = hit.material.scatter(ray, hit)
            if scattered is None:
                return Color.BLACK
            step_attenuation, ray = scattered
            attenuation = attenuation * step_attenuation
        return Color.BLACK