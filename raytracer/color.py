"""RGB colours and image pixels."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import ClassVar

from raytracer.interval import Interval
from raytracer.vector import Vector3

_INTENSITY = Interval(0.0, 0.999)


def linear_to_gamma(component: float) -> float:
    """Gamma-2 correction of a linear colour component."""
    return math.sqrt(component) if component > 0.0 else 0.0


@dataclass(frozen=True, slots=True)
class Color:
    """A linear RGB colour."""

    r: float
    g: float
    b: float

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    CYAN: ClassVar[Color]

    @classmethod
    def from_all(cls, n: float) -> Color:
        return cls(n, n, n)

    @classmethod
    def random(cls) -> Color:
        return cls(_random.random(), _random.random(), _random.random())

    @classmethod
    def random_with(cls, min_value: float, max_value: float) -> Color:
        return cls.random() * (max_value - min_value) + cls.from_all(min_value)

    @classmethod
    def from_vector(cls, vector: Vector3) -> Color:
        return cls(vector.x, vector.y, vector.z)

    def to_vector(self) -> Vector3:
        return Vector3(self.r, self.g, self.b)

    def to_ppm(self) -> str:
        """The colour as a gamma-corrected plain PPM pixel line."""
        r, g, b = (
            int(256.0 * _INTENSITY.clamp(linear_to_gamma(c)))
            for c in (self.r, self.g, self.b)
        )
        return f"{r} {g} {b}\n"

    def __add__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __radd__(self, other: object) -> Color:
        if isinstance(other, Vector3):
            return Color(other.x + self.r, other.y + self.g, other.z + self.b)
        return NotImplemented

    def __sub__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Color:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Color:
        if isinstance(other, (int, float)):
            return self * (1.0 / other)
        return NotImplemented


Color.WHITE = Color(1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0)
Color.CYAN = Color(0.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Pixel:
    """A colour placed at column ``i`` of row ``j``."""

    color: Color
    j: int
    i: int

    def index(self, img_width: int) -> int:
        """Row-major position of the pixel in an image ``img_width`` wide."""
        return self.i + self.j * img_width