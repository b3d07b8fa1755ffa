"""Three-component vectors and small numeric helpers."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3D vector, also used for points."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_all(cls, n: float) -> Vector3:
        """A vector with every component set to ``n``."""
        return cls(n, n, n)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Vector3:
        if isinstance(other, (int, float)):
            return self * (1.0 / other)
        return NotImplemented

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.dot(self)

    def dot(self, rhs: Vector3) -> float:
        return self.x * rhs.x + self.y * rhs.y + self.z * rhs.z

    def cross(self, rhs: Vector3) -> Vector3:
        return Vector3(
            self.y * rhs.z - self.z * rhs.y,
            self.z * rhs.x - self.x * rhs.z,
            self.x * rhs.y - self.y * rhs.x,
        )

    def unit(self) -> Vector3:
        return self / self.length()

    @classmethod
    def random(cls) -> Vector3:
        """A vector with components uniform in [0, 1)."""
        return cls(_random.random(), _random.random(), _random.random())

    @classmethod
    def random_with(cls, min_value: float, max_value: float) -> Vector3:
        """A vector with components uniform in [min_value, max_value)."""
        return cls.random() * (max_value - min_value) + cls.from_all(min_value)

    @classmethod
    def random_unit(cls) -> Vector3:
        """A random vector of unit length."""
        while True:
            p = cls.random_with(-1.0, 1.0)
            lensq = p.length_squared()
            if 1e-160 < lensq <= 1.0:
                return p / math.sqrt(lensq)

    @classmethod
    def random_unit_disc(cls) -> Vector3:
        """A random vector strictly inside the unit sphere."""
        while True:
            p = cls.random() * -2.0 - cls.from_all(-1.0)
            if p.length_squared() < 1.0:
                return p

    @classmethod
    def random_on(cls, normal: Vector3) -> Vector3:
        """A random unit vector in the hemisphere around ``normal``."""
        on_sphere = cls.random_unit()
        return on_sphere if on_sphere.dot(normal) > 0.0 else -on_sphere

    def is_near_zero(self) -> bool:
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def reflect(self, normal: Vector3) -> Vector3:
        return self - normal * 2.0 * self.dot(normal)

    def refract(self, normal: Vector3, etas: float) -> Vector3:
        cos_theta = -min(self.dot(normal), 1.0)
        r_out_perp = (self + normal * cos_theta) * etas
        r_out_parallel = normal * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
        return r_out_perp + r_out_parallel


Point3 = Vector3


def lerp(a: _T, b: _T, t: float) -> _T:
    """Linear interpolation between ``a`` and ``b``."""
    return a * (1.0 - t) + b * t  # type: ignore[operator]


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0