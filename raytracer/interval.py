"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Interval:
    """An interval of real numbers from ``min`` to ``max``."""

    min: float
    max: float

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    @staticmethod
    def enclose(a: Interval, b: Interval) -> Interval:
        """The smallest interval containing both ``a`` and ``b``."""
        return Interval(
            a.min if a.min <= b.min else b.min,
            a.max if a.max >= b.max else b.max,
        )

    def size(self) -> float:
        return self.max - self.min

    def surrounds(self, x: float) -> bool:
        """Whether ``x`` lies strictly inside the interval."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        return Interval(self.min - delta, self.max + delta)

    def is_norm(self) -> bool:
        return self.min <= self.max


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)