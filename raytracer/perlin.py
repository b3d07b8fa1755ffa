"""Lattice value noise."""

from __future__ import annotations

import random
from typing import Sequence

from raytracer.vector import Point3

_POINT_COUNT = 256
_INDEX_LIMIT = 2**64 - 1


def _lattice(value: float) -> int:
    # Negative and NaN coordinates saturate to cell zero, huge ones to the top.
    if not value > 0.0:
        return 0
    if value >= _INDEX_LIMIT:
        return _INDEX_LIMIT & (_POINT_COUNT - 1)
    return int(value) & (_POINT_COUNT - 1)


class Perlin:
    """Noise from a table of random values indexed by lattice cell."""

    def __init__(self, rng: random.Random | None = None) -> None:
        source = rng if rng is not None else random
        self._rand_float = tuple(source.random() for _ in range(_POINT_COUNT))
        self._perm_x = self._generate_perm()
        self._perm_y = self._generate_perm()
        self._perm_z = self._generate_perm()

    def noise(self, p: Point3) -> float:
        """A value in [0, 1) that is constant over each quarter-unit cell."""
        i = _lattice(4.0 * p.x)
        j = _lattice(4.0 * p.y)
        k = _lattice(4.0 * p.z)
        return self._rand_float[self._perm_x[i] ^ self._perm_y[j] ^ self._perm_z[k]]

    @staticmethod
    def _generate_perm() -> Sequence[int]:
        # The tables are kept in ascending order.
        return tuple(range(_POINT_COUNT))