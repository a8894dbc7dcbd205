"""
Injectable source of uniform random numbers.

Every stochastic operation in the framework draws from a ``RandomSource`` so a
run can be made reproducible by seeding one object, while the default remains
non-deterministic.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np


class RandomSource:
    """Thin wrapper over ``numpy.random.Generator`` exposing scalar draws."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self) -> float:
        """Uniform draw in [0, 1)."""
        return float(self._rng.random())

    def uniform_range(self, low: float, high: float) -> float:
        return low + (high - low) * self.uniform()

    def symmetric(self) -> float:
        """Uniform draw in [-1, 1)."""
        return self.uniform() * 2.0 - 1.0

    def integer(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        return min(int(self.uniform() * n), n - 1)

    def gaussian(self, mean: float = 0.0, std: float = 1.0) -> float:
        # Box-Muller; 1 - u keeps the log argument in (0, 1]
        u1 = 1.0 - self.uniform()
        u2 = self.uniform()
        z0 = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return z0 * std + mean

    def shuffle(self, items: list) -> list:
        """Fisher-Yates shuffle in place; returns ``items`` for chaining."""
        for i in range(len(items) - 1, 0, -1):
            j = self.integer(i + 1)
            items[i], items[j] = items[j], items[i]
        return items


_default: Optional[RandomSource] = None


def default_random() -> RandomSource:
    """Process-wide unseeded source used when no ``rng`` is supplied."""
    global _default
    if _default is None:
        _default = RandomSource()
    return _default
