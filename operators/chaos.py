"""
Chaos maps used in place of uniform draws by chaotic variants.
"""

import math
from typing import Callable, Dict, Optional

from Core.exceptions import ConfigurationError
from Core.random_source import RandomSource, default_random

ChaosMap = Callable[[float], float]


def logistic_map(x: float) -> float:
    return 4.0 * x * (1.0 - x)


def tent_map(x: float) -> float:
    return 2.0 * x if x < 0.5 else 2.0 * (1.0 - x)


def sinusoidal_map(x: float) -> float:
    return math.sin(math.pi * x)


def circle_map(x: float) -> float:
    """Rotation by 0.5 with a sinusoidal kick, folded back into [0, 1)."""
    value = x + 0.5 - (0.5 / (2.0 * math.pi)) * math.sin(2.0 * math.pi * x)
    return value - math.floor(value)


def gauss_map(x: float) -> float:
    if x == 0:
        return 0.0
    value = 1.0 / x
    return value - math.floor(value)


CHAOS_MAPS: Dict[str, ChaosMap] = {
    "logistic": logistic_map,
    "tent": tent_map,
    "sinusoidal": sinusoidal_map,
    "sine": sinusoidal_map,
    "circle": circle_map,
    "gauss": gauss_map,
}


def get_chaos_map(map_type: str) -> ChaosMap:
    try:
        return CHAOS_MAPS[map_type]
    except KeyError:
        raise ConfigurationError(
            f"Unknown chaos map {map_type!r}; choose from {sorted(CHAOS_MAPS)}"
        ) from None


class ChaosGenerator:
    """
    Iterates a single chaos map from a scalar state.

    Without an explicit seed the start value is drawn from [0.1, 0.9), away from
    the fixed points of the logistic map.
    """

    def __init__(self, map_type: str = "logistic", seed: Optional[float] = None,
                 rng: Optional[RandomSource] = None):
        self.map_type = map_type
        self._map = get_chaos_map(map_type)
        self._rng = rng or default_random()
        self.state = self._initial_state(seed)

    def _initial_state(self, seed: Optional[float]) -> float:
        if seed is not None:
            return float(seed)
        return 0.1 + self._rng.uniform() * 0.8

    def next(self) -> float:
        """Advances the state and returns it."""
        self.state = self._map(self.state)
        return self.state

    def next_in_range(self, low: float, high: float) -> float:
        return low + self.next() * (high - low)

    def peek(self) -> float:
        """The value ``next()`` would return, without advancing."""
        return self._map(self.state)

    def reset(self, seed: Optional[float] = None):
        self.state = self._initial_state(seed)

    def get_state(self) -> float:
        return self.state


def create_chaotic_random(map_type: str = "logistic", seed: Optional[float] = None,
                          rng: Optional[RandomSource] = None) -> Callable[[], float]:
    """A zero-argument callable yielding successive chaos values, usable like ``random()``."""
    generator = ChaosGenerator(map_type, seed, rng)
    return generator.next
