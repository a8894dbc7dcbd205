from typing import List, Optional, Tuple

import numpy as np

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from Core.random_source import RandomSource
from problems.benchmarks import simple_tour_length
from .binary import EncodedBatAlgorithm, EncodedObjective


def apply_swaps(permutation: np.ndarray, swaps) -> np.ndarray:
    result = np.array(permutation, copy=True)
    for i, j in swaps:
        result[i], result[j] = result[j], result[i]
    return result


class DiscreteBatAlgorithm(EncodedBatAlgorithm):
    """
    Discrete Bat Algorithm over permutations (e.g. TSP tours).

    A bat's velocity is a sequence of transpositions whose length grows with
    its frequency (``max(1, floor(3f))``). With probability ``1 - pulse_rate``
    the candidate is instead the best tour with one random swap.
    """
    name = "Discrete Bat Algorithm"

    def __init__(self, n_bats: int = 20, n_elements: int = 10,
                 objective_function: EncodedObjective = simple_tour_length, params=None, *,
                 rng: Optional[RandomSource] = None, **overrides):
        if n_elements < 2:
            raise ConfigurationError(f"A permutation needs at least 2 elements, got {n_elements}.")
        super().__init__(n_bats, n_elements, objective_function, params, rng=rng, **overrides)

    def random_position(self) -> np.ndarray:
        return np.array(self.rng.shuffle(list(range(self.size))))

    def initial_velocity(self) -> np.ndarray:
        return np.zeros((0, 2), dtype=int)

    def random_swaps(self, count: int) -> np.ndarray:
        swaps: List[Tuple[int, int]] = []
        for _ in range(count):
            a = self.rng.integer(self.size)
            b = self.rng.integer(self.size)
            while b == a:
                b = self.rng.integer(self.size)
            swaps.append((a, b))
        return np.array(swaps, dtype=int).reshape(-1, 2)

    def propose(self, bat: Agent, best: np.ndarray) -> np.ndarray:
        n_swaps = max(1, int(bat.state.frequency * 3))
        bat.velocity = self.random_swaps(n_swaps)
        if self.rng.uniform() > bat.state.pulse_rate:
            return apply_swaps(best, self.random_swaps(1))
        return apply_swaps(bat.position, bat.velocity)
