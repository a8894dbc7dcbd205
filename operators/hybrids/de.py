"""
Differential Evolution mutation and crossover.
"""

from typing import List, Optional, Sequence

import numpy as np

from Core.random_source import RandomSource, default_random

# Number of distinct donors each strategy draws besides the target.
DE_STRATEGIES = {
    "rand/1": 3,
    "best/1": 2,
    "rand/2": 5,
    "best/2": 4,
    "current-to-best/1": 2,
}


def select_random_indices(population_size: int, count: int, exclude: Sequence[int] = (),
                          rng: Optional[RandomSource] = None) -> List[int]:
    """``count`` distinct indices in ``[0, population_size)`` avoiding ``exclude``."""
    rng = rng or default_random()
    excluded = set(exclude)
    if population_size - len(excluded) < count:
        raise ValueError(
            f"Cannot draw {count} distinct indices from {population_size} with {len(excluded)} excluded."
        )
    indices: List[int] = []
    while len(indices) < count:
        idx = rng.integer(population_size)
        if idx not in excluded and idx not in indices:
            indices.append(idx)
    return indices


def de_mutation(positions: Sequence[np.ndarray], target_index: int, global_best: np.ndarray,
                f: float = 0.5, strategy: str = "rand/1",
                rng: Optional[RandomSource] = None) -> np.ndarray:
    """
    Mutant vector for ``positions[target_index]``.

    ``rand/1``: ``x_r1 + F(x_r2 - x_r3)``; ``best/1``: ``best + F(x_r1 - x_r2)``;
    ``rand/2`` and ``best/2`` add a second difference; ``current-to-best/1``:
    ``x + F(best - x) + F(x_r1 - x_r2)``.
    """
    if strategy not in DE_STRATEGIES:
        raise ValueError(f"Unknown DE strategy {strategy!r}; choose from {sorted(DE_STRATEGIES)}")
    r = select_random_indices(len(positions), DE_STRATEGIES[strategy], [target_index], rng)
    x = [np.asarray(positions[i], dtype=float) for i in r]
    best = np.asarray(global_best, dtype=float)
    target = np.asarray(positions[target_index], dtype=float)

    if strategy == "rand/1":
        return x[0] + f * (x[1] - x[2])
    if strategy == "best/1":
        return best + f * (x[0] - x[1])
    if strategy == "rand/2":
        return x[0] + f * (x[1] - x[2]) + f * (x[3] - x[4])
    if strategy == "best/2":
        return best + f * (x[0] - x[1]) + f * (x[2] - x[3])
    return target + f * (best - target) + f * (x[0] - x[1])


def de_crossover(target: np.ndarray, mutant: np.ndarray, cr: float,
                 rng: Optional[RandomSource] = None) -> np.ndarray:
    """Binomial crossover; the ``j_rand`` axis always comes from the mutant."""
    rng = rng or default_random()
    target = np.asarray(target, dtype=float)
    j_rand = rng.integer(target.size)
    trial = target.copy()
    for j in range(target.size):
        if rng.uniform() < cr or j == j_rand:
            trial[j] = mutant[j]
    return trial


def de_operator(positions: Sequence[np.ndarray], target_index: int, global_best: np.ndarray,
                f: float = 0.5, cr: float = 0.9, strategy: str = "rand/1",
                rng: Optional[RandomSource] = None) -> np.ndarray:
    """Mutation followed by crossover; returns the trial vector."""
    mutant = de_mutation(positions, target_index, global_best, f, strategy, rng)
    return de_crossover(positions[target_index], mutant, cr, rng)
