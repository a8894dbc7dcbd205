"""
Simulated Annealing acceptance and cooling helpers.
"""

import math
from typing import Optional, Sequence

import numpy as np

from Core.random_source import RandomSource, default_random


def get_temperature(iteration: int, t0: float = 100.0, alpha: float = 0.95,
                    t_min: Optional[float] = 0.001) -> float:
    """Geometric cooling ``T0 * alpha^t``, floored at ``t_min``."""
    t = t0 * alpha ** iteration
    return max(t, t_min) if t_min is not None else t


def acceptance_probability(delta: float, temperature: float) -> float:
    """
    Probability of accepting a move that changes the cost by ``delta``:
    1 for improvements, ``exp(-delta / T)`` otherwise, 0 once frozen.
    """
    if delta < 0:
        return 1.0
    if temperature <= 0:
        return 0.0
    try:
        return math.exp(-delta / temperature)
    except OverflowError:
        return 0.0


def metropolis_accept(current_fitness: float, new_fitness: float, temperature: float,
                      rng: Optional[RandomSource] = None) -> bool:
    delta = new_fitness - current_fitness
    if delta < 0:
        return True
    if temperature <= 0:
        return False
    rng = rng or default_random()
    return rng.uniform() < acceptance_probability(delta, temperature)


def boltzmann_probabilities(fitnesses: Sequence[float], temperature: float) -> np.ndarray:
    """Selection probabilities proportional to ``exp(-f / T)``; all mass on the best at ``T <= 0``."""
    fitnesses = np.asarray(fitnesses, dtype=float)
    if temperature <= 0:
        best = (fitnesses == fitnesses.min()).astype(float)
        return best / best.sum()
    # Shift by the minimum so exp never overflows; the normalised result is unchanged.
    weights = np.exp(-(fitnesses - fitnesses.min()) / temperature)
    return weights / weights.sum()


def generate_neighbor(position: np.ndarray, step_size: float,
                      rng: Optional[RandomSource] = None) -> np.ndarray:
    rng = rng or default_random()
    return np.array([x + rng.symmetric() * step_size for x in position])


def adaptive_step_size(t0: float, temperature: float, base_step: float) -> float:
    """Step proportional to the remaining temperature fraction."""
    return base_step * (temperature / t0)
