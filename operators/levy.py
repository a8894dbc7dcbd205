"""
Lévy-flight step sampling (Mantegna's algorithm).

Heavy-tailed steps: mostly small moves with occasional long jumps, used for
exploration by the chaotic Lévy Bat and the binary Lévy Bat.
"""

import math
from typing import Optional, Sequence

import numpy as np

from Core.random_source import RandomSource, default_random
from .special import gamma


def mantegna_sigma(beta: float) -> float:
    """Standard deviation of the numerator normal in Mantegna's algorithm."""
    if not 0 < beta <= 2:
        raise ValueError(f"Lévy exponent beta must lie in (0, 2], got {beta}.")
    numerator = gamma(1 + beta) * math.sin(math.pi * beta / 2)
    denominator = gamma((1 + beta) / 2) * beta * 2 ** ((beta - 1) / 2)
    return (numerator / denominator) ** (1 / beta)


def levy_step(beta: float = 1.5, rng: Optional[RandomSource] = None) -> float:
    """One scalar Lévy step: ``u * sigma / |v|^(1/beta)`` with ``u, v ~ N(0, 1)``."""
    rng = rng or default_random()
    sigma = mantegna_sigma(beta)
    u = rng.gaussian() * sigma
    v = abs(rng.gaussian())
    while v == 0.0:
        v = abs(rng.gaussian())
    return u / v ** (1 / beta)


def levy_flight_2d(beta: float = 1.5, scale: float = 0.01,
                   rng: Optional[RandomSource] = None) -> np.ndarray:
    """2D step of Lévy magnitude in a uniformly random direction."""
    rng = rng or default_random()
    magnitude = levy_step(beta, rng) * scale
    angle = rng.uniform() * 2 * math.pi
    return np.array([magnitude * math.cos(angle), magnitude * math.sin(angle)])


def levy_flight_nd(dimensions: int, beta: float = 1.5, scale: float = 0.01,
                   rng: Optional[RandomSource] = None) -> np.ndarray:
    """Independent Lévy step per axis."""
    rng = rng or default_random()
    return np.array([levy_step(beta, rng) * scale for _ in range(dimensions)])


def apply_levy_flight(current: Sequence[float], best: Sequence[float], alpha: float = 0.01,
                      beta: float = 1.5, rng: Optional[RandomSource] = None) -> np.ndarray:
    """
    Directional Lévy move relative to the best position:
    ``x + alpha * L * (x - best)`` component-wise.
    """
    current = np.asarray(current, dtype=float)
    best = np.asarray(best, dtype=float)
    steps = levy_flight_nd(current.size, beta, 1.0, rng)
    return current + alpha * steps * (current - best)
