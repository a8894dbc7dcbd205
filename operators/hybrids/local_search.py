"""
Derivative-free and finite-difference local search moves.

Objective callables here take a position vector, not ``(x, y)``.
"""

import math
from typing import Callable, Optional

import numpy as np

from Core.random_source import RandomSource, default_random

VectorObjective = Callable[[np.ndarray], float]

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2


def line_search(func: VectorObjective, start: np.ndarray, direction: np.ndarray,
                step_size: float = 0.1, max_iterations: int = 20,
                tolerance: float = 1e-6) -> np.ndarray:
    """Golden-section search for ``t`` in ``[-step_size, step_size]`` along ``direction``."""
    start = np.asarray(start, dtype=float)
    direction = np.asarray(direction, dtype=float)
    a, b = -step_size, step_size
    c = b - (b - a) / GOLDEN_RATIO
    d = a + (b - a) / GOLDEN_RATIO

    for _ in range(max_iterations):
        if abs(b - a) < tolerance:
            break
        if func(start + c * direction) < func(start + d * direction):
            b = d
        else:
            a = c
        c = b - (b - a) / GOLDEN_RATIO
        d = a + (b - a) / GOLDEN_RATIO

    return start + (a + b) / 2 * direction


def powell_step(func: VectorObjective, position: np.ndarray, step_size: float = 0.1,
                max_iterations: int = 20, tolerance: float = 1e-6) -> np.ndarray:
    """One sweep of line searches along each coordinate axis."""
    current = np.asarray(position, dtype=float).copy()
    for i in range(current.size):
        direction = np.zeros(current.size)
        direction[i] = 1.0
        current = line_search(func, current, direction, step_size, max_iterations, tolerance)
    return current


def numerical_gradient(func: VectorObjective, position: np.ndarray,
                       epsilon: float = 1e-6) -> np.ndarray:
    """Central-difference gradient."""
    position = np.asarray(position, dtype=float)
    gradient = np.zeros(position.size)
    for i in range(position.size):
        offset = np.zeros(position.size)
        offset[i] = epsilon
        gradient[i] = (func(position + offset) - func(position - offset)) / (2 * epsilon)
    return gradient


def gradient_step(func: VectorObjective, position: np.ndarray, learning_rate: float = 0.01,
                  epsilon: float = 1e-6) -> np.ndarray:
    return np.asarray(position, dtype=float) - learning_rate * numerical_gradient(func, position, epsilon)


def random_perturbation(position: np.ndarray, magnitude: float,
                        rng: Optional[RandomSource] = None) -> np.ndarray:
    """Uniform jitter in ``[-magnitude, magnitude)`` per axis."""
    rng = rng or default_random()
    return np.array([x + rng.symmetric() * magnitude for x in position])


def gaussian_perturbation(position: np.ndarray, sigma: float,
                          rng: Optional[RandomSource] = None) -> np.ndarray:
    rng = rng or default_random()
    return np.array([x + rng.gaussian(0.0, sigma) for x in position])
