"""
Problem definition shared by every continuous optimizer: the 2D search box,
the objective function and the population size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import numpy as np

from .exceptions import ConfigurationError
from .random_source import RandomSource

ObjectiveFunction2D = Callable[[float, float], float]

DIMENSIONS = 2


@dataclass(frozen=True)
class Bounds:
    """Symmetric search interval applied to both axes."""
    min: float
    max: float

    def __post_init__(self):
        if not (np.isfinite(self.min) and np.isfinite(self.max)):
            raise ConfigurationError(f"Bounds must be finite, got [{self.min}, {self.max}].")
        if self.min >= self.max:
            raise ConfigurationError(f"Bounds min must be below max, got [{self.min}, {self.max}].")

    @property
    def range(self) -> float:
        return self.max - self.min

    def clamp(self, position: np.ndarray) -> np.ndarray:
        return np.clip(position, self.min, self.max)

    def contains(self, position: np.ndarray) -> bool:
        return bool(np.all(position >= self.min) and np.all(position <= self.max))


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Construction input common to all continuous optimizers.

    The object is never modified by an optimizer; algorithms that adapt a
    parameter over time keep their own working copy.

    Args:
        population_size: Number of agents (> 0).
        bounds: Search interval for both coordinates.
        objective_function: ``f(x, y) -> float`` to minimise.
        max_iterations: Optional horizon used by progress-based variants.
    """
    population_size: int
    bounds: Bounds
    objective_function: ObjectiveFunction2D
    max_iterations: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.population_size, bool) or not isinstance(self.population_size, (int, np.integer)):
            raise ConfigurationError("population_size must be an integer.")
        if self.population_size <= 0:
            raise ConfigurationError(f"population_size must be positive, got {self.population_size}.")
        if not isinstance(self.bounds, Bounds):
            raise ConfigurationError("bounds must be a Bounds instance.")
        if not callable(self.objective_function):
            raise ConfigurationError("objective_function must be callable.")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ConfigurationError(f"max_iterations must be positive, got {self.max_iterations}.")

    def evaluate(self, position: np.ndarray) -> float:
        return float(self.objective_function(float(position[0]), float(position[1])))

    def random_position(self, rng: RandomSource) -> np.ndarray:
        low, span = self.bounds.min, self.bounds.range
        return np.array([low + rng.uniform() * span for _ in range(DIMENSIONS)])

    def get_problem_info(self) -> Dict[str, Any]:
        return {
            "dimension": DIMENSIONS,
            "lower_bounds": [self.bounds.min] * DIMENSIONS,
            "upper_bounds": [self.bounds.max] * DIMENSIONS,
            "problem_type": "continuous",
            "population_size": self.population_size,
        }
