import math
from typing import Any, Dict

import numpy as np

from Core.agent import Agent
from .BA import BatAlgorithm


class AdaptiveBatAlgorithm(BatAlgorithm):
    """
    Bat Algorithm whose frequency follows population diversity.

    Diversity is the mean distance to the population centroid, normalised by
    the largest possible spread ``range * sqrt(2)``. A collapsed swarm gets
    frequencies near ``f_max`` to push bats apart, and a spread-out swarm gets
    frequencies near ``f_min``. The local random walk shrinks as diversity
    grows, never below 1% of the search range.
    """
    name = "Adaptive Bat Algorithm"

    def diversity(self) -> float:
        positions = np.array([bat.position for bat in self.population])
        centroid = positions.mean(axis=0)
        return float(np.mean(np.sqrt(np.sum((positions - centroid) ** 2, axis=1))))

    def max_diversity(self) -> float:
        return self.bounds.range * math.sqrt(2)

    def get_state(self) -> Dict[str, Any]:
        state = super().get_state()
        state["diversity"] = self.diversity()
        return state

    def _prepare_iteration(self):
        super()._prepare_iteration()
        normalised = self.diversity() / self.max_diversity()
        p = self.params
        self._adaptive_frequency = p.f_min + (p.f_max - p.f_min) * (1 - normalised)
        self._perturbation_scale = max(0.01, 0.1 * (1 - normalised))

    def sample_frequency(self, bat: Agent) -> float:
        return self._adaptive_frequency * (0.8 + self.rng.uniform() * 0.4)

    def local_search(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        return best + self.random_vector(self._perturbation_scale * self.bounds.range)
