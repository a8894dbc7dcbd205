from dataclasses import dataclass

import numpy as np

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from Core.problem import DIMENSIONS
from .BA import BatAlgorithm, BatParameters


@dataclass(frozen=True)
class BatHarmonyParameters(BatParameters):
    """
    Args:
        hmcr: Harmony memory considering rate; chance a coordinate is taken from memory.
        par: Pitch adjusting rate; chance a remembered coordinate is jittered.
        bw: Bandwidth of the pitch adjustment.
    """
    hmcr: float = 0.9
    par: float = 0.3
    bw: float = 0.5

    def validate(self):
        super().validate()
        for name in ("hmcr", "par"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ConfigurationError(f"{name} must lie in [0, 1], got {value}.")
        if self.bw < 0:
            raise ConfigurationError(f"bw must be non-negative, got {self.bw}.")


class BatHarmonyHybrid(BatAlgorithm):
    """
    Bat Algorithm whose local search is Harmony Search improvisation.

    When a bat skips its velocity move, each coordinate of the candidate is
    improvised independently: with probability ``hmcr`` it is copied from a
    random bat in the harmony memory (the population at the start of the
    iteration) and pitch-adjusted by up to ``bw`` with probability ``par``;
    otherwise it is drawn uniformly within bounds.
    """
    name = "Bat-Harmony Search Hybrid"
    parameters_cls = BatHarmonyParameters

    def _prepare_iteration(self):
        super()._prepare_iteration()
        self._memory = np.array([bat.position for bat in self.population])

    def harmony_value(self, dimension: int) -> float:
        p = self.params
        if self.rng.uniform() < p.hmcr:
            value = self._memory[self.rng.integer(len(self._memory))][dimension]
            if self.rng.uniform() < p.par:
                value += self.rng.symmetric() * p.bw
        else:
            value = self.bounds.min + self.rng.uniform() * self.bounds.range
        return min(max(value, self.bounds.min), self.bounds.max)

    def local_search(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        return np.array([self.harmony_value(d) for d in range(DIMENSIONS)])
