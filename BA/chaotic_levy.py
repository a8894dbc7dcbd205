from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from Core.problem import DIMENSIONS
from operators.chaos import ChaosGenerator, get_chaos_map
from operators.levy import levy_step
from .BA import BatAlgorithm, BatParameters


@dataclass(frozen=True)
class ChaoticLevyBatParameters(BatParameters):
    """
    Args:
        chaos_map: One of ``operators.chaos.CHAOS_MAPS``.
        levy_beta: Lévy exponent in (0, 2].
        chaos_seed: Start value of the chaos sequence; random in [0.1, 0.9) when None.
    """
    chaos_map: str = "logistic"
    levy_beta: float = 1.5
    chaos_seed: Optional[float] = None

    def validate(self):
        super().validate()
        get_chaos_map(self.chaos_map)
        if not 0 < self.levy_beta <= 2:
            raise ConfigurationError(f"levy_beta must lie in (0, 2], got {self.levy_beta}.")


class ChaoticLevyBatAlgorithm(BatAlgorithm):
    """
    Bat Algorithm driven by a chaos map and Lévy flights.

    One chaos value is advanced per iteration and shared by every bat: it sets
    the frequency and, together with the following value of the sequence,
    the direction of the local walk. Each velocity update also gets a Lévy
    jump of 1% of the search range per axis.
    """
    name = "Chaotic Lévy Bat Algorithm"
    parameters_cls = ChaoticLevyBatParameters

    def reset(self):
        self.chaos = ChaosGenerator(self.params.chaos_map, self.params.chaos_seed, self.rng)
        super().reset()

    def get_state(self) -> Dict[str, Any]:
        state = super().get_state()
        state["chaos_value"] = self.chaos.get_state()
        return state

    def _prepare_iteration(self):
        super()._prepare_iteration()
        self._chaos_value = self.chaos.next()

    def sample_frequency(self, bat: Agent) -> float:
        p = self.params
        return p.f_min + (p.f_max - p.f_min) * self._chaos_value

    def new_velocity(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        jump_scale = 0.01 * self.bounds.range
        levy = np.array([levy_step(self.params.levy_beta, self.rng) for _ in range(DIMENSIONS)])
        return super().new_velocity(index, bat, best) + levy * jump_scale

    def local_search(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        directions = np.array([self._chaos_value, self.chaos.peek()]) * 2 - 1
        return best + self._mean_loudness * directions
