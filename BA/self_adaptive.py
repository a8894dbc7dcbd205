import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from .BA import BatAlgorithm, BatParameters


@dataclass(frozen=True)
class SelfAdaptiveBatParameters(BatParameters):
    """``max_iterations`` falls back to ``OptimizerConfig.max_iterations``."""
    max_iterations: Optional[int] = None


class SelfAdaptiveBatAlgorithm(BatAlgorithm):
    """
    Bat Algorithm with frequency, loudness and pulse rate scheduled on run progress.

    With ``p = iteration / max_iterations`` (capped at 1):
    frequency ``(2(1 - p) + 0.1) * U(0.5, 1.5)``, loudness scaled by
    ``1 - 0.9p``, pulse rate ``0.9p(1 - exp(-0.1t))``. ``f_min``, ``f_max``,
    ``alpha`` and ``gamma`` are not used.
    """
    name = "Self-Adaptive Bat Algorithm"
    parameters_cls = SelfAdaptiveBatParameters

    def _validate(self):
        super()._validate()
        horizon = self.params.max_iterations
        if horizon is None:
            horizon = self.config.max_iterations
        if horizon is None:
            raise ConfigurationError(f"{self.name} requires max_iterations.")
        if horizon <= 0:
            raise ConfigurationError(f"max_iterations must be positive, got {horizon}.")
        self.max_iterations = horizon

    def progress(self) -> float:
        return min(self.iteration / self.max_iterations, 1.0)

    def adaptive_frequency(self) -> float:
        return 2 * (1 - self.progress()) + 0.1

    def adaptive_loudness(self, loudness: float) -> float:
        return loudness * (1 - self.progress() * 0.9)

    def adaptive_pulse_rate(self) -> float:
        return 0.9 * self.progress() * (1 - math.exp(-0.1 * self.iteration))

    def get_state(self) -> Dict[str, Any]:
        state = super().get_state()
        state["progress"] = self.progress()
        return state

    def _prepare_iteration(self):
        super()._prepare_iteration()
        self._frequency = self.adaptive_frequency()
        self._pulse_rate = self.adaptive_pulse_rate()

    def sample_frequency(self, bat: Agent) -> float:
        return self._frequency * (0.5 + self.rng.uniform())

    def use_local_search(self, bat: Agent) -> bool:
        return self.rng.uniform() > self._pulse_rate

    def local_search(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        return best + self.random_vector(self.adaptive_loudness(bat.state.loudness))

    def accept(self, bat: Agent, fitness: float) -> bool:
        return self.rng.uniform() < self.adaptive_loudness(bat.state.loudness) and fitness < bat.fitness

    def on_accept(self, bat: Agent):
        bat.state.loudness = self.adaptive_loudness(bat.state.loudness)
        bat.state.pulse_rate = self._pulse_rate
