import math
from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from Core.agent import Agent, AgentState
from Core.exceptions import ConfigurationError
from Core.problem import DIMENSIONS
from Core.search_algorithm import SearchAlgorithm


@dataclass
class BatState(AgentState):
    """Echolocation parameters carried by each bat."""
    frequency: float
    loudness: float
    pulse_rate: float
    initial_pulse_rate: float


@dataclass(frozen=True)
class BatParameters:
    """
    Args:
        f_min, f_max: Frequency range; a bat's frequency scales its pull toward the best.
        alpha: Loudness decay factor applied on every accepted move (0 < alpha <= 1).
        gamma: Pulse-rate growth rate (>= 0).
        initial_loudness: Starting loudness A0; also the acceptance probability at start.
        initial_pulse_rate: Asymptotic pulse rate r0 in [0, 1].
    """
    f_min: float = 0.0
    f_max: float = 2.0
    alpha: float = 0.9
    gamma: float = 0.9
    initial_loudness: float = 1.0
    initial_pulse_rate: float = 0.5

    def validate(self):
        if self.f_min > self.f_max:
            raise ConfigurationError(f"f_min ({self.f_min}) must not exceed f_max ({self.f_max}).")
        if not 0 < self.alpha <= 1:
            raise ConfigurationError(f"alpha must lie in (0, 1], got {self.alpha}.")
        if self.gamma < 0:
            raise ConfigurationError(f"gamma must be non-negative, got {self.gamma}.")
        if self.initial_loudness < 0:
            raise ConfigurationError(f"initial_loudness must be non-negative, got {self.initial_loudness}.")
        if not 0 <= self.initial_pulse_rate <= 1:
            raise ConfigurationError(f"initial_pulse_rate must lie in [0, 1], got {self.initial_pulse_rate}.")


class BatAlgorithm(SearchAlgorithm):
    """
    Bat Algorithm (Yang, 2010).

    Each bat flies with a velocity pulled toward or away from the global best
    by a random frequency. With probability ``1 - pulse_rate`` it instead
    takes a random walk around the global best scaled by the population's mean
    loudness. A move is kept only if it improves the bat and passes the
    loudness gate; accepted moves make the bat quieter and raise its pulse
    rate toward ``initial_pulse_rate``.

    Updates are synchronous: proposals for every bat are computed from the
    population as it stood at the start of the iteration, then evaluated and
    settled one bat at a time.

    Variants override the proposal hooks (``sample_frequency``,
    ``new_velocity``, ``use_local_search``, ``local_search``) or the acceptance
    hooks (``accept``, ``on_accept``, ``on_reject``).
    """
    name = "Bat Algorithm"
    parameters_cls = BatParameters

    def _validate(self):
        self.params.validate()

    def create_agent(self) -> Agent:
        position = self.random_position()
        return Agent(
            position=position,
            fitness=self.evaluate(position),
            velocity=np.zeros(DIMENSIONS),
            state=self._create_state(),
        )

    def _create_state(self) -> BatState:
        p = self.params
        return BatState(
            frequency=self.rng.uniform_range(p.f_min, p.f_max),
            loudness=p.initial_loudness,
            pulse_rate=p.initial_pulse_rate,
            initial_pulse_rate=p.initial_pulse_rate,
        )

    def mean_loudness(self) -> float:
        return float(np.mean([bat.state.loudness for bat in self.population]))

    def get_state(self) -> Dict[str, Any]:
        return {
            "mean_loudness": self.mean_loudness(),
            "mean_pulse_rate": float(np.mean([bat.state.pulse_rate for bat in self.population])),
        }

    # --- Iteration -----------------------------------------------------------
    def update_population(self):
        self._prepare_iteration()
        best = self.global_best.position.copy()
        proposals = [self.propose(index, bat, best) for index, bat in enumerate(self.population)]
        for bat, proposal in zip(self.population, proposals):
            self._settle(bat, proposal)
            self.update_global_best(bat)

    def _prepare_iteration(self):
        """Computes values shared by every bat in this iteration."""
        self._mean_loudness = self.mean_loudness()

    def propose(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        """Candidate position for ``bat``; updates its frequency and velocity."""
        bat.state.frequency = self.sample_frequency(bat)
        bat.velocity = self.new_velocity(index, bat, best)
        proposal = bat.position + bat.velocity
        if self.use_local_search(bat):
            proposal = self.local_search(index, bat, best)
        return proposal

    def _settle(self, bat: Agent, proposal: np.ndarray):
        candidate = self.clamp(proposal)
        fitness = self.evaluate(candidate)
        if self.accept(bat, fitness):
            bat.position = candidate
            bat.fitness = fitness
            self.on_accept(bat)
        else:
            self.on_reject(bat)

    # --- Proposal hooks ------------------------------------------------------
    def sample_frequency(self, bat: Agent) -> float:
        return self.rng.uniform_range(self.params.f_min, self.params.f_max)

    def new_velocity(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        return bat.velocity + (bat.position - best) * bat.state.frequency

    def use_local_search(self, bat: Agent) -> bool:
        return self.rng.uniform() > bat.state.pulse_rate

    def local_search(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        """Random walk around the global best scaled by the mean loudness."""
        return best + self.random_vector(self._mean_loudness)

    # --- Acceptance hooks ----------------------------------------------------
    def accept(self, bat: Agent, fitness: float) -> bool:
        return self.rng.uniform() < bat.state.loudness and fitness < bat.fitness

    def on_accept(self, bat: Agent):
        state = bat.state
        state.loudness *= self.params.alpha
        state.pulse_rate = state.initial_pulse_rate * (1 - math.exp(-self.params.gamma * self.iteration))

    def on_reject(self, bat: Agent):
        pass
