from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from Core.agent import Agent, AgentState
from Core.exceptions import ConfigurationError
from Core.search_algorithm import SearchAlgorithm

SWARMING = "swarming"
FOLLOWING = "following"
PREYING = "preying"
RANDOM = "random"


@dataclass
class FishState(AgentState):
    """Behaviour that produced the fish's latest move (None before the first step)."""
    behavior: Optional[str] = None


@dataclass(frozen=True)
class AFSAParameters:
    """
    Args:
        visual: Radius within which other fish count as neighbours.
        step: Largest move length.
        delta: Crowding factor; swarming and following need ``neighbours / n < delta``.
        try_number: Random probes made while preying.
    """
    visual: float = 2.5
    step: float = 0.3
    delta: float = 0.618
    try_number: int = 5

    def validate(self):
        if self.visual <= 0:
            raise ConfigurationError(f"visual must be positive, got {self.visual}.")
        if self.step <= 0:
            raise ConfigurationError(f"step must be positive, got {self.step}.")
        if self.delta < 0:
            raise ConfigurationError(f"delta must be non-negative, got {self.delta}.")
        if self.try_number < 0:
            raise ConfigurationError(f"try_number must be non-negative, got {self.try_number}.")


class AFSAAlgorithm(SearchAlgorithm):
    """
    Artificial Fish Swarm Algorithm (Li et al., 2002).

    Each fish tries, in order: swarming toward the centroid of its neighbours,
    following its best neighbour, preying on a better random point within its
    visual range, and finally a random step. Swarming and following need the
    target to be strictly better and the neighbourhood to be uncrowded.

    All moves are decided from the current positions and applied together at
    the end of the iteration. ``step`` and ``delta`` are read through the
    working copies ``step_size`` and ``crowding_factor`` so variants can
    adapt them.
    """
    name = "Artificial Fish Swarm Algorithm"
    parameters_cls = AFSAParameters

    def _validate(self):
        self.params.validate()

    def reset(self):
        self.step_size = self.params.step
        self.crowding_factor = self.params.delta
        super().reset()

    def create_agent(self) -> Agent:
        agent = super().create_agent()
        agent.state = FishState()
        return agent

    def get_state(self) -> Dict[str, Any]:
        return {"step": self.step_size, "delta": self.crowding_factor}

    def update_population(self):
        moves = [self.behave(fish) for fish in self.population]
        for fish, (position, fitness, behavior) in zip(self.population, moves):
            fish.position = position
            fish.fitness = fitness
            fish.state.behavior = behavior
            self.update_global_best(fish)

    def behave(self, fish: Agent):
        """Returns ``(position, fitness, behavior)`` for the fish's next move."""
        n = len(self.population)
        neighbors = self.get_neighbors(fish)
        uncrowded = len(neighbors) / n < self.crowding_factor

        target, behavior = None, None
        if neighbors and uncrowded:
            center = np.mean([other.position for other in neighbors], axis=0)
            if self.evaluate(center) < fish.fitness:
                target, behavior = self.move_towards(fish.position, center), SWARMING

        if target is None and neighbors and uncrowded:
            best_neighbor = min(neighbors, key=lambda other: other.fitness)
            if best_neighbor.fitness < fish.fitness:
                target, behavior = self.move_towards(fish.position, best_neighbor.position), FOLLOWING

        if target is None:
            for _ in range(self.params.try_number):
                probe = fish.position + self.random_vector(self.params.visual)
                if self.evaluate(probe) < fish.fitness:
                    target, behavior = self.move_towards(fish.position, probe), PREYING
                    break

        if target is None:
            target, behavior = fish.position + self.random_vector(self.step_size), RANDOM

        position = self.clamp(target)
        return position, self.evaluate(position), behavior

    def get_neighbors(self, fish: Agent) -> List[Agent]:
        """Other fish within ``visual`` of ``fish`` (inclusive)."""
        return [
            other for other in self.population
            if other is not fish and self.distance(fish.position, other.position) <= self.params.visual
        ]

    def move_towards(self, origin: np.ndarray, target: np.ndarray) -> np.ndarray:
        dist = self.distance(origin, target)
        if dist == 0:
            return origin.copy()
        ratio = self.step_size * self.rng.uniform() / dist
        return origin + ratio * (target - origin)
