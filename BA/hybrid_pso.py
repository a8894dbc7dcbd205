from dataclasses import dataclass

import numpy as np

from Core.agent import Agent
from operators.hybrids.pso import update_personal_best, update_velocity
from .BA import BatAlgorithm, BatParameters


@dataclass(frozen=True)
class BatPSOParameters(BatParameters):
    w: float = 0.7
    c1: float = 1.5
    c2: float = 1.5


class BatPSOHybrid(BatAlgorithm):
    """
    Bat Algorithm with a Particle Swarm velocity.

    The velocity is the PSO inertia, cognitive and social blend plus half of
    the usual frequency term. Each bat remembers its own best position, which
    is refreshed whenever its fitness strictly improves.
    """
    name = "Bat-PSO Hybrid"
    parameters_cls = BatPSOParameters

    def create_agent(self) -> Agent:
        agent = super().create_agent()
        agent.personal_best = agent.position.copy()
        agent.personal_best_fitness = agent.fitness
        return agent

    def new_velocity(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        p = self.params
        velocity = update_velocity(bat.velocity, bat.position, bat.personal_best, best,
                                   p.w, p.c1, p.c2, rng=self.rng)
        return velocity + (bat.position - best) * bat.state.frequency * 0.5

    def _settle(self, bat: Agent, proposal: np.ndarray):
        super()._settle(bat, proposal)
        update_personal_best(bat, bat.fitness)
