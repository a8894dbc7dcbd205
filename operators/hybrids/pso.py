"""
Particle Swarm velocity and position updates.
"""

from typing import Optional, Tuple

import numpy as np

from Core.agent import Agent
from Core.random_source import RandomSource, default_random


def initialize_velocity(dimensions: int, v_max: Optional[float] = None,
                        rng: Optional[RandomSource] = None) -> np.ndarray:
    """Uniform in [-1, 1) per axis, scaled by ``v_max`` when given."""
    rng = rng or default_random()
    scale = 1.0 if v_max is None else v_max
    return np.array([rng.symmetric() * scale for _ in range(dimensions)])


def update_velocity(velocity: np.ndarray, position: np.ndarray, personal_best: np.ndarray,
                    global_best: np.ndarray, w: float = 0.7, c1: float = 1.5, c2: float = 1.5,
                    v_max: Optional[float] = None, rng: Optional[RandomSource] = None) -> np.ndarray:
    """
    ``w*v + c1*r1*(pbest - x) + c2*r2*(gbest - x)`` with one ``r1``, ``r2`` pair
    shared by all axes, clipped to ``[-v_max, v_max]`` when ``v_max`` is set.
    """
    rng = rng or default_random()
    r1 = rng.uniform()
    r2 = rng.uniform()
    new_velocity = (w * np.asarray(velocity, dtype=float)
                    + c1 * r1 * (np.asarray(personal_best) - position)
                    + c2 * r2 * (np.asarray(global_best) - position))
    if v_max is not None:
        new_velocity = np.clip(new_velocity, -v_max, v_max)
    return new_velocity


def update_position(position: np.ndarray, velocity: np.ndarray) -> np.ndarray:
    return np.asarray(position, dtype=float) + velocity


def pso_update(agent: Agent, global_best: np.ndarray, w: float = 0.7, c1: float = 1.5,
               c2: float = 1.5, v_max: Optional[float] = None,
               rng: Optional[RandomSource] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Returns ``(position, velocity)`` after one PSO move; the agent is not modified."""
    if agent.velocity is None or agent.personal_best is None:
        raise ValueError("Agent must have velocity and personal_best for a PSO update.")
    velocity = update_velocity(agent.velocity, agent.position, agent.personal_best,
                               global_best, w, c1, c2, v_max, rng)
    return update_position(agent.position, velocity), velocity


def update_personal_best(agent: Agent, fitness: float) -> bool:
    """Records the agent's current position as its personal best on strict improvement."""
    if agent.personal_best_fitness is None or fitness < agent.personal_best_fitness:
        agent.personal_best = agent.position.copy()
        agent.personal_best_fitness = fitness
        return True
    return False
