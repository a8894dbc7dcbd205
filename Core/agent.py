"""
Population members and the per-iteration snapshots recorded in history.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np


@dataclass
class AgentState:
    """Base for the typed per-agent payload each algorithm family defines."""

    def copy(self) -> "AgentState":
        return dataclasses.replace(self)


@dataclass
class Agent:
    """
    One member of the population.

    ``fitness`` always holds ``objective(position)`` for the stored position;
    whoever replaces ``position`` must replace ``fitness`` in the same step.
    """
    position: np.ndarray
    fitness: float
    velocity: Optional[np.ndarray] = None
    personal_best: Optional[np.ndarray] = None
    personal_best_fitness: Optional[float] = None
    state: Optional[AgentState] = None

    def copy(self) -> "Agent":
        """Deep-copies the arrays, shallow-copies the state record."""
        return Agent(
            position=self.position.copy(),
            fitness=self.fitness,
            velocity=self.velocity.copy() if self.velocity is not None else None,
            personal_best=self.personal_best.copy() if self.personal_best is not None else None,
            personal_best_fitness=self.personal_best_fitness,
            state=self.state.copy() if self.state is not None else None,
        )

    def __lt__(self, other: "Agent") -> bool:
        return self.fitness < other.fitness

    def __str__(self) -> str:
        return f"Agent({self.position.tolist()}, Fitness: {self.fitness})"


@dataclass(frozen=True)
class IterationState:
    """Immutable record of the optimizer after ``iteration`` steps."""
    iteration: int
    agents: Tuple[Agent, ...]
    global_best: np.ndarray
    global_best_fitness: float
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def positions(self) -> np.ndarray:
        """``(n, 2)`` array of agent positions, convenient for plotting."""
        return np.array([agent.position for agent in self.agents])

    @property
    def fitness_values(self) -> np.ndarray:
        return np.array([agent.fitness for agent in self.agents], dtype=float)
