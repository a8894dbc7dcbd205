import abc
import dataclasses
import logging
from typing import Any, Dict, List, Optional, Type

import numpy as np

from .agent import Agent, IterationState
from .exceptions import ConfigurationError
from .problem import DIMENSIONS, Bounds, OptimizerConfig
from .random_source import RandomSource, default_random

logger = logging.getLogger(__name__)


def resolve_parameters(cls: Optional[Type[Any]], params: Any, overrides: Dict[str, Any], owner: str) -> Any:
    """
    Returns the hyperparameter object an optimizer should use: ``params`` (or
    the defaults of ``cls``) with ``overrides`` applied to a copy.
    """
    if cls is None:
        if params is not None or overrides:
            raise ConfigurationError(f"{owner} takes no hyperparameters.")
        return None
    if params is None:
        params = cls()
    elif not isinstance(params, cls):
        raise ConfigurationError(f"{owner} expects {cls.__name__}, got {type(params).__name__}.")
    if overrides:
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(f"Unknown hyperparameters for {owner}: {unknown}")
        params = dataclasses.replace(params, **overrides)
    return params


class SearchAlgorithm(abc.ABC):
    """
    Abstract base class for population-based search algorithms.

    Owns the iteration lifecycle: construction initialises the population and
    records iteration 0; every ``step()`` runs ``_pre_step()``,
    ``update_population()`` and ``_post_step()``, advances the counter and
    appends a snapshot to the history. Subclasses only supply
    ``update_population()`` and, where they hold per-agent data, ``create_agent()``.
    """
    name: str = "BASE"
    # Frozen dataclass holding the algorithm's hyperparameters (None if it has none).
    parameters_cls: Optional[Type[Any]] = None

    def __init__(self, config: OptimizerConfig, params: Any = None, *,
                 rng: Optional[RandomSource] = None, **overrides):
        """
        Args:
            config: Population size, bounds and objective function.
            params: Hyperparameter object of type ``parameters_cls``; defaults are used when omitted.
            rng: Random source; the shared unseeded source when omitted.
            **overrides: Individual hyperparameters replacing fields of ``params``.
        """
        if not isinstance(config, OptimizerConfig):
            raise ConfigurationError(f"{type(self).__name__} expects an OptimizerConfig.")
        self.config = config
        self.params = self._resolve_parameters(params, overrides)
        self.rng = rng if rng is not None else default_random()
        self.population: List[Agent] = []
        self.global_best: Optional[Agent] = None
        self.iteration = 0
        self.history: List[IterationState] = []
        self._validate()
        self.reset()

    def _resolve_parameters(self, params: Any, overrides: Dict[str, Any]) -> Any:
        return resolve_parameters(self.parameters_cls, params, overrides, type(self).__name__)

    def _validate(self):
        """Hook for checks that need both the config and the hyperparameters."""

    # --- Control surface ---------------------------------------------------
    def step(self):
        """Performs one iteration and records it."""
        self._pre_step()
        self.update_population()
        self._post_step()
        self.iteration += 1
        self._record_state()

    def run(self, iterations: int):
        """Calls ``step()`` exactly ``iterations`` times."""
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}.")
        for _ in range(iterations):
            self.step()

    def reset(self):
        """
        Re-draws the population and truncates history to iteration 0.
        Subclasses holding adaptive state set it back to its initial value
        before calling this, so the iteration-0 snapshot records it.
        """
        self.iteration = 0
        self.history = []
        self.initialize_population()
        self._record_state()
        logger.debug("%s reset: population=%d, best=%.6g",
                     self.name, len(self.population), self.global_best.fitness)

    def get_iteration(self) -> int:
        return self.iteration

    def get_history(self) -> List[IterationState]:
        """Full history; callers must treat it as read-only."""
        return self.history

    def get_global_best(self) -> Agent:
        """Returns a copy of the best agent seen so far."""
        return self.clone_agent(self.global_best)

    def get_population(self) -> List[Agent]:
        """Detached copies of the current population."""
        return [self.clone_agent(agent) for agent in self.population]

    def get_state(self) -> Dict[str, Any]:
        """Variant-local scalars recorded with each snapshot (``IterationState.extra``)."""
        return {}

    # --- Template hooks ----------------------------------------------------
    def _pre_step(self):
        pass

    @abc.abstractmethod
    def update_population(self):
        """
        Moves the population one iteration forward. Must keep every agent's
        fitness consistent with its position and call ``update_global_best``
        for each agent once its position is final.
        """
        pass

    def _post_step(self):
        pass

    # --- Population helpers ------------------------------------------------
    def create_agent(self) -> Agent:
        """A new agent at a uniformly random position, already evaluated."""
        position = self.random_position()
        return Agent(position=position, fitness=self.evaluate(position))

    def initialize_population(self):
        self.population = [self.create_agent() for _ in range(self.config.population_size)]
        best = self.population[0]
        for agent in self.population[1:]:
            if agent.fitness < best.fitness:
                best = agent
        self.global_best = self.clone_agent(best)

    def _record_state(self):
        self.history.append(IterationState(
            iteration=self.iteration,
            agents=tuple(self.clone_agent(agent) for agent in self.population),
            global_best=self.global_best.position.copy(),
            global_best_fitness=self.global_best.fitness,
            extra=self.get_state(),
        ))

    def update_global_best(self, agent: Agent) -> bool:
        """Replaces the global best only on strict improvement; ties keep the incumbent."""
        if agent.fitness < self.global_best.fitness:
            self.global_best = self.clone_agent(agent)
            return True
        return False

    @staticmethod
    def clone_agent(agent: Agent) -> Agent:
        return agent.copy()

    @staticmethod
    def distance(a: np.ndarray, b: np.ndarray) -> float:
        return float(np.sqrt(np.sum((np.asarray(a) - np.asarray(b)) ** 2)))

    @property
    def bounds(self) -> Bounds:
        return self.config.bounds

    def evaluate(self, position: np.ndarray) -> float:
        return self.config.evaluate(position)

    def clamp(self, position: np.ndarray) -> np.ndarray:
        return self.config.bounds.clamp(position)

    def random_position(self) -> np.ndarray:
        return self.config.random_position(self.rng)

    def random_vector(self, scale: float = 1.0) -> np.ndarray:
        """Vector with components drawn uniformly from [-scale, scale)."""
        return np.array([scale * self.rng.symmetric() for _ in range(DIMENSIONS)])
