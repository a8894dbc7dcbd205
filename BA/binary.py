"""
Bat Algorithm on bit strings.

Positions are bit vectors; velocities stay continuous and a sigmoid transfer
function turns each velocity component into the probability of a 1. These
variants run outside ``SearchAlgorithm`` since they have no continuous
bounds, but expose the same control surface and history records.
"""

import abc
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from Core.agent import Agent, IterationState
from Core.exceptions import ConfigurationError
from Core.random_source import RandomSource, default_random
from Core.search_algorithm import resolve_parameters
from operators.levy import levy_step
from problems.benchmarks import one_max
from .BA import BatParameters, BatState

EncodedObjective = Callable[[Sequence[int]], float]


def sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


@dataclass(frozen=True)
class BinaryLevyBatParameters(BatParameters):
    levy_beta: float = 1.5

    def validate(self):
        super().validate()
        if not 0 < self.levy_beta <= 2:
            raise ConfigurationError(f"levy_beta must lie in (0, 2], got {self.levy_beta}.")


class EncodedBatAlgorithm(abc.ABC):
    """
    Control surface shared by Bat variants over discrete encodings.

    Subclasses provide ``random_position``, ``initial_velocity`` and
    ``propose``. Acceptance, loudness and pulse-rate updates are those of the
    continuous Bat Algorithm.
    """
    name = "Encoded Bat Algorithm"
    parameters_cls = BatParameters

    def __init__(self, n_bats: int, size: int, objective_function: EncodedObjective,
                 params=None, *, rng: Optional[RandomSource] = None, **overrides):
        if n_bats <= 0:
            raise ConfigurationError(f"n_bats must be positive, got {n_bats}.")
        if size <= 0:
            raise ConfigurationError(f"Encoding size must be positive, got {size}.")
        self.params = resolve_parameters(self.parameters_cls, params, overrides, type(self).__name__)
        self.params.validate()
        self.n_bats = n_bats
        self.size = size
        self.objective_function = objective_function
        self.rng = rng if rng is not None else default_random()
        self.reset()

    def reset(self):
        self.iteration = 0
        self.history: List[IterationState] = []
        self.population = [self._create_bat() for _ in range(self.n_bats)]
        best = self.population[0]
        for bat in self.population[1:]:
            if bat.fitness < best.fitness:
                best = bat
        self.global_best = best.copy()
        self._record_state()

    def _create_bat(self) -> Agent:
        p = self.params
        position = self.random_position()
        return Agent(
            position=position,
            fitness=self.evaluate(position),
            velocity=self.initial_velocity(),
            state=BatState(
                frequency=self.rng.uniform_range(p.f_min, p.f_max),
                loudness=p.initial_loudness,
                pulse_rate=p.initial_pulse_rate,
                initial_pulse_rate=p.initial_pulse_rate,
            ),
        )

    @abc.abstractmethod
    def random_position(self) -> np.ndarray:
        pass

    @abc.abstractmethod
    def initial_velocity(self) -> np.ndarray:
        pass

    @abc.abstractmethod
    def propose(self, bat: Agent, best: np.ndarray) -> np.ndarray:
        """Candidate encoding for ``bat``; may update its velocity."""
        pass

    def evaluate(self, position: np.ndarray) -> float:
        return float(self.objective_function(position))

    def step(self):
        p = self.params
        best = self.global_best.position.copy()
        for bat in self.population:
            state = bat.state
            state.frequency = self.rng.uniform_range(p.f_min, p.f_max)
            candidate = self.propose(bat, best)
            fitness = self.evaluate(candidate)
            if self.rng.uniform() < state.loudness and fitness < bat.fitness:
                bat.position = candidate
                bat.fitness = fitness
                state.loudness *= p.alpha
                state.pulse_rate = state.initial_pulse_rate * (1 - math.exp(-p.gamma * self.iteration))
            if bat.fitness < self.global_best.fitness:
                self.global_best = bat.copy()

        self.iteration += 1
        self._record_state()

    def run(self, iterations: int):
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}.")
        for _ in range(iterations):
            self.step()

    def _record_state(self):
        self.history.append(IterationState(
            iteration=self.iteration,
            agents=tuple(bat.copy() for bat in self.population),
            global_best=self.global_best.position.copy(),
            global_best_fitness=self.global_best.fitness,
        ))

    def get_iteration(self) -> int:
        return self.iteration

    def get_history(self) -> List[IterationState]:
        return self.history

    def get_global_best(self) -> Agent:
        return self.global_best.copy()


class BinaryBatAlgorithm(EncodedBatAlgorithm):
    """
    Binary Bat Algorithm.

    Bit ``d`` of a candidate is copied from the best string with probability
    ``1 - pulse_rate`` and otherwise set to 1 with probability ``sigmoid(v_d)``.
    """
    name = "Binary Bat Algorithm"

    def __init__(self, n_bats: int = 20, n_dimensions: int = 20,
                 objective_function: EncodedObjective = one_max, params=None, *,
                 rng: Optional[RandomSource] = None, **overrides):
        super().__init__(n_bats, n_dimensions, objective_function, params, rng=rng, **overrides)

    def random_position(self) -> np.ndarray:
        return np.array([0 if self.rng.uniform() < 0.5 else 1 for _ in range(self.size)])

    def initial_velocity(self) -> np.ndarray:
        return np.array([self.rng.symmetric() for _ in range(self.size)])

    def velocity_kick(self) -> float:
        return 0.0

    def propose(self, bat: Agent, best: np.ndarray) -> np.ndarray:
        frequency = bat.state.frequency
        for d in range(self.size):
            bat.velocity[d] += (bat.position[d] - best[d]) * frequency + self.velocity_kick()

        candidate = bat.position.copy()
        for d in range(self.size):
            probability = sigmoid(bat.velocity[d])
            if self.rng.uniform() > bat.state.pulse_rate:
                candidate[d] = best[d]
            else:
                candidate[d] = 1 if self.rng.uniform() < probability else 0
        return candidate


class BinaryLevyBatAlgorithm(BinaryBatAlgorithm):
    """Binary Bat Algorithm whose velocity gets a Lévy kick of ``0.1 * L`` per bit."""
    name = "Binary Lévy Bat Algorithm"
    parameters_cls = BinaryLevyBatParameters

    def initial_velocity(self) -> np.ndarray:
        return np.zeros(self.size)

    def velocity_kick(self) -> float:
        return levy_step(self.params.levy_beta, self.rng) * 0.1
