from dataclasses import dataclass

import numpy as np

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from operators.hybrids.de import DE_STRATEGIES, de_operator
from .BA import BatAlgorithm, BatParameters


@dataclass(frozen=True)
class BatDEParameters(BatParameters):
    """
    Args:
        f: DE scale factor F.
        cr: Crossover rate in [0, 1].
        strategy: DE mutation strategy; ``rand/1`` by default.
    """
    f: float = 0.5
    cr: float = 0.9
    strategy: str = "rand/1"

    def validate(self):
        super().validate()
        if self.f < 0:
            raise ConfigurationError(f"f must be non-negative, got {self.f}.")
        if not 0 <= self.cr <= 1:
            raise ConfigurationError(f"cr must lie in [0, 1], got {self.cr}.")
        if self.strategy not in DE_STRATEGIES:
            raise ConfigurationError(f"Unknown DE strategy {self.strategy!r}; choose from {sorted(DE_STRATEGIES)}")


class BatDEHybrid(BatAlgorithm):
    """
    Bat Algorithm steered by Differential Evolution.

    The velocity is pulled toward a DE trial vector (mutation from distinct
    donors, then binomial crossover with the bat itself) rather than pushed
    by the global-best differential. Donors are read from the population as
    it stood at the start of the iteration.
    """
    name = "Bat-DE Hybrid"
    parameters_cls = BatDEParameters

    def _validate(self):
        super()._validate()
        # the target plus the donors of the chosen strategy must be distinct
        required = DE_STRATEGIES[self.params.strategy] + 1
        if self.config.population_size < required:
            raise ConfigurationError(
                f"{self.name} with strategy {self.params.strategy!r} needs a population of "
                f"at least {required}, got {self.config.population_size}."
            )

    def _prepare_iteration(self):
        super()._prepare_iteration()
        self._positions = [bat.position.copy() for bat in self.population]

    def new_velocity(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        p = self.params
        trial = de_operator(self._positions, index, best, p.f, p.cr, p.strategy, self.rng)
        return bat.velocity + (trial - bat.position) * bat.state.frequency
