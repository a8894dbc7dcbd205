import logging
from dataclasses import dataclass

import numpy as np

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from .BA import BatAlgorithm, BatParameters, BatState

logger = logging.getLogger(__name__)


@dataclass
class ABCBatState(BatState):
    """Bat state plus the employed-bee failure counter."""
    trial: int = 0


@dataclass(frozen=True)
class BatABCParameters(BatParameters):
    """``limit``: consecutive rejections tolerated before a bat is abandoned."""
    limit: int = 20

    def validate(self):
        super().validate()
        if self.limit < 0:
            raise ConfigurationError(f"limit must be non-negative, got {self.limit}.")


class BatABCHybrid(BatAlgorithm):
    """
    Bat Algorithm with Artificial Bee Colony phases.

    The local search is the employed-bee move ``x + phi(x - x_k)`` against a
    random neighbour ``k`` with ``phi`` in [-1, 1]. A bat whose moves keep
    being rejected is abandoned once its trial counter exceeds ``limit`` and
    a scout re-draws it uniformly in the search space.
    """
    name = "Bat-ABC Hybrid"
    parameters_cls = BatABCParameters

    def _create_state(self) -> ABCBatState:
        base = super()._create_state()
        return ABCBatState(
            frequency=base.frequency,
            loudness=base.loudness,
            pulse_rate=base.pulse_rate,
            initial_pulse_rate=base.initial_pulse_rate,
        )

    def _prepare_iteration(self):
        super()._prepare_iteration()
        self._positions = [bat.position.copy() for bat in self.population]

    def local_search(self, index: int, bat: Agent, best: np.ndarray) -> np.ndarray:
        neighbor = self._positions[self.rng.integer(len(self._positions))]
        phi = self.rng.symmetric()
        return bat.position + phi * (bat.position - neighbor)

    def on_accept(self, bat: Agent):
        super().on_accept(bat)
        bat.state.trial = 0

    def on_reject(self, bat: Agent):
        bat.state.trial += 1
        if bat.state.trial > self.params.limit:
            self.scout(bat)

    def scout(self, bat: Agent):
        """Abandons the bat's food source for a random one."""
        logger.debug("%s abandoning bat after %d failed trials", self.name, bat.state.trial)
        bat.position = self.random_position()
        bat.fitness = self.evaluate(bat.position)
        bat.state.trial = 0
