import logging
from dataclasses import dataclass
from typing import Any, Dict

from Core.agent import Agent
from Core.exceptions import ConfigurationError
from operators.hybrids.sa import metropolis_accept
from .BA import BatAlgorithm, BatParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatSAParameters(BatParameters):
    """
    Args:
        initial_temperature: Starting temperature T0 (> 0).
        cooling_rate: Geometric cooling factor applied once per iteration, in (0, 1].
        min_temperature: Optional floor for the temperature; 0 lets it keep shrinking.
    """
    initial_temperature: float = 100.0
    cooling_rate: float = 0.95
    min_temperature: float = 0.0

    def validate(self):
        super().validate()
        if self.initial_temperature <= 0:
            raise ConfigurationError(f"initial_temperature must be positive, got {self.initial_temperature}.")
        if not 0 < self.cooling_rate <= 1:
            raise ConfigurationError(f"cooling_rate must lie in (0, 1], got {self.cooling_rate}.")
        if self.min_temperature < 0:
            raise ConfigurationError(f"min_temperature must be non-negative, got {self.min_temperature}.")


class BatSAHybrid(BatAlgorithm):
    """
    Bat Algorithm with Simulated Annealing acceptance.

    A candidate is kept when it passes the Metropolis test ``exp(-delta / T)``
    and the loudness gate, so worse moves are allowed while the temperature
    is high.
    """
    name = "Bat-SA Hybrid"
    parameters_cls = BatSAParameters

    def reset(self):
        self.temperature = self.params.initial_temperature
        super().reset()

    def get_state(self) -> Dict[str, Any]:
        state = super().get_state()
        state["temperature"] = self.temperature
        return state

    def accept(self, bat: Agent, fitness: float) -> bool:
        return (metropolis_accept(bat.fitness, fitness, self.temperature, self.rng)
                and self.rng.uniform() < bat.state.loudness)

    def _post_step(self):
        self._cool_down()

    def _cool_down(self):
        previous = self.temperature
        floor = self.params.min_temperature
        self.temperature = max(previous * self.params.cooling_rate, floor)
        if floor > 0 and previous > floor and self.temperature == floor:
            logger.debug("%s temperature reached its floor %.3g", self.name, floor)
