from dataclasses import dataclass

from Core.exceptions import ConfigurationError
from .AFSA import AFSAAlgorithm, AFSAParameters


@dataclass(frozen=True)
class FastAFSAParameters(AFSAParameters):
    """``alpha``: per-iteration step decay; ``min_step``: floor for the decayed step."""
    alpha: float = 0.95
    min_step: float = 0.01

    def validate(self):
        super().validate()
        if not 0 < self.alpha <= 1:
            raise ConfigurationError(f"alpha must lie in (0, 1], got {self.alpha}.")
        if self.min_step < 0:
            raise ConfigurationError(f"min_step must be non-negative, got {self.min_step}.")


class FastAFSA(AFSAAlgorithm):
    """AFSA whose step shrinks geometrically before each iteration, never below ``min_step``."""
    name = "Fast AFSA"
    parameters_cls = FastAFSAParameters

    def _pre_step(self):
        self.step_size = max(self.step_size * self.params.alpha, self.params.min_step)
