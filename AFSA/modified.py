from .AFSA import AFSAAlgorithm

GOLDEN_DELTA = 0.618
# Iterations over which the crowding factor tightens.
PROGRESS_HORIZON = 100


class ModifiedAFSA(AFSAAlgorithm):
    """
    AFSA with a crowding factor that tightens with progress:
    ``delta = 0.618 * (1 - 0.5 * min(1, t / 100))``. Early on crowded
    neighbourhoods still attract fish; later they are avoided.
    """
    name = "Modified AFSA"

    def _pre_step(self):
        progress = min(1.0, self.iteration / PROGRESS_HORIZON)
        self.crowding_factor = GOLDEN_DELTA * (1 - progress * 0.5)
