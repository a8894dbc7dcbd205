"""
Iteration-driven parameter schedules.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional

from Core.exceptions import ConfigurationError, ParameterNotFoundError

SCHEDULE_TYPES = ("linear", "exponential", "cosine", "step")


@dataclass(frozen=True)
class AdaptiveSchedule:
    """
    Describes how a parameter moves from ``start_value`` to ``end_value``.

    ``switch_at`` is only read by the ``step`` schedule; it defaults to half
    the run length.
    """
    type: str
    start_value: float
    end_value: float
    switch_at: Optional[int] = None

    def __post_init__(self):
        if self.type not in SCHEDULE_TYPES:
            raise ConfigurationError(f"Unknown schedule type {self.type!r}; choose from {SCHEDULE_TYPES}")


def adaptive_value(schedule: AdaptiveSchedule, iteration: int, max_iterations: int) -> float:
    """Value of ``schedule`` at ``iteration`` (0-indexed) of a ``max_iterations`` run."""
    start, end = schedule.start_value, schedule.end_value
    progress = min(iteration / max(max_iterations - 1, 1), 1.0)

    if schedule.type == "linear":
        return start + (end - start) * progress
    if schedule.type == "exponential":
        if start == 0:
            return end * progress
        return start * (end / start) ** progress
    if schedule.type == "cosine":
        return start + (end - start) * (1 - math.cos(math.pi * progress)) / 2
    # step
    switch_at = schedule.switch_at if schedule.switch_at is not None else max_iterations // 2
    return start if iteration < switch_at else end


class AdaptiveParameterManager:
    """Keeps several named schedules over a common run length."""

    def __init__(self, max_iterations: int):
        if max_iterations <= 0:
            raise ConfigurationError(f"max_iterations must be positive, got {max_iterations}.")
        self.max_iterations = max_iterations
        self.schedules: Dict[str, AdaptiveSchedule] = {}

    def add_parameter(self, name: str, schedule: AdaptiveSchedule) -> "AdaptiveParameterManager":
        self.schedules[name] = schedule
        return self

    def get_value(self, name: str, iteration: int) -> float:
        """
        Raises:
            ParameterNotFoundError: if ``name`` was never registered.
        """
        if name not in self.schedules:
            raise ParameterNotFoundError(name)
        return adaptive_value(self.schedules[name], iteration, self.max_iterations)

    def get_all_values(self, iteration: int) -> Dict[str, float]:
        return {
            name: adaptive_value(schedule, iteration, self.max_iterations)
            for name, schedule in self.schedules.items()
        }


# --- Common schedules ------------------------------------------------------
def inertia_weight(w_max: float = 0.9, w_min: float = 0.4) -> AdaptiveSchedule:
    """Linearly decreasing PSO inertia weight."""
    return AdaptiveSchedule("linear", w_max, w_min)


def temperature(t0: float = 100.0, t_min: float = 0.01) -> AdaptiveSchedule:
    """Exponentially decaying annealing temperature."""
    return AdaptiveSchedule("exponential", t0, t_min)


def cosine_annealing(start: float, end: float) -> AdaptiveSchedule:
    return AdaptiveSchedule("cosine", start, end)


def step_change(before: float, after: float, switch_at: int) -> AdaptiveSchedule:
    return AdaptiveSchedule("step", before, after, switch_at)
