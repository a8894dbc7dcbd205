"""
Registry of the continuous optimizers by id.

Each definition binds an algorithm class to the default hyperparameters it
is demonstrated with, plus the display name and textbook section used by
front ends. ``create_optimizer`` is the usual entry point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from AFSA import AFSAAlgorithm, FastAFSA, ModifiedAFSA
from BA import (
    AdaptiveBatAlgorithm, BatABCHybrid, BatAlgorithm, BatDEHybrid, BatHarmonyHybrid,
    BatPSOHybrid, BatSAHybrid, ChaoticLevyBatAlgorithm, SelfAdaptiveBatAlgorithm,
)
from Core.problem import OptimizerConfig
from Core.random_source import RandomSource
from Core.search_algorithm import SearchAlgorithm


@dataclass
class AlgorithmDefinition:
    """Describes one registered algorithm variant."""
    id: str
    cls: Type[SearchAlgorithm]
    display_name: str
    section: str = ""
    description: str = ""
    default_kwargs: Dict[str, Any] = field(default_factory=dict)

    def build(
        self,
        config: OptimizerConfig,
        overrides: Optional[Dict[str, Any]] = None,
        rng: Optional[RandomSource] = None,
    ) -> SearchAlgorithm:
        params: Dict[str, Any] = dict(self.default_kwargs)
        # a horizon set on the config replaces the demonstration default
        if "max_iterations" in params and config.max_iterations is not None:
            params["max_iterations"] = config.max_iterations
        if overrides:
            params.update(overrides)
        return self.cls(config, rng=rng, **params)


_definitions: Dict[str, AlgorithmDefinition] = {}
_BUILTINS_REGISTERED = False


def register_algorithm(definition: AlgorithmDefinition) -> None:
    """Register (or override) an algorithm definition."""
    _definitions[definition.id] = definition


def get_algorithm(algorithm_id: str) -> AlgorithmDefinition:
    _ensure_builtin_definitions()
    try:
        return _definitions[algorithm_id]
    except KeyError:
        raise KeyError(
            f"Algorithm '{algorithm_id}' is not registered; known ids: {sorted(_definitions)}"
        ) from None


def list_algorithms() -> Dict[str, AlgorithmDefinition]:
    _ensure_builtin_definitions()
    return dict(_definitions)


def create_optimizer(
    algorithm_id: str,
    config: OptimizerConfig,
    overrides: Optional[Dict[str, Any]] = None,
    rng: Optional[RandomSource] = None,
) -> SearchAlgorithm:
    return get_algorithm(algorithm_id).build(config, overrides, rng)


def _ensure_builtin_definitions() -> None:
    global _BUILTINS_REGISTERED
    if _BUILTINS_REGISTERED:
        return
    _BUILTINS_REGISTERED = True
    for definition in _builtin_definitions():
        _definitions.setdefault(definition.id, definition)


def _builtin_definitions():
    return [
        AlgorithmDefinition("bat-standard", BatAlgorithm, "Standard BA", "2.1.2",
                            "Echolocation-based search with loudness and pulse rate"),
        AlgorithmDefinition("bat-adaptive", AdaptiveBatAlgorithm, "Adaptive BA", "2.2.7",
                            "Frequency driven by population diversity"),
        AlgorithmDefinition("bat-chaotic-levy", ChaoticLevyBatAlgorithm, "Chaotic + Lévy BA", "2.2.5",
                            "Chaos map frequency tuning with Lévy flight exploration",
                            {"chaos_map": "logistic", "levy_beta": 1.5}),
        AlgorithmDefinition("bat-self-adaptive", SelfAdaptiveBatAlgorithm, "Self-Adaptive BA", "2.2.6",
                            "Parameters scheduled on iteration progress",
                            {"max_iterations": 100}),
        AlgorithmDefinition("bat-pso", BatPSOHybrid, "BA + PSO", "2.3.2",
                            "Personal and global best attraction plus frequency term",
                            {"w": 0.7, "c1": 1.5, "c2": 1.5}),
        AlgorithmDefinition("bat-sa", BatSAHybrid, "BA + SA", "2.3.4",
                            "Metropolis acceptance with geometric cooling",
                            {"initial_temperature": 100.0, "cooling_rate": 0.95}),
        AlgorithmDefinition("bat-de", BatDEHybrid, "BA + DE", "2.3.1",
                            "DE trial vector steers the velocity",
                            {"f": 0.5, "cr": 0.9}),
        AlgorithmDefinition("bat-abc", BatABCHybrid, "BA + ABC", "2.3.6",
                            "Employed-bee local search with scout abandonment",
                            {"limit": 20}),
        AlgorithmDefinition("bat-harmony", BatHarmonyHybrid, "BA + HS", "2.3.5",
                            "Harmony memory improvisation as local search",
                            {"hmcr": 0.9, "par": 0.3, "bw": 0.5}),
        AlgorithmDefinition("afsa-standard", AFSAAlgorithm, "Standard AFSA", "3.1.2",
                            "Swarming, following, preying and random behaviours",
                            {"visual": 2.5, "step": 0.3, "delta": 0.618, "try_number": 5}),
        AlgorithmDefinition("afsa-fast", FastAFSA, "Fast AFSA", "3.2.2",
                            "Step size decays geometrically to a floor",
                            {"visual": 2.5, "step": 0.3, "alpha": 0.95, "min_step": 0.01}),
        AlgorithmDefinition("afsa-modified", ModifiedAFSA, "Modified AFSA", "3.2.3",
                            "Crowding factor tightens with progress",
                            {"visual": 2.5, "step": 0.3}),
    ]
