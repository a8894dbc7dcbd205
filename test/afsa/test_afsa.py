#!/usr/bin/env python3
"""
Tests for the Artificial Fish Swarm Algorithm and its fast and modified variants.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from AFSA import AFSAAlgorithm, FastAFSA, FishState, ModifiedAFSA
from AFSA.AFSA import FOLLOWING, PREYING, RANDOM, SWARMING
from Core.exceptions import ConfigurationError
from Core.problem import Bounds, OptimizerConfig
from Core.random_source import RandomSource
from problems.benchmarks import rastrigin, sphere

BEHAVIORS = {SWARMING, FOLLOWING, PREYING, RANDOM}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def config():
    return OptimizerConfig(population_size=20, bounds=Bounds(-5.12, 5.12), objective_function=rastrigin)


@pytest.fixture
def pair_config():
    return OptimizerConfig(population_size=2, bounds=Bounds(-5.12, 5.12), objective_function=sphere)


def place(fish, position):
    fish.position = np.array(position, dtype=float)
    fish.fitness = sphere(*fish.position)


# =============================================================================
# Standard AFSA
# =============================================================================

class TestAFSA:

    def test_fish_start_without_behaviour(self, config):
        algorithm = AFSAAlgorithm(config, rng=RandomSource(1))
        assert all(isinstance(fish.state, FishState) and fish.state.behavior is None
                   for fish in algorithm.population)

    def test_every_fish_records_a_behaviour(self, config):
        algorithm = AFSAAlgorithm(config, rng=RandomSource(2))
        algorithm.run(3)
        for fish in algorithm.population:
            assert fish.state.behavior in BEHAVIORS
            assert fish.fitness == pytest.approx(algorithm.evaluate(fish.position))
            assert algorithm.bounds.contains(fish.position)

    def test_history_records_working_parameters(self, config):
        algorithm = AFSAAlgorithm(config, rng=RandomSource(3))
        algorithm.run(2)
        assert algorithm.get_history()[-1].extra == {"step": 0.3, "delta": 0.618}

    def test_crowded_fish_cannot_swarm(self, pair_config):
        algorithm = AFSAAlgorithm(pair_config, delta=0.1, rng=RandomSource(4))
        worse, better = algorithm.population
        place(worse, [1.0, 1.0])
        place(better, [0.0, 0.0])
        algorithm.step()
        assert worse.state.behavior in {PREYING, RANDOM}
        assert better.state.behavior == RANDOM

    def test_coincident_fish_fall_back_to_preying_or_random(self, pair_config):
        algorithm = AFSAAlgorithm(pair_config, delta=0.1, rng=RandomSource(40))
        for fish in algorithm.population:
            place(fish, [1.0, 1.0])
        assert len(algorithm.get_neighbors(algorithm.population[0])) == 1
        algorithm.step()
        assert all(fish.state.behavior in {PREYING, RANDOM} for fish in algorithm.population)

    def test_uncrowded_fish_swarms_toward_better_centroid(self, pair_config):
        algorithm = AFSAAlgorithm(pair_config, delta=1.0, rng=RandomSource(5))
        worse, better = algorithm.population
        place(worse, [1.0, 1.0])
        place(better, [0.0, 0.0])
        algorithm.step()
        assert worse.state.behavior == SWARMING
        # a swarming move travels at most one step toward the centroid
        assert np.linalg.norm(worse.position - np.array([1.0, 1.0])) <= 0.3 + 1e-12
        assert worse.fitness < 2.0

    def test_neighbours_exclude_self_and_include_boundary(self, pair_config):
        algorithm = AFSAAlgorithm(pair_config, visual=2.5, rng=RandomSource(6))
        first, second = algorithm.population
        place(first, [0.0, 0.0])
        place(second, [2.5, 0.0])
        assert algorithm.get_neighbors(first) == [second]
        place(second, [2.6, 0.0])
        assert algorithm.get_neighbors(first) == []

    def test_move_towards(self, pair_config):
        algorithm = AFSAAlgorithm(pair_config, rng=RandomSource(7))
        origin = np.array([0.0, 0.0])
        np.testing.assert_array_equal(algorithm.move_towards(origin, origin), origin)
        moved = algorithm.move_towards(origin, np.array([3.0, 4.0]))
        assert np.linalg.norm(moved) <= 0.3
        # the move stays on the segment toward the target
        assert moved[1] == pytest.approx(moved[0] * 4.0 / 3.0)

    def test_global_best_never_worsens(self, config):
        algorithm = AFSAAlgorithm(config, rng=RandomSource(8))
        algorithm.run(30)
        values = [state.global_best_fitness for state in algorithm.get_history()]
        assert all(b <= a for a, b in zip(values, values[1:]))

    def test_improves_on_sphere(self):
        config = OptimizerConfig(population_size=30, bounds=Bounds(-5.12, 5.12), objective_function=sphere)
        algorithm = AFSAAlgorithm(config, rng=RandomSource(9))
        initial = algorithm.get_global_best().fitness
        algorithm.run(50)
        assert algorithm.get_global_best().fitness < initial

    @pytest.mark.parametrize("overrides", [
        {"visual": 0.0}, {"step": -0.1}, {"delta": -1.0}, {"try_number": -1},
    ])
    def test_invalid_parameters(self, config, overrides):
        with pytest.raises(ConfigurationError):
            AFSAAlgorithm(config, **overrides)


# =============================================================================
# Variants
# =============================================================================

class TestFastAFSA:

    def test_step_decays_geometrically(self, config):
        algorithm = FastAFSA(config, rng=RandomSource(10))
        algorithm.run(5)
        assert algorithm.step_size == pytest.approx(0.3 * 0.95 ** 5)
        steps = [state.extra["step"] for state in algorithm.get_history()]
        assert steps[0] == 0.3
        assert all(b < a for a, b in zip(steps, steps[1:]))

    def test_step_floor(self, config):
        algorithm = FastAFSA(config, alpha=0.5, min_step=0.05, rng=RandomSource(11))
        algorithm.run(10)
        assert algorithm.step_size == 0.05

    def test_reset_restores_step(self, config):
        algorithm = FastAFSA(config, rng=RandomSource(12))
        algorithm.run(5)
        algorithm.reset()
        assert algorithm.step_size == 0.3
        assert algorithm.params.step == 0.3

    @pytest.mark.parametrize("overrides", [{"alpha": 0.0}, {"alpha": 1.2}, {"min_step": -0.1}])
    def test_invalid_parameters(self, config, overrides):
        with pytest.raises(ConfigurationError):
            FastAFSA(config, **overrides)


class TestModifiedAFSA:

    def test_crowding_factor_tightens(self, config):
        algorithm = ModifiedAFSA(config, rng=RandomSource(13))
        algorithm.step()
        assert algorithm.crowding_factor == pytest.approx(0.618)
        algorithm.run(50)
        assert algorithm.crowding_factor == pytest.approx(0.618 * 0.75)
        algorithm.run(50)
        assert algorithm.crowding_factor == pytest.approx(0.309)
        algorithm.run(10)
        assert algorithm.crowding_factor == pytest.approx(0.309)

    def test_recorded_delta_follows_schedule(self, config):
        algorithm = ModifiedAFSA(config, rng=RandomSource(14))
        algorithm.run(3)
        deltas = [state.extra["delta"] for state in algorithm.get_history()]
        assert deltas == pytest.approx([0.618, 0.618, 0.618 * (1 - 0.005), 0.618 * (1 - 0.01)])
