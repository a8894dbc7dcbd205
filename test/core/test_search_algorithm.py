#!/usr/bin/env python3
"""
Tests for the core optimizer template: configuration validation, the
step/run/reset control surface, history snapshots and agent utilities.
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from Core.agent import Agent, AgentState, IterationState
from Core.exceptions import ConfigurationError, ParameterNotFoundError
from Core.problem import Bounds, OptimizerConfig
from Core.random_source import RandomSource
from Core.search_algorithm import SearchAlgorithm
from BA.BA import BatAlgorithm, BatParameters


def sphere(x, y):
    return x * x + y * y


class HookRecorder(SearchAlgorithm):
    """Moves nothing; records the order in which template hooks fire."""
    name = "Recorder"

    def reset(self):
        self.calls = []
        super().reset()

    def _pre_step(self):
        self.calls.append("pre")

    def update_population(self):
        self.calls.append("update")

    def _post_step(self):
        self.calls.append("post")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def config():
    return OptimizerConfig(population_size=10, bounds=Bounds(-5.12, 5.12), objective_function=sphere)


@pytest.fixture
def recorder(config):
    return HookRecorder(config, rng=RandomSource(7))


# =============================================================================
# Configuration
# =============================================================================

class TestConfiguration:

    @pytest.mark.parametrize("low, high", [(1.0, 1.0), (2.0, -2.0), (-np.inf, 1.0), (0.0, np.nan)])
    def test_invalid_bounds_rejected(self, low, high):
        with pytest.raises(ConfigurationError):
            Bounds(low, high)

    @pytest.mark.parametrize("size", [0, -3, 2.5, True])
    def test_invalid_population_size_rejected(self, size):
        with pytest.raises(ConfigurationError):
            OptimizerConfig(population_size=size, bounds=Bounds(-1, 1), objective_function=sphere)

    def test_objective_must_be_callable(self):
        with pytest.raises(ConfigurationError):
            OptimizerConfig(population_size=5, bounds=Bounds(-1, 1), objective_function=3.0)

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_bounds_clamp_and_contains(self):
        bounds = Bounds(-1.0, 2.0)
        clamped = bounds.clamp(np.array([-5.0, 7.0]))
        assert clamped.tolist() == [-1.0, 2.0]
        assert bounds.contains(clamped)
        assert not bounds.contains(np.array([0.0, 2.5]))
        assert bounds.range == 3.0

    def test_problem_info(self, config):
        info = config.get_problem_info()
        assert info["dimension"] == 2
        assert info["lower_bounds"] == [-5.12, -5.12]
        assert info["problem_type"] == "continuous"

    def test_unknown_override_rejected(self, config):
        with pytest.raises(ConfigurationError, match="Unknown hyperparameters"):
            BatAlgorithm(config, loudnes=0.5)

    def test_wrong_parameter_type_rejected(self, config):
        with pytest.raises(ConfigurationError):
            BatAlgorithm(config, params={"alpha": 0.5})

    def test_overrides_do_not_mutate_params(self, config):
        params = BatParameters()
        algorithm = BatAlgorithm(config, params, alpha=0.5, rng=RandomSource(0))
        assert algorithm.params.alpha == 0.5
        assert params.alpha == 0.9

    def test_algorithm_without_parameters_rejects_overrides(self, config):
        with pytest.raises(ConfigurationError):
            HookRecorder(config, step=1.0)

    def test_config_is_not_an_optimizer_config(self):
        with pytest.raises(ConfigurationError):
            HookRecorder({"population_size": 3})


# =============================================================================
# Control surface
# =============================================================================

class TestControlSurface:

    def test_construction_records_iteration_zero(self, recorder):
        assert recorder.get_iteration() == 0
        history = recorder.get_history()
        assert len(history) == 1
        assert history[0].iteration == 0
        assert len(history[0].agents) == 10

    def test_step_hook_order(self, recorder):
        recorder.step()
        recorder.step()
        assert recorder.calls == ["pre", "update", "post", "pre", "update", "post"]

    @pytest.mark.parametrize("n", [0, 1, 7])
    def test_history_length_after_run(self, recorder, n):
        recorder.run(n)
        assert recorder.get_iteration() == n
        history = recorder.get_history()
        assert len(history) == n + 1
        assert [state.iteration for state in history] == list(range(n + 1))

    def test_run_rejects_negative_count(self, recorder):
        with pytest.raises(ValueError):
            recorder.run(-1)

    def test_reset_restores_structure(self, config):
        algorithm = BatAlgorithm(config, rng=RandomSource(3))
        algorithm.run(5)
        algorithm.reset()
        assert algorithm.get_iteration() == 0
        assert len(algorithm.get_history()) == 1
        assert len(algorithm.population) == config.population_size

    def test_global_best_is_a_copy(self, recorder):
        best = recorder.get_global_best()
        best.position[:] = 99.0
        best.fitness = -1.0
        assert recorder.global_best.fitness != -1.0
        assert not np.allclose(recorder.global_best.position, 99.0)

    def test_initial_global_best_is_population_minimum(self, recorder):
        assert recorder.global_best.fitness == min(agent.fitness for agent in recorder.population)

    def test_initial_population_within_bounds(self, recorder):
        for agent in recorder.population:
            assert recorder.bounds.contains(agent.position)
            assert agent.fitness == pytest.approx(sphere(*agent.position))

    def test_history_snapshots_are_detached(self, config):
        algorithm = BatAlgorithm(config, rng=RandomSource(11))
        snapshot = algorithm.get_history()[0]
        before = snapshot.positions.copy()
        algorithm.run(10)
        np.testing.assert_array_equal(snapshot.positions, before)


# =============================================================================
# Global best bookkeeping
# =============================================================================

class TestGlobalBest:

    def test_tie_does_not_replace_global_best(self, recorder):
        before = recorder.global_best
        tied = Agent(position=before.position + 1.0, fitness=before.fitness)
        assert recorder.update_global_best(tied) is False
        assert recorder.global_best is before

    def test_strict_improvement_replaces_global_best(self, recorder):
        better = Agent(position=np.array([0.0, 0.0]), fitness=recorder.global_best.fitness - 1.0)
        assert recorder.update_global_best(better) is True
        assert recorder.global_best.fitness == better.fitness
        assert recorder.global_best is not better

    def test_nan_fitness_never_becomes_global_best(self, recorder):
        before = recorder.global_best
        assert recorder.update_global_best(Agent(position=np.zeros(2), fitness=float("nan"))) is False
        assert recorder.global_best is before

    def test_nan_objective_propagates_without_error(self):
        config = OptimizerConfig(population_size=6, bounds=Bounds(-1, 1),
                                 objective_function=lambda x, y: float("nan"))
        algorithm = BatAlgorithm(config, rng=RandomSource(5))
        algorithm.run(3)
        assert math.isnan(algorithm.get_global_best().fitness)
        assert len(algorithm.get_history()) == 4


# =============================================================================
# Agents and utilities
# =============================================================================

class TestAgentUtilities:

    def test_clone_agent_is_deep_for_arrays(self):
        agent = Agent(position=np.array([1.0, 2.0]), fitness=5.0, velocity=np.array([0.1, 0.2]),
                      personal_best=np.array([1.0, 1.0]), personal_best_fitness=2.0, state=AgentState())
        clone = SearchAlgorithm.clone_agent(agent)
        clone.position[0] = -1.0
        clone.velocity[0] = -1.0
        clone.personal_best[0] = -1.0
        assert agent.position[0] == 1.0
        assert agent.velocity[0] == 0.1
        assert agent.personal_best[0] == 1.0
        assert clone.state is not agent.state

    def test_distance(self):
        assert SearchAlgorithm.distance(np.array([0.0, 0.0]), np.array([3.0, 4.0])) == 5.0

    def test_agents_order_by_fitness(self):
        a = Agent(position=np.zeros(2), fitness=1.0)
        b = Agent(position=np.zeros(2), fitness=2.0)
        assert a < b
        assert "Fitness: 1.0" in str(a)

    def test_iteration_state_arrays(self):
        agents = (Agent(np.array([1.0, 2.0]), 5.0), Agent(np.array([0.0, 1.0]), 1.0))
        state = IterationState(iteration=3, agents=agents, global_best=np.array([0.0, 1.0]),
                               global_best_fitness=1.0)
        assert state.positions.shape == (2, 2)
        assert state.fitness_values.tolist() == [5.0, 1.0]
        assert state.extra == {}

    def test_random_vector_scale(self, recorder):
        for _ in range(50):
            vector = recorder.random_vector(0.5)
            assert vector.shape == (2,)
            assert np.all(np.abs(vector) <= 0.5)


# =============================================================================
# Random source and errors
# =============================================================================

class TestRandomSource:

    def test_seeded_sources_agree(self):
        a, b = RandomSource(123), RandomSource(123)
        assert [a.uniform() for _ in range(5)] == [b.uniform() for _ in range(5)]

    def test_draw_ranges(self):
        rng = RandomSource(1)
        for _ in range(200):
            assert 0.0 <= rng.uniform() < 1.0
            assert -1.0 <= rng.symmetric() < 1.0
            assert 2.0 <= rng.uniform_range(2.0, 3.0) < 3.0
            assert 0 <= rng.integer(4) < 4

    def test_gaussian_moments(self):
        rng = RandomSource(2)
        samples = np.array([rng.gaussian(1.0, 2.0) for _ in range(5000)])
        assert samples.mean() == pytest.approx(1.0, abs=0.15)
        assert samples.std() == pytest.approx(2.0, abs=0.15)

    def test_shuffle_is_a_permutation(self):
        items = list(range(10))
        shuffled = RandomSource(4).shuffle(items)
        assert shuffled is items
        assert sorted(shuffled) == list(range(10))

    def test_parameter_not_found_message(self):
        error = ParameterNotFoundError("inertia")
        assert isinstance(error, KeyError)
        assert error.name == "inertia"
        assert str(error) == "Unknown adaptive parameter: 'inertia'"
