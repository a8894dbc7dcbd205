"""
Core interfaces shared by every optimizer: configuration, agents, history
snapshots, the random source and the ``SearchAlgorithm`` template.
"""

from .agent import Agent, AgentState, IterationState
from .exceptions import ConfigurationError, ParameterNotFoundError
from .problem import DIMENSIONS, Bounds, ObjectiveFunction2D, OptimizerConfig
from .random_source import RandomSource, default_random
from .search_algorithm import SearchAlgorithm

__all__ = [
    'Agent', 'AgentState', 'IterationState',
    'ConfigurationError', 'ParameterNotFoundError',
    'DIMENSIONS', 'Bounds', 'ObjectiveFunction2D', 'OptimizerConfig',
    'RandomSource', 'default_random',
    'SearchAlgorithm',
]
