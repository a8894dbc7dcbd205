"""
Numerical building blocks shared by the algorithm variants.
"""

from .chaos import CHAOS_MAPS, ChaosGenerator, create_chaotic_random
from .levy import apply_levy_flight, levy_flight_2d, levy_flight_nd, levy_step, mantegna_sigma
from .schedules import AdaptiveParameterManager, AdaptiveSchedule, adaptive_value
from .special import gamma

__all__ = [
    'CHAOS_MAPS', 'ChaosGenerator', 'create_chaotic_random',
    'apply_levy_flight', 'levy_flight_2d', 'levy_flight_nd', 'levy_step', 'mantegna_sigma',
    'AdaptiveParameterManager', 'AdaptiveSchedule', 'adaptive_value',
    'gamma',
]
