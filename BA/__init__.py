from .BA import BatAlgorithm, BatParameters, BatState
from .adaptive import AdaptiveBatAlgorithm
from .binary import BinaryBatAlgorithm, BinaryLevyBatAlgorithm, BinaryLevyBatParameters
from .chaotic_levy import ChaoticLevyBatAlgorithm, ChaoticLevyBatParameters
from .discrete import DiscreteBatAlgorithm
from .hybrid_abc import ABCBatState, BatABCHybrid, BatABCParameters
from .hybrid_de import BatDEHybrid, BatDEParameters
from .hybrid_harmony import BatHarmonyHybrid, BatHarmonyParameters
from .hybrid_pso import BatPSOHybrid, BatPSOParameters
from .hybrid_sa import BatSAHybrid, BatSAParameters
from .self_adaptive import SelfAdaptiveBatAlgorithm, SelfAdaptiveBatParameters

__all__ = [
    'BatAlgorithm', 'BatParameters', 'BatState',
    'AdaptiveBatAlgorithm',
    'BinaryBatAlgorithm', 'BinaryLevyBatAlgorithm', 'BinaryLevyBatParameters',
    'ChaoticLevyBatAlgorithm', 'ChaoticLevyBatParameters',
    'DiscreteBatAlgorithm',
    'ABCBatState', 'BatABCHybrid', 'BatABCParameters',
    'BatDEHybrid', 'BatDEParameters',
    'BatHarmonyHybrid', 'BatHarmonyParameters',
    'BatPSOHybrid', 'BatPSOParameters',
    'BatSAHybrid', 'BatSAParameters',
    'SelfAdaptiveBatAlgorithm', 'SelfAdaptiveBatParameters',
]
