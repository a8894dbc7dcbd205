from .AFSA import AFSAAlgorithm, AFSAParameters, FishState
from .fast import FastAFSA, FastAFSAParameters
from .modified import ModifiedAFSA

__all__ = ['AFSAAlgorithm', 'AFSAParameters', 'FishState', 'FastAFSA', 'FastAFSAParameters', 'ModifiedAFSA']
