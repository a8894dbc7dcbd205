"""
Operators borrowed from other metaheuristics and mixed into Bat hybrids.
"""

from .de import de_crossover, de_mutation, de_operator
from .local_search import gaussian_perturbation, powell_step, random_perturbation
from .pso import pso_update, update_personal_best, update_velocity
from .sa import acceptance_probability, metropolis_accept

__all__ = [
    'de_crossover', 'de_mutation', 'de_operator',
    'gaussian_perturbation', 'powell_step', 'random_perturbation',
    'pso_update', 'update_personal_best', 'update_velocity',
    'acceptance_probability', 'metropolis_accept',
]
