from .registry import (
    AlgorithmDefinition,
    create_optimizer,
    get_algorithm,
    list_algorithms,
    register_algorithm,
)

__all__ = [
    'AlgorithmDefinition',
    'create_optimizer',
    'get_algorithm',
    'list_algorithms',
    'register_algorithm',
]
