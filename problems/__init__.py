from .benchmarks import BENCHMARKS, BenchmarkFunction, get_benchmark, one_max, simple_tour_length

__all__ = ['BENCHMARKS', 'BenchmarkFunction', 'get_benchmark', 'one_max', 'simple_tour_length']
