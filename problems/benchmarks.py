"""
Benchmark objective functions.

Every function is minimised. The 2D forms take ``(x, y)`` and are what the
continuous optimizers consume; the N-D forms take a vector. ``one_max`` and
``simple_tour_length`` are the demonstration objectives of the binary and
permutation Bat variants.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from Core.problem import Bounds, ObjectiveFunction2D


# --- 2D functions ----------------------------------------------------------
def rastrigin(x: float, y: float) -> float:
    a = 10.0
    return (a * 2 + (x * x - a * math.cos(2 * math.pi * x))
            + (y * y - a * math.cos(2 * math.pi * y)))


def sphere(x: float, y: float) -> float:
    return x * x + y * y


def rosenbrock(x: float, y: float) -> float:
    return (1 - x) ** 2 + 100 * (y - x * x) ** 2


def ackley(x: float, y: float) -> float:
    a, b, c = 20.0, 0.2, 2 * math.pi
    sum_sq = x * x + y * y
    sum_cos = math.cos(c * x) + math.cos(c * y)
    return -a * math.exp(-b * math.sqrt(sum_sq / 2)) - math.exp(sum_cos / 2) + a + math.e


def griewank(x: float, y: float) -> float:
    return (x * x + y * y) / 4000 - math.cos(x) * math.cos(y / math.sqrt(2)) + 1


def schwefel(x: float, y: float) -> float:
    total = x * math.sin(math.sqrt(abs(x))) + y * math.sin(math.sqrt(abs(y)))
    return 418.9829 * 2 - total


def michalewicz(x: float, y: float, m: int = 10) -> float:
    return -(math.sin(x) * math.sin(x * x / math.pi) ** (2 * m)
             + math.sin(y) * math.sin(2 * y * y / math.pi) ** (2 * m))


# --- N-dimensional functions -----------------------------------------------
def rastrigin_nd(x: Sequence[float]) -> float:
    x = np.asarray(x, dtype=float)
    return float(10.0 * x.size + np.sum(x ** 2 - 10.0 * np.cos(2 * np.pi * x)))


def sphere_nd(x: Sequence[float]) -> float:
    x = np.asarray(x, dtype=float)
    return float(np.sum(x ** 2))


def ackley_nd(x: Sequence[float]) -> float:
    x = np.asarray(x, dtype=float)
    n = x.size
    return float(-20.0 * np.exp(-0.2 * np.sqrt(np.sum(x ** 2) / n))
                 - np.exp(np.sum(np.cos(2 * np.pi * x)) / n) + 20.0 + np.e)


# --- Discrete demonstration objectives -------------------------------------
def one_max(bits: Sequence[int]) -> float:
    """Negated number of ones, so the all-ones string is the minimum."""
    return -float(np.sum(bits))


def simple_tour_length(permutation: Sequence[int]) -> float:
    """Closed-tour length with cities on a line at their own index."""
    perm = np.asarray(permutation)
    return float(np.sum(np.abs(perm - np.roll(perm, -1))))


@dataclass(frozen=True)
class BenchmarkFunction:
    name: str
    func: ObjectiveFunction2D
    bounds: Bounds
    global_minimum: Tuple[float, float]
    minimum_value: float
    description: str
    func_nd: Optional[Callable[[Sequence[float]], float]] = None


BENCHMARKS: Dict[str, BenchmarkFunction] = {
    "rastrigin": BenchmarkFunction(
        "Rastrigin", rastrigin, Bounds(-5.12, 5.12), (0.0, 0.0), 0.0,
        "Highly multimodal with many local minima", rastrigin_nd),
    "sphere": BenchmarkFunction(
        "Sphere", sphere, Bounds(-5.12, 5.12), (0.0, 0.0), 0.0,
        "Simple convex bowl", sphere_nd),
    "rosenbrock": BenchmarkFunction(
        "Rosenbrock", rosenbrock, Bounds(-5.0, 10.0), (1.0, 1.0), 0.0,
        "Narrow curved valley, slow to converge"),
    "ackley": BenchmarkFunction(
        "Ackley", ackley, Bounds(-5.0, 5.0), (0.0, 0.0), 0.0,
        "Many local minima around a deep global minimum", ackley_nd),
    "griewank": BenchmarkFunction(
        "Griewank", griewank, Bounds(-600.0, 600.0), (0.0, 0.0), 0.0,
        "Many regularly distributed local minima"),
    "schwefel": BenchmarkFunction(
        "Schwefel", schwefel, Bounds(-500.0, 500.0), (420.9687, 420.9687), 0.0,
        "Deceptive: the best local optima lie far from the global one"),
    "michalewicz": BenchmarkFunction(
        "Michalewicz", michalewicz, Bounds(0.0, math.pi), (2.20, 1.57), -1.8013,
        "Steep ridges and valleys"),
}


def get_benchmark(name: str) -> BenchmarkFunction:
    try:
        return BENCHMARKS[name]
    except KeyError:
        raise KeyError(f"Unknown benchmark {name!r}; available: {sorted(BENCHMARKS)}") from None
