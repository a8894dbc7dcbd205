#!/bin/python
"""
Command-line runner for the Bat and Artificial Fish Swarm optimizers.

Runs one registered algorithm on a 2D benchmark function, logs progress and
optionally plots the convergence curve.
"""
import argparse
import sys

import matplotlib.pyplot as plt

from Core.problem import OptimizerConfig
from Core.random_source import RandomSource
from Core.utils import parse_param_overrides, setup_logging
from problems.benchmarks import BENCHMARKS
from solvers.registry import create_optimizer, get_algorithm, list_algorithms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a nature-inspired optimizer on a 2D benchmark function."
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        default="bat-standard",
        choices=sorted(list_algorithms()),
        help="Registered algorithm id (default: bat-standard)"
    )
    parser.add_argument(
        "--benchmark",
        "-b",
        default="sphere",
        choices=sorted(BENCHMARKS),
        help="Objective function (default: sphere)"
    )
    parser.add_argument(
        "--population",
        "-p",
        type=int,
        default=30,
        help="Population size (default: 30)"
    )
    parser.add_argument(
        "--iterations",
        "-i",
        type=int,
        default=100,
        help="Number of iterations to run (default: 100)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed; runs are non-deterministic when omitted"
    )
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Hyperparameter override, repeatable (e.g. --param alpha=0.95)"
    )
    parser.add_argument(
        "--log-every",
        type=int,
        default=10,
        help="Log progress every N iterations (default: 10)"
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also append logs to a file in this directory"
    )
    parser.add_argument(
        "--plot",
        default=None,
        metavar="PATH",
        help="Save the convergence plot to PATH"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display the convergence plot"
    )
    return parser


def run(args):
    """Builds the optimizer described by ``args`` and runs it; returns the optimizer."""
    logger = setup_logging("run", args.algorithm, args.log_dir)
    benchmark = BENCHMARKS[args.benchmark]
    definition = get_algorithm(args.algorithm)

    overrides = parse_param_overrides(args.param)
    config = OptimizerConfig(
        population_size=args.population,
        bounds=benchmark.bounds,
        objective_function=benchmark.func,
        max_iterations=args.iterations,
    )
    rng = RandomSource(args.seed)
    optimizer = create_optimizer(args.algorithm, config, overrides, rng)

    logger.info("Running %s (%s) on %s: population=%d, iterations=%d, seed=%s",
                definition.display_name, definition.section, benchmark.name,
                args.population, args.iterations, args.seed)
    for _ in range(args.iterations):
        optimizer.step()
        iteration = optimizer.get_iteration()
        if args.log_every > 0 and iteration % args.log_every == 0:
            logger.info("Iteration %d: best fitness %.6g", iteration, optimizer.get_global_best().fitness)

    best = optimizer.get_global_best()
    logger.info("Best fitness %.6g at %s (known minimum %.6g at %s)",
                best.fitness, best.position.tolist(), benchmark.minimum_value,
                list(benchmark.global_minimum))
    return optimizer


def visualize_convergence(history, title, save_path=None, show=False):
    """
    Plot the global-best fitness over iterations.

    Args:
        history: Sequence of ``IterationState`` records.
        title: Plot title.
        save_path: Path to save the plot image (optional)
        show: Whether to open a window with the plot.
    """
    iterations = [state.iteration for state in history]
    best_values = [state.global_best_fitness for state in history]

    plt.figure(figsize=(12, 6))
    plt.plot(iterations, best_values, 'b-', label='Global best')
    plt.title(title)
    plt.xlabel('Iteration')
    plt.ylabel('Best Fitness')
    plt.grid(True)
    plt.legend()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Convergence plot saved to '{save_path}'")
    if show:
        plt.show()
    plt.close()


def main(argv=None) -> int:
    """Parse command line arguments and run the selected algorithm."""
    args = build_parser().parse_args(argv)
    try:
        optimizer = run(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.plot or args.show:
        title = f"{optimizer.name} on {BENCHMARKS[args.benchmark].name}"
        visualize_convergence(optimizer.get_history(), title, args.plot, args.show)
    return 0


if __name__ == "__main__":
    sys.exit(main())
