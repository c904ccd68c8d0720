#!/usr/bin/env python3
"""Benchmark the primal-dual set cover solver on random instances.

For each instance size this script runs the solver on freshly generated
instances and reports runtime, the cost relative to the dual lower bound
and, for small instances, the cost relative to the brute-force optimum.
"""

import argparse
import random

import pandas as pd

from dualcover import evaluate_instances, results_frame, sample_instances


def run_benchmark_suite(
    n_elements_list: list[int],
    n_sets_list: list[int],
    density_list: list[float],
    n_trials: int = 5,
    max_search_sets: int = 16,
    seed: int = 0,
) -> pd.DataFrame:
    """Run the solver over a grid of instance sizes.

    Parameters
    ----------
    n_elements_list : list[int]
        Universe sizes to test
    n_sets_list : list[int]
        Set counts to test
    density_list : list[float]
        Element inclusion probabilities to test
    n_trials : int
        Number of instances per configuration
    max_search_sets : int
        Largest set count for which the brute-force optimum is computed
    seed : int
        Seed for the instance generator

    Returns
    -------
    pd.DataFrame
        One row per instance with its configuration and metrics
    """
    rng = random.Random(seed)
    frames = []
    total_configs = len(n_elements_list) * len(n_sets_list) * len(density_list)
    config_num = 0

    for n_elements in n_elements_list:
        for n_sets in n_sets_list:
            for density in density_list:
                config_num += 1
                print(
                    f"[{config_num}/{total_configs}] {n_elements} elements × "
                    f"{n_sets} sets, density={density:.2f}"
                )
                instances = sample_instances(
                    n_trials, n_elements, n_sets, density=density, rng=rng
                )
                frame = results_frame(
                    evaluate_instances(instances, max_search_sets=max_search_sets)
                )
                frame["density"] = density
                frame["config_id"] = f"{n_elements}x{n_sets}_d{density:.2f}"
                frames.append(frame)

    return pd.concat(frames, ignore_index=True)


def analyze_results(df: pd.DataFrame) -> None:
    """Print a summary of benchmark results."""
    df = df.copy()
    df["dual_ratio"] = df["cost"] / df["lower_bound"]

    print("=" * 60)
    print("BENCHMARK RESULTS SUMMARY")
    print("=" * 60)
    summary = df.groupby("config_id").agg(
        runtime_mean=("runtime_sec", "mean"),
        frequency_max=("frequency", "max"),
        dual_ratio_mean=("dual_ratio", "mean"),
        gold_ratio_mean=("ratio", "mean"),
        gold_ratio_max=("ratio", "max"),
        redundant_mean=("n_redundant", "mean"),
    )
    print(summary.round(3))


def main():
    """Main benchmark runner with command line interface."""
    parser = argparse.ArgumentParser(
        description="Benchmark the dualcover primal-dual solver"
    )
    parser.add_argument("--elements", nargs="+", type=int, default=[10, 50, 200],
                        help="List of universe sizes to test")
    parser.add_argument("--sets", nargs="+", type=int, default=[8, 15, 40],
                        help="List of set counts to test")
    parser.add_argument("--density", nargs="+", type=float, default=[0.1, 0.3],
                        help="List of densities (0.0-1.0]")
    parser.add_argument("--trials", type=int, default=5,
                        help="Number of instances per configuration")
    parser.add_argument("--max-search-sets", type=int, default=16,
                        help="Largest set count solved exactly for comparison")
    parser.add_argument("--seed", type=int, default=0, help="Generator seed")
    parser.add_argument("--save", type=str, help="Save detailed results to CSV file")

    args = parser.parse_args()

    results = run_benchmark_suite(
        n_elements_list=args.elements,
        n_sets_list=args.sets,
        density_list=args.density,
        n_trials=args.trials,
        max_search_sets=args.max_search_sets,
        seed=args.seed,
    )
    analyze_results(results)

    if args.save:
        results.to_csv(args.save, index=False)
        print(f"\nDetailed results saved to {args.save}")


if __name__ == "__main__":
    main()
