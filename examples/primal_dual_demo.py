#!/usr/bin/env python3
"""Primal-dual weighted set cover on a small hand-built instance.

Builds five elements and four weighted sets, runs the solver and prints the
selected sets together with the dual lower bound that certifies the
f-approximation. Exits with status 1 if no cover could be produced.
"""

import sys

from dualcover import (
    InfeasibleError,
    Instance,
    StructuralError,
    primal_dual_cover,
    redundant_sets,
)


def build_instance() -> Instance:
    """Return the five-element example instance."""
    instance = Instance(5)
    instance.add_set(50, [0, 1])
    instance.add_set(2, [1, 2, 3])
    instance.add_set(3, [3, 4])
    instance.add_set(2, [4, 0])
    return instance


def main() -> int:
    instance = build_instance()
    try:
        result = primal_dual_cover(instance)
    except (StructuralError, InfeasibleError) as exc:
        print(f"No cover produced: {exc}", file=sys.stderr)
        return 1

    print("Using sets: " + "\t".join(f"S_{idx}" for idx in result.cover))
    print(f"Cost: {result.cost:g}")
    print(f"Dual lower bound: {result.lower_bound:g}")
    print(f"Guarantee (f={result.frequency}): cost <= {result.approximation_bound:g}")

    redundant = redundant_sets(instance, result.cover)
    if redundant:
        print("Redundant sets in cover: " + ", ".join(f"S_{i}" for i in redundant))
    return 0


if __name__ == "__main__":
    sys.exit(main())
