"""Evaluation tools for dualcover.

This module provides helpers for checking covers returned by the solver and
for comparing them against gold standards: the dual lower bound reported by
:func:`dualcover.primal_dual.primal_dual_cover` and, for small instances, a
brute-force optimum.
"""

import itertools
import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import pandas as pd

from .core import InfeasibleError, Instance
from .primal_dual import primal_dual_cover
from .types import ElementIndex, SetIndex

logger = logging.getLogger(__name__)


def uncovered_elements(
    instance: Instance, cover: Iterable[SetIndex]
) -> list[ElementIndex]:
    """List the elements not covered by any set in ``cover``."""
    sets = instance.sets
    covered: set[ElementIndex] = set()
    for idx in cover:
        covered.update(sets[idx])
    return [e for e in range(instance.n_elements) if e not in covered]


def is_cover(instance: Instance, cover: Iterable[SetIndex]) -> bool:
    """Check whether the union of ``cover`` is the whole universe."""
    return not uncovered_elements(instance, cover)


def cover_cost(instance: Instance, cover: Iterable[SetIndex]) -> float:
    """Total cost of the sets in ``cover``."""
    costs = instance.costs
    return float(sum(costs[idx] for idx in cover))


def redundant_sets(instance: Instance, cover: Sequence[SetIndex]) -> list[SetIndex]:
    """Find sets in ``cover`` that could each be dropped on their own.

    A set is redundant if every element it covers is also covered by some
    other set of ``cover``. Dropping two redundant sets at once may break the
    cover, so this is a diagnostic and the cover itself is left untouched.

    Parameters
    ----------
    instance : Instance
        The instance the cover belongs to.
    cover : Sequence[SetIndex]
        A cover, typically the output of :func:`dualcover.solve`.

    Returns
    -------
    list[SetIndex]
        The redundant sets, in the order they appear in ``cover``.
    """
    sets = instance.sets
    multiplicity: dict[ElementIndex, int] = {}
    for idx in cover:
        for element in set(sets[idx]):
            multiplicity[element] = multiplicity.get(element, 0) + 1
    return [
        idx
        for idx in cover
        if all(multiplicity[element] > 1 for element in set(sets[idx]))
    ]


def optimal_cover(instance: Instance, max_search_sets: int = 20) -> list[SetIndex]:
    """Find a minimum-cost cover by exhaustive search.

    The search enumerates all subsets of the sets, so it is only usable as a
    gold standard on small instances.

    Parameters
    ----------
    instance : Instance
        The instance to solve exactly.
    max_search_sets : int, default 20
        Refuse to search instances with more sets than this.

    Returns
    -------
    list[SetIndex]
        A cheapest cover, ascending. Among equally cheap covers the one with
        fewest sets found first is returned.

    Raises
    ------
    ValueError
        If the instance has more than ``max_search_sets`` sets.
    InfeasibleError
        If some element belongs to no set.
    """
    instance.validate()
    if instance.n_sets > max_search_sets:
        raise ValueError(
            f"Too many sets to search ({instance.n_sets} > {max_search_sets}). "
            "Use a smaller instance or increase max_search_sets."
        )
    element_sets = instance.element_sets()
    for element, covering in enumerate(element_sets):
        if not covering:
            raise InfeasibleError(element)

    universe = frozenset(range(instance.n_elements))
    members = [frozenset(s) for s in instance.sets]
    costs = instance.costs

    # Every element has a covering set, so the full family is a cover.
    best: tuple[SetIndex, ...] = tuple(range(instance.n_sets))
    best_cost = float("inf")
    for r in range(1, instance.n_sets + 1):
        for combo in itertools.combinations(range(instance.n_sets), r):
            cost = sum(costs[idx] for idx in combo)
            if cost >= best_cost:
                continue
            if frozenset().union(*(members[idx] for idx in combo)) >= universe:
                best, best_cost = combo, cost
    return list(best)


@dataclass
class CoverEvalResult:
    """Result of evaluating the primal-dual solver on one instance.

    Attributes
    ----------
    n_elements : int
        Size of the universe.
    n_sets : int
        Number of sets.
    frequency : int
        Largest number of sets containing any element.
    feasible : bool
        Whether the solver produced a cover.
    cover : list[SetIndex]
        Selected sets (empty when infeasible).
    cost : float
        Cost of the cover, ``inf`` when infeasible.
    lower_bound : float
        Dual lower bound, ``nan`` when infeasible.
    n_redundant : int
        Number of sets of the cover that could be dropped individually.
    runtime_sec : float
        Time taken by the solver.
    gold_cost : float, optional
        Brute-force optimum if computed.
    ratio : float, optional
        ``cost / gold_cost`` if the gold cost is known and positive.
    """

    n_elements: int
    n_sets: int
    frequency: int
    feasible: bool
    cover: list[SetIndex]
    cost: float
    lower_bound: float
    n_redundant: int
    runtime_sec: float
    gold_cost: float | None = None
    ratio: float | None = None


def evaluate_instances(
    instances: Iterable[Instance],
    *,
    gold: bool = True,
    max_search_sets: int = 16,
) -> list[CoverEvalResult]:
    """Run the solver on each instance and collect quality metrics.

    Infeasible instances are recorded with ``feasible=False`` rather than
    aborting the batch.

    Parameters
    ----------
    instances : Iterable[Instance]
        Instances to evaluate.
    gold : bool, default True
        Also compute the brute-force optimum where the instance has at most
        ``max_search_sets`` sets.
    max_search_sets : int, default 16
        Size limit for the brute-force gold standard.

    Returns
    -------
    list[CoverEvalResult]
        One result per instance, in input order.
    """
    results = []
    for instance in instances:
        start_time = time.time()
        try:
            outcome = primal_dual_cover(instance)
        except InfeasibleError as exc:
            runtime = time.time() - start_time
            logger.info("Skipping infeasible instance %r: %s", instance, exc)
            results.append(
                CoverEvalResult(
                    n_elements=instance.n_elements,
                    n_sets=instance.n_sets,
                    frequency=instance.frequency(),
                    feasible=False,
                    cover=[],
                    cost=float("inf"),
                    lower_bound=float("nan"),
                    n_redundant=0,
                    runtime_sec=runtime,
                )
            )
            continue
        runtime = time.time() - start_time

        gold_cost = None
        ratio = None
        if gold and instance.n_sets <= max_search_sets:
            gold_cost = cover_cost(
                instance, optimal_cover(instance, max_search_sets=max_search_sets)
            )
            if gold_cost > 0:
                ratio = outcome.cost / gold_cost

        results.append(
            CoverEvalResult(
                n_elements=instance.n_elements,
                n_sets=instance.n_sets,
                frequency=outcome.frequency,
                feasible=True,
                cover=outcome.cover,
                cost=outcome.cost,
                lower_bound=outcome.lower_bound,
                n_redundant=len(redundant_sets(instance, outcome.cover)),
                runtime_sec=runtime,
                gold_cost=gold_cost,
                ratio=ratio,
            )
        )
    return results


def results_frame(results: Sequence[CoverEvalResult]) -> pd.DataFrame:
    """Collect evaluation results into a DataFrame, one row per instance."""
    columns = list(CoverEvalResult.__dataclass_fields__)
    return pd.DataFrame(
        [[getattr(result, col) for col in columns] for result in results],
        columns=columns,
    )
