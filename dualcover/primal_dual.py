"""Primal-dual approximation for weighted set cover.

The LP relaxation of weighted set cover and its dual are

.. math::

    \\min \\sum_s c_s x_s \\quad \\text{s.t.} \\quad
    \\sum_{s \\ni e} x_s \\ge 1,\\; x \\ge 0

    \\max \\sum_e y_e \\quad \\text{s.t.} \\quad
    \\sum_{e \\in s} y_e \\le c_s,\\; y \\ge 0

The algorithm visits the elements in ascending index order and raises each
dual variable ``y_e`` as far as the covering sets allow, i.e. until the
tightest of them has no headroom left. Every set whose dual constraint ends
up tight is taken into the cover. If each element lies in at most ``f`` sets,
the cover costs at most ``f`` times the optimum (``f = 2`` for weighted vertex
cover).

The returned cover may contain sets that are redundant given the others. No
pruning pass is applied; see :func:`dualcover.eval.redundant_sets` to
inspect them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .core import InfeasibleError, Instance
from .types import SetIndex

logger = logging.getLogger(__name__)

EPSILON = 1e-4
"""Tolerance for judging a dual constraint tight under float arithmetic."""


@dataclass(frozen=True, slots=True)
class DualGrowthResult:
    """Outcome of one primal-dual run.

    Attributes
    ----------
    cover : list[SetIndex]
        Selected set indices in ascending order.
    cost : float
        Total cost of the selected sets.
    duals : np.ndarray
        Final dual value ``y_e`` per element, shape (n_elements,).
    slack_used : np.ndarray
        Accumulated dual contribution per set, shape (n_sets,).
    lower_bound : float
        ``sum(duals)``; by weak duality no cover is cheaper than this.
    frequency : int
        Largest number of sets containing any element.
    """

    cover: list[SetIndex]
    cost: float
    duals: np.ndarray
    slack_used: np.ndarray
    lower_bound: float
    frequency: int

    @property
    def approximation_bound(self) -> float:
        """Upper bound ``f * lower_bound`` on the cost of the cover."""
        return self.frequency * self.lower_bound


def primal_dual_cover(
    instance: Instance, *, epsilon: float = EPSILON
) -> DualGrowthResult:
    """Run dual growth on ``instance`` and report the cover with its duals.

    Parameters
    ----------
    instance : Instance
        The instance to solve. It is validated first and never modified.
    epsilon : float, default EPSILON
        Tightness tolerance. Only meant for numerically awkward inputs.

    Returns
    -------
    DualGrowthResult
        The cover together with the dual solution that certifies it.

    Raises
    ------
    StructuralError
        If ``instance.validate()`` fails. No dual growth is attempted.
    InfeasibleError
        If some element belongs to no set.
    """
    instance.validate()

    n_elements = instance.n_elements
    n_sets = instance.n_sets
    logger.debug("Solving instance with %d elements and %d sets", n_elements, n_sets)

    element_sets = instance.element_sets()
    costs = np.asarray(instance.costs, dtype=float)
    slack_used = np.zeros(n_sets, dtype=float)
    duals = np.zeros(n_elements, dtype=float)

    for element in range(n_elements):
        covering = element_sets[element]
        if not covering:
            logger.warning("Element %d is not covered by any set", element)
            raise InfeasibleError(element)

        gap = costs[covering] - slack_used[covering]
        # Drift can leave an already tight set a hair over its cost.
        increment = max(float(gap.min()), 0.0)

        slack_used[covering] += increment
        duals[element] = increment
        logger.debug("y[%d] = %g (covering sets %s)", element, increment, covering)

    tight = np.abs(costs - slack_used) < epsilon
    cover = [int(idx) for idx in np.flatnonzero(tight)]
    cost = float(costs[cover].sum())
    lower_bound = float(duals.sum())
    frequency = max((len(covering) for covering in element_sets), default=0)

    logger.debug(
        "Selected %d sets with cost %g (dual lower bound %g, f=%d)",
        len(cover),
        cost,
        lower_bound,
        frequency,
    )
    return DualGrowthResult(
        cover=cover,
        cost=cost,
        duals=duals,
        slack_used=slack_used,
        lower_bound=lower_bound,
        frequency=frequency,
    )


def solve(instance: Instance) -> list[SetIndex]:
    """Return a weighted set cover of ``instance`` within a factor ``f``.

    Elements are processed in ascending index order, which makes the result
    deterministic; a different order could yield a different valid cover.

    Parameters
    ----------
    instance : Instance
        The instance to solve.

    Returns
    -------
    list[SetIndex]
        Indices of the selected sets, ascending.

    Raises
    ------
    StructuralError
        If the instance fails validation.
    InfeasibleError
        If some element belongs to no set.

    Examples
    --------
    >>> instance = Instance(5)
    >>> instance.add_set(50, [0, 1])
    >>> instance.add_set(2, [1, 2, 3])
    >>> instance.add_set(3, [3, 4])
    >>> instance.add_set(2, [4, 0])
    >>> solve(instance)
    [1, 3]
    """
    return primal_dual_cover(instance).cover
