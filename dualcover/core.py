"""Core types and data structures for dualcover.

This module defines the fundamental building blocks used throughout the dualcover package:
- Instance: A weighted set family over the universe ``0 .. n_elements - 1``
- StructuralError: Raised when an instance is internally inconsistent
- InfeasibleError: Raised when some element cannot be covered by any set
"""

import math
import numbers
from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd

from .types import ElementIndex, SetIndex


class StructuralError(ValueError):
    """Instance data is internally inconsistent."""


class InfeasibleError(ValueError):
    """No set covers a given element, so no cover exists.

    Attributes
    ----------
    element : ElementIndex
        The first element (in processing order) with no covering set.
    """

    def __init__(self, element: ElementIndex) -> None:
        self.element = element
        super().__init__(f"Infeasible: element {element} is not covered by any set")


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _is_valid_cost(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        # Integers too large for a float.
        return False


class Instance:
    """A weighted set cover instance.

    The number of elements is fixed at construction. Sets are appended one at
    a time with :meth:`add_set`; the order of addition defines each set's
    index, which is what :func:`dualcover.solve` reports and which also
    decides ties during dual growth.

    Parameters
    ----------
    n_elements : int
        Size of the universe. Elements are ``0, 1, ..., n_elements - 1``.

    Raises
    ------
    StructuralError
        If ``n_elements`` is not a positive integer.

    Examples
    --------
    >>> instance = Instance(3)
    >>> instance.add_set(1.0, [0, 1])
    >>> instance.add_set(2.0, [2])
    >>> instance.n_sets
    2
    """

    def __init__(self, n_elements: int) -> None:
        if not _is_integer(n_elements) or n_elements <= 0:
            raise StructuralError(
                f"n_elements must be a positive integer, got {n_elements!r}"
            )
        self._n_elements = int(n_elements)
        self._sets: list[tuple[ElementIndex, ...]] = []
        self._costs: list[float] = []

    def __len__(self) -> int:
        return len(self._sets)

    def __repr__(self) -> str:
        return f"Instance(n_elements={self._n_elements}, n_sets={len(self._sets)})"

    @property
    def n_elements(self) -> int:
        """Number of elements in the universe."""
        return self._n_elements

    @property
    def n_sets(self) -> int:
        """Number of sets added so far."""
        return len(self._sets)

    @property
    def sets(self) -> tuple[tuple[ElementIndex, ...], ...]:
        """The sets in index order."""
        return tuple(self._sets)

    @property
    def costs(self) -> tuple[float, ...]:
        """The set costs in index order."""
        return tuple(self._costs)

    def add_set(self, cost: float, elements: Iterable[ElementIndex]) -> None:
        """Append a set with the given cost.

        Nothing is checked here; malformed costs or element indices are
        reported by :meth:`validate`. Duplicate elements are tolerated.

        Parameters
        ----------
        cost : float
            Non-negative, finite cost of the set.
        elements : Iterable[ElementIndex]
            Elements covered by the set.
        """
        self._sets.append(tuple(elements))
        self._costs.append(cost)

    def validate(self) -> None:
        """Check the structural invariants of the instance.

        Raises
        ------
        StructuralError
            If the number of costs differs from the number of sets, if a
            cost is not a finite non-negative real number, or if an element
            index is not an integer in ``[0, n_elements)``.
        """
        if len(self._costs) != len(self._sets):
            raise StructuralError(
                f"Length mismatch: {len(self._sets)} sets "
                f"but {len(self._costs)} costs"
            )
        for idx, cost in enumerate(self._costs):
            if not _is_valid_cost(cost):
                raise StructuralError(
                    f"Set {idx} has invalid cost {cost!r}; "
                    "costs must be finite and non-negative"
                )
        for idx, members in enumerate(self._sets):
            for element in members:
                if not _is_integer(element) or not 0 <= element < self._n_elements:
                    raise StructuralError(
                        f"Set {idx} references element {element!r} outside "
                        f"[0, {self._n_elements})"
                    )

    def element_sets(self) -> list[list[SetIndex]]:
        """Map each element to the ascending list of sets containing it.

        A set listing an element several times appears once in that
        element's entry.

        Returns
        -------
        list[list[SetIndex]]
            ``result[e]`` lists the indices of the sets covering element ``e``.

        Raises
        ------
        StructuralError
            If the instance fails :meth:`validate`.
        """
        self.validate()
        lookup: list[list[SetIndex]] = [[] for _ in range(self._n_elements)]
        for idx, members in enumerate(self._sets):
            for element in dict.fromkeys(members):
                lookup[element].append(idx)
        return lookup

    def frequency(self) -> int:
        """Largest number of sets containing any single element.

        This is the ``f`` in the primal-dual approximation guarantee.

        Raises
        ------
        StructuralError
            If the instance fails :meth:`validate`.
        """
        return max((len(covering) for covering in self.element_sets()), default=0)

    def to_frame(self) -> pd.DataFrame:
        """Return one row per set with its cost, elements and size."""
        frame = pd.DataFrame(
            {
                "cost": list(self._costs),
                "elements": [list(members) for members in self._sets],
                "size": [len(set(members)) for members in self._sets],
            }
        )
        frame.index.name = "set"
        return frame

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        n_elements: int,
        *,
        cost_col: str = "cost",
        elements_col: str = "elements",
    ) -> "Instance":
        """Build an instance from a table with one row per set.

        Rows are added in frame order, so the ``i``-th row becomes set ``i``
        regardless of the frame's index labels.

        Parameters
        ----------
        df : pd.DataFrame
            Table holding a cost column and a column of element sequences.
        n_elements : int
            Size of the universe.
        cost_col : str, default "cost"
            Name of the cost column.
        elements_col : str, default "elements"
            Name of the column holding the element sequences.

        Returns
        -------
        Instance
            The (unvalidated) instance.
        """
        missing = [col for col in (cost_col, elements_col) if col not in df.columns]
        if missing:
            raise ValueError(f"Missing columns: {missing}")
        instance = cls(n_elements)
        for cost, members in zip(df[cost_col], df[elements_col]):
            if not isinstance(members, Sequence) and not isinstance(
                members, np.ndarray
            ):
                raise ValueError(f"Elements must be a sequence, got {members!r}")
            if isinstance(cost, np.generic):
                cost = cost.item()
            instance.add_set(
                cost, [int(e) if _is_integer(e) else e for e in members]
            )
        return instance
