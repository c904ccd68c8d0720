"""Instance generators for dualcover.

This module contains helper functions to build synthetic set cover
instances for testing and benchmarking the solver.

The primary functions are:

* :func:`random_instance` – a random feasible weighted instance with a
  given density.
* :func:`sample_instances` – several random instances drawn from one RNG.
* :func:`vertex_cover_instance` – the set cover encoding of weighted vertex
  cover, where every element (edge) lies in exactly two sets (its
  endpoints).
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from .core import Instance


def random_instance(
    n_elements: int,
    n_sets: int,
    *,
    density: float = 0.3,
    cost_range: tuple[float, float] = (1.0, 10.0),
    rng: random.Random | None = None,
) -> Instance:
    """Generate a random feasible weighted set cover instance.

    Each set includes each element independently with probability
    ``density``. Elements left uncovered afterwards are added to a randomly
    chosen set, so every element belongs to at least one set. Costs are
    drawn uniformly from ``cost_range``.

    Parameters
    ----------
    n_elements : int
        Size of the universe.
    n_sets : int
        Number of sets.
    density : float, default 0.3
        Probability that a set contains a given element, in ``(0, 1]``.
    cost_range : tuple[float, float], default (1.0, 10.0)
        Inclusive bounds of the uniform cost distribution.
    rng : random.Random, optional
        Source of randomness. If ``None``, the default RNG is used.

    Returns
    -------
    Instance
        A valid, feasible instance.
    """
    if n_elements <= 0 or n_sets <= 0:
        raise ValueError(
            f"n_elements ({n_elements}) and n_sets ({n_sets}) must be positive"
        )
    if not 0.0 < density <= 1.0:
        raise ValueError(f"density must be in (0, 1], got {density}")
    low, high = cost_range
    if low < 0 or high < low:
        raise ValueError(f"Invalid cost_range {cost_range}")
    if rng is None:
        rng = random.Random()

    members: list[list[int]] = [
        [e for e in range(n_elements) if rng.random() < density]
        for _ in range(n_sets)
    ]
    covered = {e for chosen in members for e in chosen}
    for element in range(n_elements):
        if element not in covered:
            members[rng.randrange(n_sets)].append(element)

    instance = Instance(n_elements)
    for chosen in members:
        instance.add_set(rng.uniform(low, high), sorted(chosen))
    return instance


def sample_instances(
    n_samples: int,
    n_elements: int,
    n_sets: int,
    *,
    density: float = 0.3,
    cost_range: tuple[float, float] = (1.0, 10.0),
    rng: random.Random | None = None,
) -> list[Instance]:
    """Draw ``n_samples`` instances with :func:`random_instance`."""
    if rng is None:
        rng = random.Random()
    return [
        random_instance(
            n_elements, n_sets, density=density, cost_range=cost_range, rng=rng
        )
        for _ in range(n_samples)
    ]


def vertex_cover_instance(
    n_vertices: int,
    edges: Sequence[tuple[int, int]],
    weights: Sequence[float] | None = None,
) -> Instance:
    """Encode weighted vertex cover as weighted set cover.

    Edge ``k`` becomes element ``k`` and vertex ``v`` becomes set ``v``,
    containing the edges incident to ``v``. Every element therefore has
    frequency at most 2, and the primal-dual solver is a 2-approximation.

    Parameters
    ----------
    n_vertices : int
        Number of vertices, labelled ``0 .. n_vertices - 1``.
    edges : Sequence[tuple[int, int]]
        Edge list. Must be non-empty; self-loops are allowed.
    weights : Sequence[float], optional
        Vertex weights. Defaults to unit weights.

    Returns
    -------
    Instance
        The set cover instance.
    """
    if not edges:
        raise ValueError("edges must be non-empty")
    if weights is None:
        weights = [1.0] * n_vertices
    if len(weights) != n_vertices:
        raise ValueError(
            f"Expected {n_vertices} weights, got {len(weights)}"
        )
    incident: list[list[int]] = [[] for _ in range(n_vertices)]
    for k, (u, v) in enumerate(edges):
        for vertex in (u, v):
            if not 0 <= vertex < n_vertices:
                raise ValueError(f"Edge {k} has unknown vertex {vertex}")
        incident[u].append(k)
        if v != u:
            incident[v].append(k)

    instance = Instance(len(edges))
    for weight, edge_ids in zip(weights, incident):
        instance.add_set(weight, edge_ids)
    return instance
