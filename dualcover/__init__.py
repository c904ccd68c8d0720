"""dualcover: weighted set cover via the primal-dual schema.

The dualcover package provides an f-approximation for weighted set cover:
- Instance construction and structural validation
- Primal-dual dual growth with a certifying lower bound
- Evaluation against brute-force optima on small instances
- Random and vertex-cover instance generators
"""

import logging
from importlib import metadata

# Core types and data structures
from .core import InfeasibleError, Instance, StructuralError

# Evaluation
from .eval import (
    CoverEvalResult,
    cover_cost,
    evaluate_instances,
    is_cover,
    optimal_cover,
    redundant_sets,
    results_frame,
    uncovered_elements,
)

# Solver
from .primal_dual import EPSILON, DualGrowthResult, primal_dual_cover, solve

# Instance generators
from .simulate import random_instance, sample_instances, vertex_cover_instance
from .types import ElementIndex, SetIndex

try:
    __version__ = metadata.version("dualcover")
except metadata.PackageNotFoundError:
    # Fallback for development installs
    __version__ = "0.1.0"

__all__ = [
    # Core types
    "Instance",
    "StructuralError",
    "InfeasibleError",
    "ElementIndex",
    "SetIndex",
    # Solver
    "EPSILON",
    "DualGrowthResult",
    "primal_dual_cover",
    "solve",
    # Evaluation
    "CoverEvalResult",
    "cover_cost",
    "evaluate_instances",
    "is_cover",
    "optimal_cover",
    "redundant_sets",
    "results_frame",
    "uncovered_elements",
    # Generators
    "random_instance",
    "sample_instances",
    "vertex_cover_instance",
    # Logging
    "get_logger",
]


# Configure package-wide logging
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the dualcover package.

    Parameters
    ----------
    name : str | None, optional
        Logger name. If None, uses the package name.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    if name is None:
        name = __name__.split(".")[0]
    return logging.getLogger(name)


# Set up default logging configuration
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
