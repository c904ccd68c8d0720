"""Type aliases for dualcover.

This module defines type aliases used throughout the package for clarity
and consistency. The actual data structures are in core.py.
"""

ElementIndex = int
"""Alias for an element of the universe ``0, 1, ..., n_elements - 1``."""

SetIndex = int
"""Alias for the position of a set within an instance.

Positions are assigned in the order sets are added and are what the solver
returns.
"""
