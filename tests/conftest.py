"""Shared test fixtures for dualcover tests."""

import random

import pytest

from dualcover import Instance


@pytest.fixture
def textbook_instance():
    """Five elements, four sets; dual growth selects S1 and S3."""
    instance = Instance(5)
    instance.add_set(50, [0, 1])
    instance.add_set(2, [1, 2, 3])
    instance.add_set(3, [3, 4])
    instance.add_set(2, [4, 0])
    return instance


@pytest.fixture
def redundant_instance():
    """Two elements where the tight sets include a redundant one."""
    instance = Instance(2)
    instance.add_set(1.0, [0])
    instance.add_set(1.0, [0, 1])
    instance.add_set(1.0, [1])
    return instance


@pytest.fixture
def infeasible_instance():
    """Element 1 belongs to no set."""
    instance = Instance(3)
    instance.add_set(1.0, [0])
    instance.add_set(1.0, [2])
    return instance


@pytest.fixture
def rng():
    """Seeded RNG for reproducible random instances."""
    return random.Random(1234)
