"""Tests for instance generators."""

import random

import pytest

from dualcover import (
    is_cover,
    random_instance,
    sample_instances,
    vertex_cover_instance,
)


class TestRandomInstance:
    """Test random instance generation."""

    def test_shape_and_validity(self, rng):
        """Test generated instances have the requested shape."""
        instance = random_instance(12, 5, rng=rng)

        assert instance.n_elements == 12
        assert instance.n_sets == 5
        instance.validate()

    def test_always_feasible(self, rng):
        """Test every element is covered even at low density."""
        for _ in range(20):
            instance = random_instance(20, 3, density=0.01, rng=rng)
            assert is_cover(instance, range(instance.n_sets))

    def test_cost_range(self, rng):
        """Test costs stay within the requested range."""
        instance = random_instance(5, 30, cost_range=(2.0, 3.0), rng=rng)
        assert all(2.0 <= c <= 3.0 for c in instance.costs)

    def test_sorted_elements(self, rng):
        """Test set elements are sorted."""
        instance = random_instance(15, 6, density=0.5, rng=rng)
        for members in instance.sets:
            assert list(members) == sorted(members)

    def test_deterministic_with_seed(self):
        """Test a fixed seed reproduces the instance."""
        first = random_instance(10, 4, rng=random.Random(7))
        second = random_instance(10, 4, rng=random.Random(7))

        assert first.sets == second.sets
        assert first.costs == second.costs

    def test_full_density(self, rng):
        """Test density 1 puts every element in every set."""
        instance = random_instance(4, 2, density=1.0, rng=rng)
        assert instance.sets == ((0, 1, 2, 3), (0, 1, 2, 3))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n_elements": 0, "n_sets": 2},
            {"n_elements": 2, "n_sets": 0},
            {"n_elements": 2, "n_sets": 2, "density": 0.0},
            {"n_elements": 2, "n_sets": 2, "density": 1.5},
            {"n_elements": 2, "n_sets": 2, "cost_range": (-1.0, 1.0)},
            {"n_elements": 2, "n_sets": 2, "cost_range": (3.0, 1.0)},
        ],
    )
    def test_invalid_arguments(self, kwargs):
        """Test invalid arguments raise ValueError."""
        with pytest.raises(ValueError):
            random_instance(**kwargs)


class TestSampleInstances:
    """Test batch sampling."""

    def test_count(self, rng):
        """Test the requested number of instances is drawn."""
        instances = sample_instances(4, 6, 3, rng=rng)
        assert len(instances) == 4
        assert all(i.n_elements == 6 and i.n_sets == 3 for i in instances)

    def test_deterministic_with_seed(self):
        """Test a fixed seed reproduces the batch."""
        first = sample_instances(3, 6, 3, rng=random.Random(0))
        second = sample_instances(3, 6, 3, rng=random.Random(0))
        assert [i.sets for i in first] == [i.sets for i in second]


class TestVertexCoverInstance:
    """Test the vertex cover encoding."""

    def test_encoding(self):
        """Test edges become elements and vertices become sets."""
        instance = vertex_cover_instance(3, [(0, 1), (1, 2)], [1.0, 2.0, 3.0])

        assert instance.n_elements == 2
        assert instance.sets == ((0,), (0, 1), (1,))
        assert instance.costs == (1.0, 2.0, 3.0)
        assert instance.frequency() == 2

    def test_default_weights(self):
        """Test vertices default to unit weight."""
        instance = vertex_cover_instance(2, [(0, 1)])
        assert instance.costs == (1.0, 1.0)

    def test_self_loop(self):
        """Test a self-loop is listed once."""
        instance = vertex_cover_instance(2, [(1, 1)])
        assert instance.sets == ((), (0,))

    def test_no_edges(self):
        """Test an empty edge list is rejected."""
        with pytest.raises(ValueError, match="non-empty"):
            vertex_cover_instance(3, [])

    def test_weight_count_mismatch(self):
        """Test the weight count must match the vertex count."""
        with pytest.raises(ValueError, match="weights"):
            vertex_cover_instance(2, [(0, 1)], [1.0])

    def test_unknown_vertex(self):
        """Test edges must reference known vertices."""
        with pytest.raises(ValueError, match="unknown vertex"):
            vertex_cover_instance(2, [(0, 5)])
