"""Tests for the disjoint-set forest."""

import itertools

import pytest

from arbor.structures import DisjointSet


class TestDisjointSet:
    """Tests for make_set, find and union."""

    def test_singletons(self):
        """Test that each element starts as its own representative."""
        forest = DisjointSet(["a", "b", "c"])
        assert len(forest) == 3
        assert forest.set_count == 3
        for x in "abc":
            assert forest.find(x) == x

    def test_make_set_twice(self):
        """Test that adding an element twice is refused."""
        forest = DisjointSet()
        assert forest.make_set(1)
        assert not forest.make_set(1)
        assert len(forest) == 1

    def test_union_returns_false_when_joined(self):
        """Test that union reports whether it merged two sets."""
        forest = DisjointSet(range(4))
        assert forest.union(0, 1)
        assert forest.union(2, 3)
        assert forest.union(1, 3)
        assert not forest.union(0, 2)
        assert not forest.union(3, 3)
        assert forest.set_count == 1

    def test_find_after_union(self):
        """Test that united elements share a representative."""
        forest = DisjointSet(range(6))
        forest.union(0, 1)
        forest.union(1, 2)
        forest.union(4, 5)
        assert forest.find(0) == forest.find(2)
        assert forest.in_same_set(0, 2)
        assert forest.in_same_set(4, 5)
        assert not forest.in_same_set(2, 4)
        assert not forest.in_same_set(3, 0)
        assert forest.set_count == 3

    def test_unknown_element(self):
        """Test that find raises KeyError for unknown elements."""
        forest = DisjointSet([1])
        assert 1 in forest
        assert 2 not in forest
        with pytest.raises(KeyError):
            forest.find(2)

    def test_equivalence_after_random_unions(self, rng):
        """Test that "same set" stays an equivalence relation."""
        n = 30
        forest = DisjointSet(range(n))
        labels = list(range(n))
        for _ in range(40):
            x, y = (int(v) for v in rng.integers(0, n, size=2))
            merged = forest.union(x, y)
            assert merged == (labels[x] != labels[y])
            if merged:
                old, new = labels[y], labels[x]
                labels = [new if label == old else label for label in labels]
            assert forest.find(x) == forest.find(y)

        for x, y in itertools.product(range(n), repeat=2):
            assert forest.in_same_set(x, y) == (labels[x] == labels[y])
        assert forest.set_count == len(set(labels))

    def test_clear(self):
        """Test that clear empties the forest."""
        forest = DisjointSet(range(3))
        forest.union(0, 1)
        forest.clear()
        assert len(forest) == 0
        assert forest.set_count == 0
        assert 0 not in forest
