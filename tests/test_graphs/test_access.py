"""Tests for graph access helpers."""

import math

import networkx as nx
import numpy as np
import pytest

from arbor.errors import DataError
from arbor.graphs.access import (
    count_missing,
    edge_key,
    edge_list,
    entering_edges,
    incident_edges,
    leaving_edges,
    number,
    opposite,
    read_number,
    to_number,
)


class TestToNumber:
    """Tests for numeric coercion."""

    @pytest.mark.parametrize(
        "value, expected",
        [(3, 3.0), (2.5, 2.5), (np.int64(4), 4.0), (np.float32(0.5), 0.5), ("1.5", 1.5), (-2, -2.0)],
    )
    def test_numeric_values(self, value, expected):
        """Test that real numbers and numeric strings are accepted."""
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [True, False, "heavy", None, [1], math.nan])
    def test_non_numeric_values(self, value):
        """Test that booleans, NaN and other values raise DataError."""
        with pytest.raises(DataError):
            to_number(value)

    def test_infinity_is_numeric(self):
        """Test that infinities are usable values."""
        assert to_number(math.inf) == math.inf

    def test_read_number_defaults(self):
        """Test fallback for missing and non-numeric attributes."""
        attributes = {"w": "abc", "x": 2}
        assert read_number(attributes, "w") is None
        assert read_number(attributes, "missing") is None
        assert read_number(attributes, "x") == 2.0
        assert number(attributes, "w", 1.0) == 1.0
        assert number(attributes, "x", 1.0) == 2.0

    def test_count_missing(self):
        """Test counting edges without a numeric attribute."""
        graph = nx.Graph()
        graph.add_edge(1, 2, weight=1)
        graph.add_edge(2, 3, weight="x")
        graph.add_edge(3, 4)
        assert count_missing(graph, "weight") == 2


class TestEdgeAccess:
    """Tests for edge enumeration and endpoints."""

    def test_opposite(self):
        """Test opposite endpoint lookup."""
        assert opposite(("a", "b"), "a") == "b"
        assert opposite(("a", "b"), "b") == "a"
        assert opposite(("a", "a"), "a") == "a"
        assert opposite(("a", "b", 0), "b") == "a"
        with pytest.raises(ValueError):
            opposite(("a", "b"), "c")

    def test_edge_list_multigraph_keys(self):
        """Test that multigraph edges carry their key."""
        graph = nx.MultiGraph()
        graph.add_edge(1, 2)
        graph.add_edge(1, 2)
        assert edge_list(graph) == [(1, 2, 0), (1, 2, 1)]

    def test_undirected_incidence(self):
        """Test that undirected graphs use all incident edges both ways."""
        graph = nx.Graph([(1, 2), (2, 3)])
        assert sorted(incident_edges(graph, 2)) == [(2, 1), (2, 3)]
        assert sorted(leaving_edges(graph, 2)) == [(2, 1), (2, 3)]
        assert sorted(entering_edges(graph, 2)) == [(2, 1), (2, 3)]

    def test_directed_incidence(self):
        """Test that directed graphs split leaving and entering edges."""
        graph = nx.DiGraph([(1, 2), (2, 3), (2, 2)])
        assert sorted(leaving_edges(graph, 2)) == [(2, 2), (2, 3)]
        assert sorted(entering_edges(graph, 2)) == [(1, 2), (2, 2)]
        assert sorted(incident_edges(graph, 2)) == [(1, 2), (2, 2), (2, 3)]

    def test_edge_key_orientation(self):
        """Test that edge_key ignores orientation only on undirected graphs."""
        undirected = nx.Graph([(1, 2)])
        directed = nx.DiGraph([(1, 2), (2, 1)])
        assert edge_key(undirected, (1, 2)) == edge_key(undirected, (2, 1))
        assert edge_key(directed, (1, 2)) != edge_key(directed, (2, 1))
        multi = nx.MultiGraph()
        multi.add_edge(1, 2)
        multi.add_edge(1, 2)
        assert edge_key(multi, (1, 2, 0)) != edge_key(multi, (2, 1, 1))
        assert edge_key(multi, (1, 2, 1)) == edge_key(multi, (2, 1, 1))

    def test_edge_key_ignores_extra_items_on_simple_graphs(self):
        """Test that a weight riding along in the tuple is not read as a key."""
        graph = nx.Graph([(1, 3)])
        assert edge_key(graph, (1, 3, 1.0)) == edge_key(graph, (3, 1))
        directed = nx.DiGraph([(1, 3)])
        assert edge_key(directed, (1, 3, 1.0)) == edge_key(directed, (1, 3))
