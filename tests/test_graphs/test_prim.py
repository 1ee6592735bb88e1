"""Tests for Prim's minimum spanning forest."""

import networkx as nx
import pytest

from arbor.diagnostics import assert_tree_tags, is_forest
from arbor.graphs import Kruskal, Prim, SpanningTree, TreeEdgeTag, kruskal_mst, prim_mst


class TestPrim:
    """Tests for Prim on reference and random graphs."""

    def test_toy_graph_weight(self, toy_graph):
        """Test the classic example yields weight 37 with n - 1 edges."""
        tag = TreeEdgeTag("mst")
        tree = SpanningTree(Prim(), tag)
        tree.init(toy_graph)
        tree.compute()

        edges = list(tree.tree_edges())
        assert tree.tree_weight() == 37.0
        assert len(edges) == 8
        assert is_forest(edges)
        assert_tree_tags(toy_graph, tag, edges)

    def test_starts_from_first_node(self, toy_graph):
        """Test that the first node of the graph is extracted first."""
        result = prim_mst(toy_graph)
        assert result[0] == ("A", "B", 4.0)

    def test_triangle(self):
        """Test Prim on a triangle."""
        graph = nx.Graph()
        graph.add_weighted_edges_from([("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)])
        assert prim_mst(graph) == [("A", "B", 1.0), ("B", "C", 2.0)]

    def test_disconnected_graph_forest(self, toy_graph):
        """Test that Prim restarts in every component."""
        toy_graph.remove_edges_from([("H", "G"), ("B", "C"), ("H", "I")])
        toy_graph.add_node("Z")

        tree = SpanningTree(Prim(), TreeEdgeTag("mst"))
        tree.init(toy_graph)
        tree.compute()

        assert tree.tree_weight() == 36.0
        assert len(list(tree.tree_edges())) == 7

    def test_missing_weights_count_as_one(self):
        """Test that edges without a weight count as 1.0."""
        graph = nx.Graph()
        graph.add_edge("A", "B", weight=5)
        graph.add_edge("B", "C")
        graph.add_edge("A", "C", weight="heavy")
        assert sum(w for _, _, w in prim_mst(graph)) == 2.0

    @pytest.mark.parametrize("n_nodes, probability", [(10, 0.5), (30, 0.2), (50, 0.1), (40, 0.03)])
    def test_matches_kruskal_and_networkx(self, make_random_graph, n_nodes, probability):
        """Test that Prim and Kruskal agree on the forest weight."""
        graph = make_random_graph(n_nodes, probability)
        expected = nx.minimum_spanning_tree(graph).size(weight="weight")

        prim = prim_mst(graph)
        kruskal = kruskal_mst(graph)

        assert sum(w for _, _, w in prim) == pytest.approx(expected)
        assert sum(w for _, _, w in kruskal) == pytest.approx(expected)
        assert len(prim) == len(kruskal)
        assert is_forest(prim)

    def test_distinct_weights_give_same_tree(self, rng):
        """Test that with distinct weights both algorithms pick the same edges."""
        graph = nx.gnp_random_graph(20, 0.4, seed=int(rng.integers(0, 1000)))
        weights = rng.permutation(graph.number_of_edges())
        for (u, v), w in zip(list(graph.edges()), weights):
            graph.edges[u, v]["weight"] = int(w)

        prim = {frozenset((u, v)) for u, v, _ in prim_mst(graph)}
        kruskal = {frozenset((u, v)) for u, v, _ in kruskal_mst(graph)}
        assert prim == kruskal

    def test_directed_graph_ignores_direction(self):
        """Test that Prim follows edges against their direction."""
        graph = nx.DiGraph()
        graph.add_edge("B", "A", weight=1)
        graph.add_edge("C", "B", weight=1)
        graph.add_edge("A", "C", weight=5)

        assert prim_mst(graph) == [("B", "A", 1.0), ("C", "B", 1.0)]

    def test_same_graph_two_tags(self, toy_graph):
        """Test that Prim and Kruskal can tag one graph under different labels."""
        prim = SpanningTree(Prim(), TreeEdgeTag("prim"))
        kruskal = SpanningTree(Kruskal(), TreeEdgeTag("kruskal"))
        prim.init(toy_graph)
        kruskal.init(toy_graph)
        prim.compute()
        kruskal.compute()

        assert prim.tree_weight() == kruskal.tree_weight() == 37.0
        assert_tree_tags(toy_graph, prim.tag, prim.tree_edges())
        assert_tree_tags(toy_graph, kruskal.tag, kruskal.tree_edges())
