"""
Kruskal's minimum spanning tree (forest) algorithm.

Edges are stably sorted by weight and accepted whenever they join two
different components of a disjoint-set forest.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2.
"""

from typing import Hashable, List, Tuple

import networkx as nx
import numpy as np

from ..logging import get_logger
from ..structures.disjoint_set import DisjointSet
from .access import edge_list, number, read_number
from .tagging import EdgeSink, TreeEdgeTag, TreeResult, build_tree

logger = get_logger(__name__)


class Kruskal:
    """
    Minimum spanning forest by ascending edge weight.

    Edge weights come from a numeric edge attribute; a missing or
    non-numeric value counts as 1.0. Equal weights are taken in graph
    enumeration order. On a disconnected graph the result is a minimum
    spanning forest with one tree per component.

    Complexity: O(E log E).

    Args:
        weight: Edge attribute holding the weight.
    """

    def __init__(self, weight: str = "weight"):
        self.weight = weight

    def make_tree(self, graph: nx.Graph, sink: EdgeSink) -> TreeResult:
        edges = edge_list(graph)
        weights = np.ones(len(edges), dtype=float)
        missing = 0
        for i, edge in enumerate(edges):
            value = read_number(graph.edges[edge], self.weight)
            if value is None:
                missing += 1
            else:
                weights[i] = value
        if missing:
            logger.warning(
                "%d of %d edges have no numeric %r attribute; using 1.0",
                missing,
                len(edges),
                self.weight,
            )

        order = np.argsort(weights, kind="stable")
        forest = DisjointSet(graph.nodes)
        wanted = graph.number_of_nodes() - 1

        tree = []
        total = 0.0
        for i in order:
            if len(tree) >= wanted:
                break
            edge = edges[i]
            if forest.union(edge[0], edge[1]):
                sink.on(edge)
                tree.append(edge)
                total += float(weights[i])

        if len(tree) < wanted:
            logger.debug(
                "Kruskal: graph is disconnected, spanning forest has %d trees",
                forest.set_count,
            )
        return TreeResult(tuple(tree), total)


def kruskal_mst(
    graph: nx.Graph, weight: str = "weight"
) -> List[Tuple[Hashable, Hashable, float]]:
    """
    Kruskal's algorithm without tagging.

    Args:
        graph: networkx graph (direction is ignored).
        weight: Edge attribute holding the weight.

    Returns:
        List of (u, v, weight) edges of the minimum spanning forest, in the
        order they were accepted.

    Example:
        >>> G = nx.Graph()
        >>> G.add_weighted_edges_from([("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)])
        >>> kruskal_mst(G)
        [('A', 'B', 1.0), ('B', 'C', 2.0)]
    """
    result = build_tree(graph, TreeEdgeTag(label=None), Kruskal(weight))
    return [
        (edge[0], edge[1], number(graph.edges[edge], weight, 1.0))
        for edge in result.edges
    ]
