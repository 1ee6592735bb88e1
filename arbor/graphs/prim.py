"""
Prim's minimum spanning tree (forest) algorithm on a Fibonacci heap.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2.
"""

import math
from typing import Dict, Hashable, List, Optional, Tuple

import networkx as nx

from ..logging import get_logger
from ..structures.fibonacci import FibonacciHeap, PriorityEntry
from .access import Edge, count_missing, incident_edges, number, opposite
from .tagging import EdgeSink, TreeEdgeTag, TreeResult, build_tree

logger = get_logger(__name__)


class Prim:
    """
    Minimum spanning forest grown from one node at a time.

    Every node is queued with key +inf. Extracting a node adds its
    candidate connecting edge to the tree (or, when it has none, starts a
    new component) and lowers the keys of its queued neighbours.

    The first node extracted is the first node of graph.nodes, since the
    heap only moves its minimum on a strictly smaller key. Which node
    starts each further component depends on heap-internal order. Direction
    is ignored on directed graphs. Tree edges are reported as enumerated
    from the node already in the tree.

    Complexity: O(E + V log V).

    Args:
        weight: Edge attribute holding the weight; a missing or non-numeric
            value counts as 1.0.
    """

    def __init__(self, weight: str = "weight"):
        self.weight = weight

    def _edge_weight(self, graph: nx.Graph, edge: Edge) -> float:
        return number(graph.edges[edge], self.weight, 1.0)

    def make_tree(self, graph: nx.Graph, sink: EdgeSink) -> TreeResult:
        missing = count_missing(graph, self.weight)
        if missing:
            logger.warning(
                "%d of %d edges have no numeric %r attribute; using 1.0",
                missing,
                graph.number_of_edges(),
                self.weight,
            )

        heap: FibonacciHeap[float, Hashable] = FibonacciHeap()
        entries: Dict[Hashable, Optional[PriorityEntry]] = {
            node: heap.insert(math.inf, node) for node in graph.nodes
        }
        candidates: Dict[Hashable, Edge] = {}

        tree = []
        total = 0.0
        components = 0
        while heap:
            u = heap.extract_min()
            entries[u] = None

            edge = candidates.pop(u, None)
            if edge is None:
                components += 1
            else:
                sink.on(edge)
                tree.append(edge)
                total += self._edge_weight(graph, edge)

            for edge in incident_edges(graph, u):
                v = opposite(edge, u)
                entry = entries[v]
                if entry is None:
                    continue
                w = self._edge_weight(graph, edge)
                if w < entry.key:
                    heap.decrease_key(entry, w)
                    candidates[v] = edge

        logger.debug("Prim: %d component(s)", components)
        return TreeResult(tuple(tree), total)


def prim_mst(
    graph: nx.Graph, weight: str = "weight"
) -> List[Tuple[Hashable, Hashable, float]]:
    """
    Prim's algorithm without tagging.

    Args:
        graph: networkx graph (direction is ignored).
        weight: Edge attribute holding the weight.

    Returns:
        List of (u, v, weight) edges of the minimum spanning forest, in the
        order nodes joined the tree.

    Example:
        >>> G = nx.Graph()
        >>> G.add_weighted_edges_from([("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)])
        >>> prim_mst(G)
        [('A', 'B', 1.0), ('B', 'C', 2.0)]
    """
    result = build_tree(graph, TreeEdgeTag(label=None), Prim(weight))
    return [
        (edge[0], edge[1], number(graph.edges[edge], weight, 1.0))
        for edge in result.edges
    ]
