"""
Tree algorithms over networkx graphs.

This package provides:
- Tree-edge tagging and the SpanningTree lifecycle shared by all strategies
- Minimum spanning forests (Kruskal, Prim)
- Single-source shortest path trees (Dijkstra) with path queries

Strategies only select edges; build_tree and SpanningTree own the tag
reset and tag writing around them.
"""

from .access import edge_key, edge_list, opposite, to_number
from .dijkstra import Dijkstra, Element, PathRecord, dijkstra
from .kruskal import Kruskal, kruskal_mst
from .paths import Path
from .prim import Prim, prim_mst
from .spanning import SpanningTree, TreeState
from .tagging import (
    EdgeSink,
    TreeEdgeTag,
    TreeResult,
    TreeStrategy,
    build_tree,
    clear_flags,
    reset_flags,
)

__all__ = [
    "SpanningTree",
    "TreeState",
    "TreeEdgeTag",
    "TreeResult",
    "TreeStrategy",
    "EdgeSink",
    "build_tree",
    "reset_flags",
    "clear_flags",
    "Kruskal",
    "Prim",
    "Dijkstra",
    "Element",
    "PathRecord",
    "Path",
    "kruskal_mst",
    "prim_mst",
    "dijkstra",
    "edge_key",
    "edge_list",
    "opposite",
    "to_number",
]

# Example usage:
# import networkx as nx
# from arbor.graphs import Kruskal, SpanningTree, TreeEdgeTag
#
# G = nx.Graph()
# G.add_edge("A", "B", weight=1.0)
# G.add_edge("B", "C", weight=2.0)
# tree = SpanningTree(Kruskal(), TreeEdgeTag("mst"))
# tree.init(G)
# tree.compute()
# G.edges["A", "B"]["mst"]  # True
