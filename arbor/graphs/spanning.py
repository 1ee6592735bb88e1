"""
Lifecycle of a tree computation bound to one graph.

SpanningTree pairs a strategy with a tag configuration. It is Unbound until
init(graph), Bound afterwards, and Computed once compute() has produced a
result. Each compute() resets every tag and rebuilds the tree from scratch.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

import networkx as nx

from ..errors import StateError
from ..logging import get_logger
from .access import Edge
from .tagging import TreeEdgeTag, TreeResult, TreeStrategy, build_tree, clear_flags

logger = get_logger(__name__)


class TreeState(Enum):
    UNBOUND = "unbound"
    BOUND = "bound"
    COMPUTED = "computed"


class SpanningTree:
    """
    Runs a tree strategy on a graph and tags the resulting edges.

    Args:
        strategy: Kruskal, Prim, Dijkstra or any other TreeStrategy.
        tag: Tag configuration (default: label "SpanningTree.flag",
            True on tree edges, False elsewhere). Can only be replaced
            while unbound.

    Example:
        >>> G = nx.Graph()
        >>> G.add_edge("A", "B", weight=1.0)
        >>> G.add_edge("B", "C", weight=2.0)
        >>> G.add_edge("A", "C", weight=3.0)
        >>> tree = SpanningTree(Kruskal(), TreeEdgeTag("mst"))
        >>> tree.init(G)
        >>> tree.compute()
        >>> tree.tree_weight()
        3.0
    """

    def __init__(self, strategy: TreeStrategy, tag: Optional[TreeEdgeTag] = None):
        self._strategy = strategy
        self._tag = tag if tag is not None else TreeEdgeTag()
        self._graph: Optional[nx.Graph] = None
        self._result: Optional[TreeResult] = None

    @property
    def strategy(self) -> TreeStrategy:
        return self._strategy

    @property
    def graph(self) -> Optional[nx.Graph]:
        return self._graph

    @property
    def state(self) -> TreeState:
        if self._graph is None:
            return TreeState.UNBOUND
        if self._result is None:
            return TreeState.BOUND
        return TreeState.COMPUTED

    @property
    def tag(self) -> TreeEdgeTag:
        return self._tag

    @tag.setter
    def tag(self, tag: TreeEdgeTag) -> None:
        if self._graph is not None:
            raise StateError("Tagging cannot be reconfigured once a graph is bound.")
        self._tag = tag

    def init(self, graph: nx.Graph) -> None:
        """
        Bind to graph.

        Raises:
            StateError: If already bound to a different graph.
        """
        if self._graph is not None and self._graph is not graph:
            raise StateError("Already bound to another graph.")
        self._graph = graph
        self._result = None

    def compute(self) -> None:
        """
        Reset all tags and rebuild the tree from scratch.

        Does nothing while unbound, unless the strategy's check_ready
        refuses to run without a graph.
        """
        if self._graph is None:
            check_ready = getattr(self._strategy, "check_ready", None)
            if check_ready is not None:
                check_ready(None)
            logger.debug("compute() called before init(); nothing to do")
            return

        self._result = None
        self._result = build_tree(self._graph, self._tag, self._strategy)

    def tree_edges(self) -> Iterator[Edge]:
        """
        Return a one-shot iterator over the edges of the last computed tree.

        Edges come in the order the strategy selected them. Call again for
        a fresh iterator.
        """
        if self._result is None:
            return iter(())
        return iter(self._result.edges)

    def tree_weight(self) -> float:
        """Total weight of the last computed tree (0.0 before compute())."""
        if self._result is None:
            return 0.0
        return self._result.weight

    def clear(self) -> None:
        """
        Remove the tag label from every edge.

        The computed edges and weight stay available; compute() can be
        called again.
        """
        if self._graph is not None:
            clear_flags(self._graph, self._tag)
