"""Paths as a root node followed by a chain of edges."""

from __future__ import annotations

from typing import Hashable, List, Optional

import networkx as nx

from .access import Edge, number, opposite


class Path:
    """
    A walk starting at a root node.

    Each added edge must touch the current head; its other endpoint becomes
    the new head. A path without a root is empty (used for unreachable
    targets).
    """

    def __init__(self, root: Optional[Hashable] = None):
        self._nodes: List[Hashable] = [] if root is None else [root]
        self._edges: List[Edge] = []

    @property
    def root(self) -> Optional[Hashable]:
        return self._nodes[0] if self._nodes else None

    @property
    def head(self) -> Optional[Hashable]:
        return self._nodes[-1] if self._nodes else None

    @property
    def nodes(self) -> List[Hashable]:
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def is_empty(self) -> bool:
        return not self._nodes

    def add(self, edge: Edge) -> None:
        """
        Extend the path by edge.

        Raises:
            ValueError: If the path has no root or edge does not touch the
                head.
        """
        if not self._nodes:
            raise ValueError("Cannot add an edge to a path without a root")
        self._nodes.append(opposite(edge, self._nodes[-1]))
        self._edges.append(edge)

    def copy(self) -> Path:
        other = Path()
        other._nodes = list(self._nodes)
        other._edges = list(self._edges)
        return other

    def weight(self, graph: nx.Graph, attribute: str = "weight", default: float = 1.0) -> float:
        """Sum of the numeric edge attribute along the path."""
        return sum(number(graph.edges[edge], attribute, default) for edge in self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __repr__(self) -> str:
        return f"Path({self._nodes!r})"
