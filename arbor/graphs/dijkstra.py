"""
Dijkstra's single-source shortest path tree on a Fibonacci heap.

Path lengths can be measured on edges, on nodes, or on both. All lengths
must be non-negative; the whole graph is scanned before the search starts
so a negative length fails the computation before any distance is
finalized.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3.
    - Fredman, Tarjan. "Fibonacci heaps and their uses in improved network
      optimization algorithms", JACM 34(3), 1987.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Optional, Tuple

import networkx as nx

from ..errors import PreconditionError
from ..logging import get_logger
from ..structures.fibonacci import FibonacciHeap, PriorityEntry
from .access import Edge, edge_key, edge_list, entering_edges, leaving_edges, opposite, read_number
from .paths import Path
from .tagging import EdgeSink, TreeEdgeTag, TreeResult, build_tree

logger = get_logger(__name__)


class Element(Enum):
    """Which graph elements contribute to path length."""

    EDGE = "edge"
    NODE = "node"
    EDGE_AND_NODE = "edge_and_node"


@dataclass
class PathRecord:
    """Per-node search state: queue entry while unsettled, then the result."""

    entry: Optional[PriorityEntry] = None
    edge_from_parent: Optional[Edge] = None
    distance: float = math.inf


class Dijkstra:
    """
    Shortest path tree from a single source.

    The length of a path is the sum, over its edges, of the edge length,
    the length of the node the edge leads to, or both (see Element). When
    nodes count, the source's own length is the length of the empty path.
    With no length attribute every element has length 1; an element missing
    the attribute, or holding a non-numeric value, also has length 1.

    Search state lives in a table owned by this instance, so several
    instances can work on the same graph. Results stay valid until the
    graph changes or compute runs again.

    Args:
        element: Which elements carry length (default: edges).
        length: Node/edge attribute holding the length, or None for unit
            lengths.
        source: Source node; can also be assigned later.

    Example:
        >>> G = nx.Graph()
        >>> G.add_weighted_edges_from([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)], weight="length")
        >>> d = Dijkstra(Element.EDGE, length="length", source="A")
        >>> tree = SpanningTree(d, TreeEdgeTag("sp"))
        >>> tree.init(G)
        >>> tree.compute()
        >>> d.path_length("C")
        2.0
        >>> d.path("C").nodes
        ['A', 'B', 'C']
    """

    def __init__(
        self,
        element: Element = Element.EDGE,
        length: Optional[str] = None,
        source: Optional[Hashable] = None,
    ):
        if not isinstance(element, Element):
            raise ValueError(f"element must be an Element, got {element!r}")
        self.element = element
        self.length = length
        self.source = source
        self._graph: Optional[nx.Graph] = None
        self._records: Dict[Hashable, PathRecord] = {}

    # Lengths

    def _element_length(self, attributes: Mapping[str, Any], what: str) -> float:
        if self.length is None:
            return 1.0
        value = read_number(attributes, self.length)
        if value is None:
            return 1.0
        if value < 0:
            raise PreconditionError(f"{what} has negative length {value}")
        return value

    def length_of(self, graph: nx.Graph, edge: Edge, dest: Hashable) -> float:
        """Length added to a path when it follows edge into dest."""
        total = 0.0
        if self.element is not Element.NODE:
            total += self._element_length(graph.edges[edge], f"Edge {edge}")
        if self.element is not Element.EDGE:
            total += self._element_length(graph.nodes[dest], f"Node {dest}")
        return total

    def source_length(self, graph: nx.Graph) -> float:
        """Length of the empty path at the source."""
        if self.element is Element.EDGE:
            return 0.0
        return self._element_length(graph.nodes[self.source], f"Node {self.source}")

    # Computation

    def check_ready(self, graph: Optional[nx.Graph]) -> None:
        """
        Refuse to run without a graph, without a source, or with any
        negative length in the graph.

        Raises:
            PreconditionError: Describing what is missing or negative.
        """
        if graph is None:
            raise PreconditionError("No graph specified. Call init() first.")
        if self.source is None:
            raise PreconditionError("No source specified. Set source first.")
        if self.source not in graph:
            raise PreconditionError(f"Source node {self.source} not in graph")
        if self.length is None:
            return

        if self.element is not Element.NODE:
            for edge in edge_list(graph):
                self._element_length(graph.edges[edge], f"Edge {edge}")
        if self.element is not Element.EDGE:
            for node, attributes in graph.nodes(data=True):
                self._element_length(attributes, f"Node {node}")

    def make_tree(self, graph: nx.Graph, sink: EdgeSink) -> TreeResult:
        if self.source is None or self.source not in graph:
            raise PreconditionError(f"Source node {self.source} not in graph")

        self._graph = graph
        self._records = {}
        heap: FibonacciHeap[float, Hashable] = FibonacciHeap()
        start = self.source_length(graph)
        for node in graph.nodes:
            key = start if node == self.source else math.inf
            self._records[node] = PathRecord(entry=heap.insert(key, node))

        tree = []
        total = start
        while heap:
            u = heap.extract_min()
            record_u = self._records[u]
            record_u.distance = record_u.entry.key
            record_u.entry = None

            if record_u.edge_from_parent is not None:
                sink.on(record_u.edge_from_parent)
                tree.append(record_u.edge_from_parent)
                total += self.length_of(graph, record_u.edge_from_parent, u)

            if math.isinf(record_u.distance):
                continue

            for edge in leaving_edges(graph, u):
                v = opposite(edge, u)
                record_v = self._records[v]
                if record_v.entry is None:
                    continue
                candidate = record_u.distance + self.length_of(graph, edge, v)
                if candidate < record_v.entry.key:
                    record_v.edge_from_parent = edge
                    heap.decrease_key(record_v.entry, candidate)

        logger.debug(
            "Dijkstra from %s: reached %d of %d nodes",
            self.source,
            len(tree) + 1,
            graph.number_of_nodes(),
        )
        return TreeResult(tuple(tree), total)

    # Results

    def path_length(self, target: Hashable) -> float:
        """Length of the shortest path to target, +inf if unreachable."""
        record = self._records.get(target)
        if record is None:
            return math.inf
        return record.distance

    def edge_from_parent(self, target: Hashable) -> Optional[Edge]:
        """Last edge of the shortest path to target, None for the source or unreachable nodes."""
        record = self._records.get(target)
        if record is None:
            return None
        return record.edge_from_parent

    def parent(self, target: Hashable) -> Optional[Hashable]:
        """Predecessor of target in the tree."""
        edge = self.edge_from_parent(target)
        if edge is None:
            return None
        return opposite(edge, target)

    def path_nodes(self, target: Hashable) -> Iterator[Hashable]:
        """
        Yield the nodes of the shortest path from target back to the source.

        Nothing is yielded for an unreachable target.
        """
        if math.isinf(self.path_length(target)):
            return
        node: Optional[Hashable] = target
        while node is not None:
            yield node
            node = self.parent(node)

    def path_edges(self, target: Hashable) -> Iterator[Edge]:
        """Yield the edges of the shortest path from target back to the source."""
        node = target
        edge = self.edge_from_parent(node)
        while edge is not None:
            yield edge
            node = opposite(edge, node)
            edge = self.edge_from_parent(node)

    def path(self, target: Hashable) -> Path:
        """
        Return the shortest path from the source to target.

        The path is empty (no root) when target is unreachable.
        """
        if math.isinf(self.path_length(target)):
            return Path()
        path = Path(self.source)
        for edge in reversed(list(self.path_edges(target))):
            path.add(edge)
        return path

    def _tied_edges(self, node: Hashable) -> List[Edge]:
        """
        Entering edges of node that lie on some shortest path.

        Edges are oriented (predecessor, node), like the stored
        predecessor edges.
        """
        distance = self.path_length(node)
        directed = self._graph.is_directed()
        tied = []
        for edge in entering_edges(self._graph, node):
            u = opposite(edge, node)
            if u == node or math.isinf(self.path_length(u)):
                continue
            if self.path_length(u) + self.length_of(self._graph, edge, node) == distance:
                tied.append(edge if directed else (u, node) + tuple(edge[2:]))
        return tied

    def all_paths(self, target: Hashable) -> Iterator[Path]:
        """
        Yield every shortest path from the source to target.

        Branches over all tied entering edges, so the number of paths, and
        the running time, can grow exponentially with the graph. Meant for
        diagnostics on small graphs.
        """
        if self._graph is None or math.isinf(self.path_length(target)):
            return

        stack: List[Tuple[Hashable, Tuple[Edge, ...], Tuple[Hashable, ...]]] = [
            (target, (), (target,))
        ]
        while stack:
            node, edges, seen = stack.pop()
            if node == self.source:
                path = Path(self.source)
                for edge in reversed(edges):
                    path.add(edge)
                yield path
                continue
            for edge in reversed(self._tied_edges(node)):
                prev = opposite(edge, node)
                # zero-length edges can make tied predecessors loop
                if prev in seen:
                    continue
                stack.append((prev, edges + (edge,), seen + (prev,)))

    def shortest_path_edges(self, target: Hashable) -> List[Edge]:
        """
        Return every edge lying on at least one shortest path to target.

        Unlike all_paths this visits each node once.
        """
        if self._graph is None or math.isinf(self.path_length(target)):
            return []

        result: List[Edge] = []
        seen_edges = set()
        seen_nodes = {target}
        pending = [target]
        while pending:
            node = pending.pop()
            for edge in self._tied_edges(node):
                key = edge_key(self._graph, edge)
                if key in seen_edges:
                    continue
                seen_edges.add(key)
                result.append(edge)
                prev = opposite(edge, node)
                if prev not in seen_nodes:
                    seen_nodes.add(prev)
                    pending.append(prev)
        return result

    def tree_edges(self) -> Iterator[Edge]:
        """Yield the predecessor edge of every reached node, in node order."""
        for record in self._records.values():
            if record.edge_from_parent is not None:
                yield record.edge_from_parent

    def tree_length(self) -> float:
        """Sum of the lengths of the tree, including the source's own length."""
        if self._graph is None:
            return 0.0
        length = self.source_length(self._graph)
        for node, record in self._records.items():
            if record.edge_from_parent is not None:
                length += self.length_of(self._graph, record.edge_from_parent, node)
        return length


def dijkstra(
    graph: nx.Graph,
    source: Hashable,
    length: Optional[str] = None,
    element: Element = Element.EDGE,
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional[Hashable]]]:
    """
    Dijkstra's algorithm without tagging.

    Args:
        graph: networkx graph with non-negative lengths.
        source: Source node.
        length: Length attribute, or None for unit lengths.
        element: Which elements carry length.

    Returns:
        Tuple of:
        - dist: node -> shortest distance from source (inf if unreachable)
        - parent: node -> previous node on the shortest path (None for the
          source and unreachable nodes)

    Raises:
        PreconditionError: If source is not in graph or a length is negative.

    Example:
        >>> G = nx.DiGraph()
        >>> G.add_edge("A", "B", length=1.0)
        >>> G.add_edge("B", "C", length=2.0)
        >>> dist, parent = dijkstra(G, "A", length="length")
        >>> dist["C"]
        3.0
    """
    search = Dijkstra(element, length, source)
    build_tree(graph, TreeEdgeTag(label=None), search)
    dist = {node: search.path_length(node) for node in graph.nodes}
    parent = {node: search.parent(node) for node in graph.nodes}
    return dist, parent
