"""
Tree-edge tagging and the shared tree-building step.

A tree strategy (Kruskal, Prim, Dijkstra) only knows how to pick edges.
build_tree owns everything around it: the optional readiness check, the
reset of every edge to the "off" tag, and handing the strategy a sink that
writes the "on" tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple, runtime_checkable

import networkx as nx

from ..diagnostics import assert_forest, is_debug_enabled
from ..logging import get_logger
from .access import Edge, edge_data

logger = get_logger(__name__)


@dataclass(frozen=True)
class TreeEdgeTag:
    """
    Label written on edges to record tree membership.

    Attributes:
        label: Edge attribute name. None disables tagging entirely.
        on: Value written on tree edges. None removes the label instead.
        off: Value written on the other edges. None removes the label
            instead.
    """

    label: Optional[str] = "SpanningTree.flag"
    on: Any = True
    off: Any = False

    def __post_init__(self) -> None:
        """Validate TreeEdgeTag invariants."""
        if self.label is None:
            return
        if not isinstance(self.label, str) or not self.label:
            raise ValueError(f"label must be a non-empty string or None, got {self.label!r}.")
        # 1 and True compare equal but are told apart by type
        if type(self.on) is type(self.off) and self.on == self.off:
            raise ValueError(
                f"on and off must differ to tell tree edges apart, both are {self.on!r}."
            )

    @property
    def enabled(self) -> bool:
        return self.label is not None


def _write(data: dict, label: str, value: Any) -> None:
    if value is None:
        data.pop(label, None)
    else:
        data[label] = value


class EdgeSink:
    """Writes tag values on the edges of one graph."""

    def __init__(self, graph: nx.Graph, tag: TreeEdgeTag):
        self.graph = graph
        self.tag = tag

    def on(self, edge: Edge) -> None:
        """Mark edge as a tree edge."""
        if self.tag.enabled:
            _write(edge_data(self.graph, edge), self.tag.label, self.tag.on)

    def off(self, edge: Edge) -> None:
        """Mark edge as a non-tree edge."""
        if self.tag.enabled:
            _write(edge_data(self.graph, edge), self.tag.label, self.tag.off)


@dataclass(frozen=True)
class TreeResult:
    """Edges chosen by a strategy, in the order it chose them, and their total weight."""

    edges: Tuple[Edge, ...]
    weight: float


@runtime_checkable
class TreeStrategy(Protocol):
    """
    An algorithm that selects tree edges.

    make_tree receives the graph and a sink and must call sink.on for every
    edge it selects. A strategy may also define check_ready(graph), called
    before any tag is touched, to refuse to run (graph may be None).
    """

    def make_tree(self, graph: nx.Graph, sink: EdgeSink) -> TreeResult:
        ...


def reset_flags(graph: nx.Graph, tag: TreeEdgeTag) -> None:
    """Give every edge the "off" tag. Does nothing when tagging is disabled."""
    if not tag.enabled:
        return
    for _, _, data in graph.edges(data=True):
        _write(data, tag.label, tag.off)


def clear_flags(graph: nx.Graph, tag: TreeEdgeTag) -> None:
    """Remove the tag label from every edge."""
    if not tag.enabled:
        return
    for _, _, data in graph.edges(data=True):
        data.pop(tag.label, None)


def build_tree(graph: nx.Graph, tag: TreeEdgeTag, strategy: TreeStrategy) -> TreeResult:
    """
    Reset the tags of graph and rebuild a tree from scratch with strategy.

    Args:
        graph: Graph to compute on.
        tag: Tag configuration.
        strategy: Edge-selecting algorithm.

    Returns:
        The strategy's TreeResult.
    """
    check_ready = getattr(strategy, "check_ready", None)
    if check_ready is not None:
        check_ready(graph)

    reset_flags(graph, tag)
    result = strategy.make_tree(graph, EdgeSink(graph, tag))

    if is_debug_enabled():
        assert_forest(result.edges)

    logger.debug(
        "%s: %d tree edges over %d nodes, weight %g",
        type(strategy).__name__,
        len(result.edges),
        graph.number_of_nodes(),
        result.weight,
    )
    return result
