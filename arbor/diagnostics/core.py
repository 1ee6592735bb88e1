"""Checks on computed trees and their edge tags."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Tuple

import networkx as nx

from ..structures.disjoint_set import DisjointSet


def is_forest(edges: Iterable[Tuple[Hashable, ...]]) -> bool:
    """
    Return True if the edges contain no cycle, ignoring direction.

    Parameters
    ----------
    edges:
        Edge tuples whose first two items are the endpoints.
    """
    forest = DisjointSet()
    for edge in edges:
        u, v = edge[0], edge[1]
        forest.make_set(u)
        forest.make_set(v)
        if not forest.union(u, v):
            return False
    return True


def assert_forest(edges: Iterable[Tuple[Hashable, ...]]) -> None:
    """
    Assert that the edges form a forest.

    Raises
    ------
    ValueError
        If the edges contain a cycle.
    """
    edges = list(edges)
    if not is_forest(edges):
        raise ValueError(f"Tree edges contain a cycle: {edges}")


def _tag_matches(data: dict, label: str, value: Any) -> bool:
    if value is None:
        return label not in data
    return label in data and type(data[label]) is type(value) and data[label] == value


def assert_tree_tags(
    graph: nx.Graph,
    tag: Any,
    tree_edges: Iterable[Tuple[Hashable, ...]],
) -> None:
    """
    Assert that exactly the tree edges carry the tag's "on" state.

    A tag value of None means the label must be absent. Nothing is checked
    when tagging is disabled.

    Parameters
    ----------
    graph:
        The graph the tree was computed on.
    tag:
        A TreeEdgeTag (anything with label, on and off attributes).
    tree_edges:
        The edges reported by the computation.

    Raises
    ------
    ValueError
        On the first edge whose label does not match.
    """
    if tag.label is None:
        return

    # Both orientations of an undirected edge share one attribute dict.
    on_dicts = {id(graph.edges[edge]) for edge in tree_edges}
    for u, v, data in graph.edges(data=True):
        expected = tag.on if id(data) in on_dicts else tag.off
        if not _tag_matches(data, tag.label, expected):
            raise ValueError(
                f"Edge ({u}, {v}) has {tag.label}={data.get(tag.label, '<absent>')!r}, "
                f"expected {'<absent>' if expected is None else repr(expected)}"
            )
