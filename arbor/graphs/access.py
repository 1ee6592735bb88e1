"""
Access helpers over networkx graphs.

Edges are identified by the tuples networkx reports: ``(u, v)`` for simple
graphs and ``(u, v, key)`` for multigraphs. Node and edge properties live
in the networkx attribute dicts. Numeric property values are read through
to_number, which rejects anything that is not a real number.
"""

import math
import numbers
from typing import Any, Hashable, Iterator, List, Mapping, Optional, Tuple

import networkx as nx

from ..errors import DataError

Edge = Tuple[Hashable, ...]


def edge_list(graph: nx.Graph) -> List[Edge]:
    """
    Return every edge of the graph in networkx enumeration order.

    The order is stable for an unmodified graph, which makes it usable for
    deterministic tie-breaking.
    """
    if graph.is_multigraph():
        return list(graph.edges(keys=True))
    return list(graph.edges())


def edge_data(graph: nx.Graph, edge: Edge) -> dict:
    """Return the attribute dict of an edge."""
    return graph.edges[edge]


def opposite(edge: Edge, node: Hashable) -> Hashable:
    """
    Return the endpoint of edge that is not node.

    Raises:
        ValueError: If node is not an endpoint of edge.
    """
    u, v = edge[0], edge[1]
    if node == u:
        return v
    if node == v:
        return u
    raise ValueError(f"Node {node} is not an endpoint of edge {edge}")


def incident_edges(graph: nx.Graph, node: Hashable) -> Iterator[Edge]:
    """
    Yield every edge touching node, ignoring direction.

    For directed graphs this is out-edges followed by in-edges; a self-loop
    is reported once.
    """
    multi = graph.is_multigraph()
    if not graph.is_directed():
        yield from graph.edges(node, keys=True) if multi else graph.edges(node)
        return
    yield from leaving_edges(graph, node)
    for edge in entering_edges(graph, node):
        if edge[0] != edge[1]:
            yield edge


def leaving_edges(graph: nx.Graph, node: Hashable) -> Iterator[Edge]:
    """Yield the edges that can be followed away from node."""
    multi = graph.is_multigraph()
    if graph.is_directed():
        yield from graph.out_edges(node, keys=True) if multi else graph.out_edges(node)
    else:
        yield from graph.edges(node, keys=True) if multi else graph.edges(node)


def entering_edges(graph: nx.Graph, node: Hashable) -> Iterator[Edge]:
    """Yield the edges that can be followed into node."""
    multi = graph.is_multigraph()
    if graph.is_directed():
        yield from graph.in_edges(node, keys=True) if multi else graph.in_edges(node)
    else:
        yield from graph.edges(node, keys=True) if multi else graph.edges(node)


def to_number(value: Any) -> float:
    """
    Convert a property value to a float.

    Real numbers (including numpy scalars) and numeric strings are
    accepted. Booleans, NaN and everything else are rejected.

    Raises:
        DataError: If value is not numeric.
    """
    if isinstance(value, bool):
        raise DataError(f"boolean {value!r} is not a numeric value")
    if isinstance(value, str):
        try:
            result = float(value)
        except ValueError as exc:
            raise DataError(f"{value!r} is not a numeric value") from exc
    elif isinstance(value, numbers.Real):
        result = float(value)
    else:
        raise DataError(f"{value!r} of type {type(value).__name__} is not a numeric value")

    if math.isnan(result):
        raise DataError("NaN is not a usable numeric value")
    return result


def read_number(attributes: Mapping[str, Any], name: str) -> Optional[float]:
    """
    Read attribute name as a float.

    Returns:
        The value, or None if the attribute is missing or not numeric.
    """
    if name not in attributes:
        return None
    try:
        return to_number(attributes[name])
    except DataError:
        return None


def number(attributes: Mapping[str, Any], name: str, default: float) -> float:
    """Read attribute name as a float, falling back to default."""
    value = read_number(attributes, name)
    return default if value is None else value


def count_missing(graph: nx.Graph, name: str) -> int:
    """Count the edges whose attribute name is missing or not numeric."""
    return sum(
        1 for _, _, data in graph.edges(data=True) if read_number(data, name) is None
    )


def edge_key(graph: nx.Graph, edge: Edge) -> Hashable:
    """
    Return a hashable identity for edge.

    On undirected graphs ``(u, v)`` and ``(v, u)`` name the same edge and
    get the same key. A third item is kept only on multigraphs, where it is
    the edge key.
    """
    extra = tuple(edge[2:3]) if graph.is_multigraph() else ()
    if graph.is_directed():
        return (edge[0], edge[1]) + extra
    return (frozenset((edge[0], edge[1])),) + extra
