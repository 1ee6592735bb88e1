"""arbor - minimum spanning trees and shortest path trees over networkx graphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_forest,
    assert_tree_tags,
    debug_context,
    is_debug_enabled,
    is_forest,
    set_debug_enabled,
)

# Errors
from .errors import ArborError, DataError, PreconditionError, StateError

# Tree algorithms
from .graphs import (
    Dijkstra,
    EdgeSink,
    Element,
    Kruskal,
    Path,
    PathRecord,
    Prim,
    SpanningTree,
    TreeEdgeTag,
    TreeResult,
    TreeState,
    TreeStrategy,
    build_tree,
    clear_flags,
    dijkstra,
    kruskal_mst,
    prim_mst,
    reset_flags,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Data structures
from .structures import DisjointSet, FibonacciHeap, PriorityEntry

__all__ = [
    # Version
    "__version__",
    # Data structures
    "FibonacciHeap",
    "PriorityEntry",
    "DisjointSet",
    # Lifecycle and tagging
    "SpanningTree",
    "TreeState",
    "TreeEdgeTag",
    "TreeResult",
    "TreeStrategy",
    "EdgeSink",
    "build_tree",
    "reset_flags",
    "clear_flags",
    # Strategies
    "Kruskal",
    "Prim",
    "Dijkstra",
    "Element",
    "PathRecord",
    "Path",
    "kruskal_mst",
    "prim_mst",
    "dijkstra",
    # Errors
    "ArborError",
    "StateError",
    "PreconditionError",
    "DataError",
    # Diagnostics
    "is_forest",
    "assert_forest",
    "assert_tree_tags",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
