"""Diagnostics and debugging utilities for arbor."""

from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .core import (
    assert_forest,
    assert_tree_tags,
    is_forest,
)

__all__ = [
    "is_forest",
    "assert_forest",
    "assert_tree_tags",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
