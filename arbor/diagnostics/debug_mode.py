"""
Process-wide switch for arbor's self-checks.

With debug mode on, every FibonacciHeap mutation ends with validate() and
build_tree asserts that the chosen edges form a forest. Both checks walk
the whole structure, so they are meant for tests and bug hunts, not for
production runs. The initial value comes from the ARBOR_DEBUG environment
variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "ARBOR_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """
    Return whether heap validation and forest checks are switched on.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Switch the self-checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        Whether heaps and tree builds should check themselves.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch the self-checks for the duration of a block.

    The previous setting comes back on exit, also when the block raises.

    Parameters
    ----------
    enabled:
        Setting to use inside the block.

    Example
    -------
    >>> heap = FibonacciHeap()
    >>> with debug_context(True):
    ...     entry = heap.insert(3.0, "a")  # validate() runs after the insert
    >>> with debug_context(False):
    ...     heap.decrease_key(entry, 1.0)  # no structure walk
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
