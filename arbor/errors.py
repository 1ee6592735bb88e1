"""Exception types raised by arbor."""


class ArborError(Exception):
    """Base class for errors raised by arbor."""


class StateError(ArborError, RuntimeError):
    """An operation is not allowed in the object's current state.

    Raised when tagging is reconfigured on a bound algorithm, or when a
    heap entry is given a larger key or is no longer queued.
    """


class PreconditionError(ArborError, ValueError):
    """A computation cannot start or continue with the given input.

    Raised when Dijkstra has no graph or no source, and whenever a negative
    length is found. Tags and path records written by the failed call must
    not be trusted.
    """


class DataError(ArborError, ValueError):
    """A property value cannot be read as a number.

    Weight and length lookups catch this and fall back to their default,
    so it does not escape a computation.
    """
