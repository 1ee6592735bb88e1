"""
Fibonacci heap: a mergeable min-priority queue with decrease-key.

Amortized costs: insert, merge, peek_min and decrease_key are O(1);
extract_min is O(log n). The potential argument uses
#trees + 2 * #marked entries; cascading cuts keep every entry's degree
in O(log n).

References:
    - Fredman, Tarjan. "Fibonacci heaps and their uses in improved network
      optimization algorithms", JACM 34(3), 1987.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 19.
"""

from __future__ import annotations

from typing import Generic, List, Optional, Tuple, TypeVar

from ..diagnostics.debug_mode import is_debug_enabled
from ..errors import StateError

K = TypeVar("K")
V = TypeVar("V")


class PriorityEntry(Generic[K, V]):
    """
    Handle to one queued payload.

    Returned by FibonacciHeap.insert and passed back to decrease_key.
    Sibling links form circular doubly linked lists; the same entry object
    stays valid when its heap is merged into another one.
    """

    __slots__ = (
        "_key",
        "_payload",
        "_parent",
        "_child",
        "_left",
        "_right",
        "_degree",
        "_mark",
        "_queued",
    )

    def __init__(self, key: K, payload: V):
        self._key = key
        self._payload = payload
        self._parent: Optional[PriorityEntry[K, V]] = None
        self._child: Optional[PriorityEntry[K, V]] = None
        self._left: PriorityEntry[K, V] = self
        self._right: PriorityEntry[K, V] = self
        self._degree = 0
        self._mark = False
        self._queued = True

    @property
    def key(self) -> K:
        return self._key

    @property
    def payload(self) -> V:
        return self._payload

    @property
    def in_heap(self) -> bool:
        """False once the entry has been extracted or its heap cleared."""
        return self._queued

    def __repr__(self) -> str:
        return f"PriorityEntry(key={self._key!r}, payload={self._payload!r})"


def _concat(a: PriorityEntry, b: PriorityEntry) -> None:
    """Join the circular list holding b into the one holding a, right after a."""
    a_right = a._right
    b_left = b._left
    a._right = b
    b._left = a
    b_left._right = a_right
    a_right._left = b_left


def _unlink(x: PriorityEntry) -> None:
    x._left._right = x._right
    x._right._left = x._left
    x._left = x
    x._right = x


def _ring(start: PriorityEntry) -> List[PriorityEntry]:
    nodes = [start]
    node = start._right
    while node is not start:
        nodes.append(node)
        node = node._right
    return nodes


class FibonacciHeap(Generic[K, V]):
    """
    Min-ordered Fibonacci heap mapping keys to opaque payloads.

    Keys need to support ``<`` and ``<=``. The heap keeps a forest of
    heap-ordered trees whose roots form a circular list, plus a direct
    pointer to the minimal root.

    Example:
        >>> heap = FibonacciHeap()
        >>> a = heap.insert(5.0, "a")
        >>> b = heap.insert(3.0, "b")
        >>> heap.decrease_key(a, 1.0)
        >>> heap.extract_min()
        'a'
    """

    def __init__(self) -> None:
        self._min: Optional[PriorityEntry[K, V]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        if self._min is None:
            return "FibonacciHeap(size=0)"
        return f"FibonacciHeap(size={self._size}, min_key={self._min._key!r})"

    def is_empty(self) -> bool:
        return self._min is None

    def insert(self, key: K, payload: V) -> PriorityEntry[K, V]:
        """
        Add payload with the given key as a new singleton root.

        Args:
            key: Ordering value.
            payload: Opaque value returned by extract_min.

        Returns:
            The entry handle, usable with decrease_key.
        """
        entry = PriorityEntry(key, payload)
        self._add_root(entry)
        self._size += 1
        if is_debug_enabled():
            self.validate()
        return entry

    def merge(self, other: FibonacciHeap[K, V]) -> None:
        """
        Move every entry of other into this heap in O(1).

        Entry handles obtained from other stay valid and now belong to this
        heap. other is left empty.

        Raises:
            ValueError: If other is this heap.
        """
        if other is self:
            raise ValueError("cannot merge a heap into itself")
        if other._min is None:
            return

        if self._min is None:
            self._min = other._min
        else:
            _concat(self._min, other._min)
            if other._min._key < self._min._key:
                self._min = other._min

        self._size += other._size
        other._min = None
        other._size = 0

        if is_debug_enabled():
            self.validate()

    def peek_min(self) -> Tuple[K, V]:
        """
        Return (key, payload) of the minimum without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if self._min is None:
            raise IndexError("peek_min from an empty heap")
        return self._min._key, self._min._payload

    @property
    def min_key(self) -> K:
        return self.peek_min()[0]

    @property
    def min_payload(self) -> V:
        return self.peek_min()[1]

    def extract_min(self) -> V:
        """
        Remove the minimal entry and return its payload.

        The minimum's children become roots, then roots of equal degree are
        linked until all degrees differ.

        Raises:
            IndexError: If the heap is empty.
        """
        z = self._min
        if z is None:
            raise IndexError("extract_min from an empty heap")

        if z._child is not None:
            for child in _ring(z._child):
                child._parent = None
                child._mark = False
            _concat(z, z._child)
            z._child = None

        if z._right is z:
            self._min = None
        else:
            self._min = z._right
            _unlink(z)
            self._consolidate()

        self._size -= 1
        z._queued = False
        z._degree = 0

        if is_debug_enabled():
            self.validate()
        return z._payload

    def decrease_key(self, entry: PriorityEntry[K, V], new_key: K) -> None:
        """
        Lower the key of a queued entry.

        Args:
            entry: Handle returned by insert.
            new_key: Replacement key, not greater than the current one.

        Raises:
            StateError: If new_key is not <= the entry's key, or the
                entry is no longer queued.
        """
        if not entry._queued:
            raise StateError(f"{entry!r} is no longer in the heap")
        # also refuses keys that do not compare, such as NaN
        if not new_key <= entry._key:
            raise StateError(
                f"decrease_key cannot raise a key: {new_key!r} is not <= {entry._key!r}"
            )

        entry._key = new_key
        parent = entry._parent
        if parent is not None and new_key < parent._key:
            self._cut(entry, parent)
            self._cascading_cut(parent)
        if new_key < self._min._key:
            self._min = entry

        if is_debug_enabled():
            self.validate()

    def clear(self) -> None:
        """Drop all entries. Handles of dropped entries become unusable."""
        if self._min is not None:
            stack = _ring(self._min)
            while stack:
                entry = stack.pop()
                entry._queued = False
                if entry._child is not None:
                    stack.extend(_ring(entry._child))
        self._min = None
        self._size = 0

    def validate(self) -> None:
        """
        Check the structural invariants of the whole forest.

        Verifies heap order, parent links, circular sibling links, degree
        counters, the size counter and the minimum pointer.

        Raises:
            ValueError: Describing the first violation found.
        """
        if self._min is None:
            if self._size != 0:
                raise ValueError(f"empty root list but size is {self._size}")
            return

        count = 0
        roots = _ring(self._min)
        stack: List[Tuple[PriorityEntry, Optional[PriorityEntry]]] = []
        for root in roots:
            if root._key < self._min._key:
                raise ValueError(f"root {root!r} is smaller than min {self._min!r}")
            stack.append((root, None))

        while stack:
            entry, parent = stack.pop()
            count += 1
            if not entry._queued:
                raise ValueError(f"{entry!r} is linked but not queued")
            if entry._parent is not parent:
                raise ValueError(f"{entry!r} has a wrong parent link")
            if entry._right._left is not entry or entry._left._right is not entry:
                raise ValueError(f"{entry!r} has broken sibling links")
            if parent is not None and entry._key < parent._key:
                raise ValueError(f"{entry!r} is smaller than its parent {parent!r}")
            children = [] if entry._child is None else _ring(entry._child)
            if len(children) != entry._degree:
                raise ValueError(
                    f"{entry!r} has degree {entry._degree} but {len(children)} children"
                )
            stack.extend((child, entry) for child in children)

        if count != self._size:
            raise ValueError(f"found {count} entries but size is {self._size}")

    def _add_root(self, entry: PriorityEntry[K, V]) -> None:
        entry._parent = None
        if self._min is None:
            entry._left = entry
            entry._right = entry
            self._min = entry
        else:
            _concat(self._min, entry)
            if entry._key < self._min._key:
                self._min = entry

    def _link(self, child: PriorityEntry[K, V], parent: PriorityEntry[K, V]) -> None:
        _unlink(child)
        child._parent = parent
        child._mark = False
        if parent._child is None:
            parent._child = child
        else:
            _concat(parent._child, child)
        parent._degree += 1

    def _consolidate(self) -> None:
        # Degree-indexed scratch space, rebuilt on every call.
        by_degree: List[Optional[PriorityEntry[K, V]]] = []

        for root in _ring(self._min):
            x = root
            degree = x._degree
            while True:
                if degree >= len(by_degree):
                    by_degree.extend([None] * (degree + 1 - len(by_degree)))
                y = by_degree[degree]
                if y is None:
                    break
                if not x._key < y._key:
                    x, y = y, x
                self._link(y, x)
                by_degree[degree] = None
                degree += 1
            by_degree[degree] = x

        self._min = None
        for root in by_degree:
            if root is not None and (self._min is None or root._key < self._min._key):
                self._min = root

    def _cut(self, entry: PriorityEntry[K, V], parent: PriorityEntry[K, V]) -> None:
        if entry._right is entry:
            parent._child = None
        elif parent._child is entry:
            parent._child = entry._right
        _unlink(entry)
        parent._degree -= 1
        entry._mark = False
        self._add_root(entry)

    def _cascading_cut(self, entry: PriorityEntry[K, V]) -> None:
        parent = entry._parent
        while parent is not None:
            if not entry._mark:
                entry._mark = True
                return
            self._cut(entry, parent)
            entry = parent
            parent = entry._parent
