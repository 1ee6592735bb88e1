"""
Disjoint-set forest (union-find) with path compression and union by rank.

Used by Kruskal's algorithm for cycle detection.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21.3.
"""

from typing import Dict, Hashable, Iterable, Optional


class DisjointSet:
    """
    Partition of hashable elements into disjoint sets.

    Each element has one parent slot and one rank slot. find compresses
    paths on the way up; union attaches the lower-rank root under the
    higher-rank one.
    """

    def __init__(self, elements: Optional[Iterable[Hashable]] = None):
        """
        Initialize the forest, optionally with one singleton per element.

        Args:
            elements: Iterable of elements to add as singletons.
        """
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        self._set_count = 0

        if elements is not None:
            for element in elements:
                self.make_set(element)

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently in the forest."""
        return self._set_count

    def make_set(self, x: Hashable) -> bool:
        """
        Add x as a singleton set.

        Returns:
            True if x was added, False if it was already present.
        """
        if x in self._parent:
            return False
        self._parent[x] = x
        self._rank[x] = 0
        self._set_count += 1
        return True

    def find(self, x: Hashable) -> Hashable:
        """
        Return the representative of the set containing x.

        Every element on the path from x to the root is re-parented to the
        root.

        Raises:
            KeyError: If x was never added.
        """
        parent = self._parent
        root = parent[x]
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the sets containing x and y.

        Returns:
            True if the sets were merged, False if x and y were already in
            the same set (an edge between them would close a cycle).

        Raises:
            KeyError: If x or y was never added.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1

        self._set_count -= 1
        return True

    def in_same_set(self, x: Hashable, y: Hashable) -> bool:
        """Return True if x and y belong to the same set."""
        return self.find(x) == self.find(y)

    def clear(self) -> None:
        self._parent.clear()
        self._rank.clear()
        self._set_count = 0
