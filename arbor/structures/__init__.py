"""
Data structures backing the tree algorithms.

- FibonacciHeap: mergeable priority queue with O(1) amortized decrease-key
- DisjointSet: union-find forest with path compression and union by rank
"""

from .disjoint_set import DisjointSet
from .fibonacci import FibonacciHeap, PriorityEntry

__all__ = [
    "DisjointSet",
    "FibonacciHeap",
    "PriorityEntry",
]
