"""Benchmark tree construction on random graphs."""

import time
from typing import Dict

import networkx as nx
import numpy as np

from arbor.graphs import Dijkstra, Kruskal, Prim, SpanningTree, TreeEdgeTag
from arbor.structures import FibonacciHeap


def _random_graph(n_nodes: int, avg_degree: float, seed: int = 0) -> nx.Graph:
    rng = np.random.default_rng(seed)
    graph = nx.gnp_random_graph(n_nodes, avg_degree / max(n_nodes - 1, 1), seed=seed)
    for u, v in graph.edges():
        graph.edges[u, v]["weight"] = float(rng.uniform(1.0, 100.0))
    return graph


def benchmark_trees(n_nodes: int, avg_degree: float = 8.0, repeats: int = 5) -> Dict[str, float]:
    """Benchmark Kruskal, Prim and Dijkstra on the same graph.

    Args:
        n_nodes: Number of nodes.
        avg_degree: Expected node degree.
        repeats: Number of timed computations per strategy.

    Returns:
        Dictionary with average seconds per compute() for each strategy.
    """
    graph = _random_graph(n_nodes, avg_degree)
    strategies = {
        "kruskal": Kruskal(),
        "prim": Prim(),
        "dijkstra": Dijkstra(length="weight", source=0),
    }

    results: Dict[str, float] = {
        "n_nodes": n_nodes,
        "n_edges": graph.number_of_edges(),
    }
    for name, strategy in strategies.items():
        tree = SpanningTree(strategy, TreeEdgeTag(name))
        tree.init(graph)
        # Warmup
        tree.compute()

        start = time.perf_counter()
        for _ in range(repeats):
            tree.compute()
        end = time.perf_counter()
        results[f"{name}_sec"] = (end - start) / repeats

    return results


def benchmark_heap(n_items: int = 100_000, seed: int = 0) -> Dict[str, float]:
    """Benchmark heap insert, decrease_key and extract_min.

    Args:
        n_items: Number of entries.
        seed: RNG seed for the keys.

    Returns:
        Dictionary with total seconds per phase.
    """
    rng = np.random.default_rng(seed)
    keys = rng.uniform(0.0, 1.0, size=n_items)
    heap = FibonacciHeap()

    start = time.perf_counter()
    entries = [heap.insert(float(k), i) for i, k in enumerate(keys)]
    insert_time = time.perf_counter() - start

    start = time.perf_counter()
    for entry in entries[::2]:
        heap.decrease_key(entry, entry.key / 2)
    decrease_time = time.perf_counter() - start

    start = time.perf_counter()
    while heap:
        heap.extract_min()
    extract_time = time.perf_counter() - start

    return {
        "n_items": n_items,
        "insert_sec": insert_time,
        "decrease_key_sec": decrease_time,
        "extract_min_sec": extract_time,
    }


if __name__ == "__main__":
    print("Benchmarking tree construction...")

    for n in [1_000, 10_000]:
        results = benchmark_trees(n_nodes=n)
        print(f"Random graph ({n} nodes, {results['n_edges']} edges):")
        for name in ["kruskal", "prim", "dijkstra"]:
            print(f"  {name}: {results[f'{name}_sec']*1e3:.1f} ms per compute")

    results = benchmark_heap()
    print(f"Fibonacci heap ({results['n_items']} items):")
    print(f"  insert: {results['insert_sec']*1e3:.1f} ms")
    print(f"  decrease_key (half): {results['decrease_key_sec']*1e3:.1f} ms")
    print(f"  extract_min (all): {results['extract_min_sec']*1e3:.1f} ms")
