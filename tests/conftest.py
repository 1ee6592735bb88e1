"""Pytest configuration and shared fixtures for arbor tests.

This module provides:
- A deterministic numpy RNG fixture
- Small reference graphs used across the graph tests
- Debug mode enabled for every test, so heap and forest invariants are
  checked on each operation
"""

import os

import networkx as nx
import numpy as np
import pytest

from arbor.diagnostics import debug_context


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_checks():
    """Run every test with debug mode on."""
    with debug_context(True):
        yield


@pytest.fixture
def toy_graph() -> nx.Graph:
    """Classic 9-node MST example (CLRS figure 23.1), MST weight 37."""
    graph = nx.Graph()
    edges = ["AB", "AH", "BH", "BC", "HI", "HG", "IC", "IG", "CD", "CF", "GF", "DF", "DE", "FE"]
    weights = [4, 8, 11, 8, 7, 1, 2, 6, 7, 4, 2, 14, 9, 10]
    for name, weight in zip(edges, weights):
        graph.add_edge(name[0], name[1], weight=weight)
    return graph


@pytest.fixture
def detour_graph() -> nx.Graph:
    """Shortest A-F path is A-D-E-F (length 3), not A-B-C-F (length 12)."""
    graph = nx.Graph()
    graph.add_edge("A", "B", length=1)
    graph.add_edge("A", "D", length=1)
    graph.add_edge("B", "C", length=1)
    graph.add_edge("C", "F", length=10)
    graph.add_edge("D", "E", length=1)
    graph.add_edge("E", "F", length=1)
    return graph


@pytest.fixture
def make_random_graph(rng: np.random.Generator):
    """Factory for Erdos-Renyi graphs with integer weights drawn from rng."""

    def _make(
        n_nodes: int,
        edge_probability: float,
        directed: bool = False,
        low: int = 1,
        high: int = 20,
    ) -> nx.Graph:
        seed = int(rng.integers(0, 2**31 - 1))
        graph = nx.gnp_random_graph(n_nodes, edge_probability, seed=seed, directed=directed)
        for u, v in graph.edges():
            graph.edges[u, v]["weight"] = int(rng.integers(low, high))
        return graph

    return _make
