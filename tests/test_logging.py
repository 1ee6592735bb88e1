"""Tests for logging utilities."""

import logging
from io import StringIO

import networkx as nx

from arbor.graphs import Kruskal, SpanningTree
from arbor.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "arbor.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names inside the package are not prefixed twice."""
    assert get_logger("arbor.graphs.prim").name == "arbor.graphs.prim"
    assert get_logger().name == "arbor"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_module")
        logger.debug("Debug message")
    finally:
        configure_logging(level=logging.WARNING)

    assert "Debug message" in stream.getvalue()
    assert "[DEBUG] arbor.test_module" in stream.getvalue()


def test_tree_build_logs_at_debug():
    """Test that computing a tree reports its size at debug level."""
    graph = nx.Graph()
    graph.add_edge("A", "B", weight=1)
    stream = StringIO()
    try:
        configure_logging(level="DEBUG", stream=stream, format_string="%(name)s %(message)s")
        tree = SpanningTree(Kruskal())
        tree.init(graph)
        tree.compute()
    finally:
        configure_logging(level=logging.WARNING)

    assert "arbor.graphs.tagging Kruskal: 1 tree edges over 2 nodes" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False
