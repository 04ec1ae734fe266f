"""Tests for package logging and the algorithms' debug summaries."""

import logging
from io import StringIO

import pytest

from ngtree.algorithms.flow import reconstruct_flow
from ngtree.algorithms.paths import reconstruct_all_paths
from ngtree.algorithms.spanning_trees import generate_trees
from ngtree.logging import (
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def capture():
    """Route the package logger to an in-memory stream at DEBUG."""
    stream = StringIO()
    setup_root_logger(level=logging.DEBUG, handler=logging.StreamHandler(stream))
    return stream


def test_module_loggers_inherit_package_level():
    logger = get_logger("ngtree.algorithms.paths")
    assert logger.level == logging.NOTSET
    assert logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_is_idempotent():
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    setup_root_logger(level=logging.DEBUG)

    root_logger = logging.getLogger("ngtree")
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_debug_summaries_hidden_at_info():
    stream = StringIO()
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(stream))

    reconstruct_flow([("flow", 1), ((1, 2), 1)])
    assert stream.getvalue() == ""


def test_enumeration_debug_summary(square1, capture):
    generate_trees(square1)

    out = capture.getvalue()
    assert "ngtree.algorithms.spanning_trees" in out
    assert "Base tree has 3 edges; 1 chords to substitute" in out
    assert "Generated 4 spanning trees" in out


def test_path_debug_summary(capture):
    table = {"A": (0, None), "B": (1, "A")}
    reconstruct_all_paths(["A", "B", "C"], table, root=None)

    assert "Reconstructed paths for 3 vertices (1 unreachable)" in capture.getvalue()


def test_flow_debug_summary(capture):
    reconstruct_flow([("flow", 5), ((1, 2), 5), ((2, 3), 5)])

    assert "Flow value 5 over 2 edge entries" in capture.getvalue()


def test_reset_logging_clears_handlers(capture):
    reset_logging()

    root_logger = logging.getLogger("ngtree")
    assert root_logger.handlers == []
    assert root_logger.level == logging.NOTSET
