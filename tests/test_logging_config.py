from __future__ import annotations

import logging
from pathlib import Path

import pytest

from walker.geometry.core import Vector3
from walker.geometry.line import Line3
from walker.geometry.solids import Face, Polyhedron
from walker.logging_config import MISS_TRACE_LOGGER, setup_logging, trace_misses


@pytest.fixture
def walker_logger():
    logger = logging.getLogger("walker")
    trace = logging.getLogger(MISS_TRACE_LOGGER)
    level = logger.level
    trace_level = trace.level
    handlers = list(logger.handlers)
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)
    trace.setLevel(trace_level)


def test_setup_logging_does_not_stack_handlers(walker_logger: logging.Logger) -> None:
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG)
    assert len(walker_logger.handlers) == 1
    assert walker_logger.level == logging.DEBUG


def test_setup_logging_writes_file(walker_logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "geometry.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("walker.geometry.line").debug("No intersection for sample")
    for h in walker_logger.handlers:
        h.flush()
    assert len(walker_logger.handlers) == 2
    assert "No intersection for sample" in log_file.read_text(encoding="utf-8")


def test_reconfigure_closes_previous_log_file(walker_logger: logging.Logger, tmp_path: Path) -> None:
    setup_logging(level=logging.DEBUG, log_file=str(tmp_path / "first.log"))
    first = [h for h in walker_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(first) == 1
    stream = first[0].stream

    setup_logging(level=logging.DEBUG)
    assert first[0] not in walker_logger.handlers
    assert stream.closed
    assert not any(isinstance(h, logging.FileHandler) for h in walker_logger.handlers)


def test_trace_misses_shows_debug_trace_under_info(
    walker_logger: logging.Logger, tmp_path: Path
) -> None:
    log_file = tmp_path / "trace.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    face = Face(Vector3(9.0, -1.0, 1.0), Vector3(11.0, -1.0, 1.0), Vector3(10.0, 1.0, 1.0))
    line = Line3(Vector3.zero(), Vector3(0.0, 0.0, 1.0))

    line.intersections(Polyhedron([face]))
    trace_misses(True)
    line.intersections(Polyhedron([face]))
    trace_misses(False)
    line.intersections(Polyhedron([face]))

    for h in walker_logger.handlers:
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert text.count("No intersection for") == 1
    assert logging.getLogger(MISS_TRACE_LOGGER).level == logging.NOTSET
