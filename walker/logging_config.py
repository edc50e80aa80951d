"""
Logging setup for the walker toolkit.

Every module logs through ``logging.getLogger(__name__)`` below the ``walker``
logger. Intersection misses are written by ``walker.geometry.line`` at DEBUG;
``trace_misses`` turns that trace on without lowering the level of the rest of
the package.
"""
import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "walker"
MISS_TRACE_LOGGER = "walker.geometry.line"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _release_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route ``walker`` log records to stdout and, optionally, a file.

    Handlers installed by an earlier call are removed and closed first, so
    reconfiguring never duplicates output or leaves a log file open.

    Args:
        level: Level of the ``walker`` logger (e.g. logging.DEBUG).
        log_file: Optional path; the file is truncated on open.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    _release_handlers(logger)
    logger.setLevel(level)
    for handler in _build_handlers(log_file):
        logger.addHandler(handler)
    return logger


def trace_misses(enabled: bool = True) -> None:
    """Show or hide the per-face "No intersection" trace."""
    level = logging.DEBUG if enabled else logging.NOTSET
    logging.getLogger(MISS_TRACE_LOGGER).setLevel(level)
