"""Logging for quotebook.

All package loggers live under the ``quotebook`` namespace and are
configured through that one logger, so the CLI never touches the root
logger of a host application.  Records go to *stderr*; *stdout* carries
only rendered quotes.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "quotebook"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Marks the handler added by setup_logging.
_HANDLER_ATTR = "_quotebook_log_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``quotebook`` namespace.

    Module names already under ``quotebook`` are used as-is; anything else
    (``"__main__"`` when run with ``python -m``) is nested beneath it.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    """Configure the ``quotebook`` logger.

    Safe to call repeatedly: the existing handler is reused, its level
    updated and its stream re-pointed at the current ``sys.stderr``.

    Args:
        level: Configured level name, usually ``Settings.log_level``.
        verbose: Force ``DEBUG`` regardless of *level* (the ``-v`` flag).

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")
    if verbose:
        numeric_level = logging.DEBUG

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in logger.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            handler.setStream(sys.stderr)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
