"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Library modules never install handlers; only :func:`configure_logging`
      does, and calling it repeatedly is idempotent.
    - Messages must not include environment variable values.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "confnode"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` placed under the package namespace."""

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` switches the level from WARNING to DEBUG.  Repeated calls replace
    the handler instead of stacking a new one.
    """

    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


__all__ = ["PACKAGE_LOGGER", "get_logger", "configure_logging"]
