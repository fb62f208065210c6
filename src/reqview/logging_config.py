"""Logging setup for the reqview command line."""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "reqview"
DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def log_level_for(verbose: bool = False, quiet: bool = False) -> str:
    """Map the --verbose/--quiet flags to a level name; --verbose wins."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "ERROR"
    return DEFAULT_LEVEL


def _handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: str = DEFAULT_LEVEL,
    log_file: Optional[str] = None,
    format_string: str = LOG_FORMAT,
    force: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the ``reqview`` logger.

    Log records go to stderr (or ``stream``) so that stdout carries only the
    rendered response. Unknown level names fall back to WARNING.

    Args:
        level: Logging level name
        log_file: Also write records to this file
        format_string: Format for every handler
        force: Replace handlers installed by an earlier call
        stream: Console stream (default: sys.stderr)

    Returns:
        The ``reqview`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()

        logger.addHandler(_handler(logging.StreamHandler(stream or sys.stderr), numeric_level, format_string))
        if log_file:
            logger.addHandler(_handler(logging.FileHandler(log_file), numeric_level, format_string))

    # Records stop here; the root logger may belong to the host application
    logger.propagate = False

    return logger
