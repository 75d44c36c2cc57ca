"""
Logging configuration for security log analysis.

Package modules log through ``get_logger(__name__)`` and never install
handlers themselves; importing the package leaves logging untouched apart
from a NullHandler. The command line tool calls ``configure_logging`` once
with the level picked from its flags.

Usage:
    from security_log_analyzer.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Processing %s...", filename)
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "security_log_analyzer"

# Progress lines read like plain console output.
MESSAGE_FORMAT = "%(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """
    Send package log output to a stream.

    Replaces any handler a previous call installed, so calling it again
    only changes the level and destination.

    Args:
        level: Logging level (default: INFO).
        stream: Output stream (default: sys.stdout at call time).
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(MESSAGE_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(package_logger.handlers):
        if not isinstance(old, logging.NullHandler):
            package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def level_for_flags(quiet: bool = False, debug: bool = False) -> int:
    """Map the CLI's --quiet / --debug switches to a logging level.

    --debug wins when both are given.
    """
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a package module (typically ``__name__``)."""
    return logging.getLogger(name)
