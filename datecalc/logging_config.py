"""
Logging configuration for datecalc front ends.

Library modules only create loggers (``logging.getLogger(__name__)``); the
command line calls ``setup_logging`` once to attach a console handler.

Usage:
    from datecalc.logging_config import setup_logging
    setup_logging(logging.DEBUG)
"""

import logging
import sys

LOGGER_NAME = "datecalc"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the ``datecalc`` logger to write to stderr.

    Safe to call repeatedly: existing handlers are replaced.

    Args:
        level: Minimum level written to the console (default: WARNING)

    Returns:
        The configured package logger
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)

    # Clear any existing handlers (for re-initialization)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(fmt="%(levelname)-8s | %(name)-25s | %(message)s")
    )
    root_logger.addHandler(console_handler)

    # Don't double-log through the root logger
    root_logger.propagate = False

    root_logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return root_logger
