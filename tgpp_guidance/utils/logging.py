"""
Logging for the tgpp_guidance package

Every module logs through ``logging.getLogger(__name__)``; records climb to
the ``tgpp_guidance`` package logger, which owns the only handler. The
handler writes to stderr because stdout carries the stdio MCP transport and
the CLI's JSON output.
"""

import logging
import sys
from typing import Optional, TextIO

from ..config import LOG_LEVELS, Config

PACKAGE_LOGGER = "tgpp_guidance"
LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Point the package logger at a single stream handler

    Calling again replaces the handler from the previous call, so the CLI
    can raise verbosity after the server module has configured logging.

    Args:
        level: Level name, e.g. "DEBUG" (default: Config.LOG_LEVEL)
        stream: Where records go (default: stderr)

    Returns:
        The package logger

    Raises:
        ValueError: If the level name is unknown
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None

    if not Config.ENABLE_LOGGING:
        package_logger.setLevel(logging.CRITICAL)
        return package_logger

    name = (level or Config.LOG_LEVEL).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {name}")

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    package_logger.setLevel(name)
    package_logger.addHandler(_handler)
    # FastMCP installs its own root handler; keep package records out of it
    package_logger.propagate = False
    return package_logger
