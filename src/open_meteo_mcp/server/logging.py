"""Logging configuration for the MCP server.

stdout carries the MCP protocol, so all log output goes to stderr.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "open_meteo_mcp"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Handler installed by configure_logging
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int | str = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a single stderr handler to the package logger.

    Calling this again replaces the previous handler, so the level can be
    changed after the config file has been read.

    Args:
        level: Logging level name or number
        stream: Stream to write to (default sys.stderr)

    Returns:
        The installed handler
    """
    global _handler

    close_logging()

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(_handler)
    logger.setLevel(level)

    return _handler


def close_logging() -> None:
    """Detach the handler installed by configure_logging, if any."""
    global _handler

    if _handler is not None:
        logging.getLogger(LOGGER_NAME).removeHandler(_handler)
        _handler.close()
        _handler = None


def log_tool_exception(
    error: Exception,
    context: str = "",
    include_traceback: bool = True,
) -> str:
    """Log a failed tool call and return the one-line message for the host.

    Expected failures (bad arguments, upstream errors) are logged as a
    warning; anything else is logged as an error with its traceback.
    """
    logger = logging.getLogger(f"{LOGGER_NAME}.server")
    summary = f"{type(error).__name__}: {error}"

    if include_traceback:
        logger.error(f"{context or 'Tool call failed'} - {summary}", exc_info=error)
    else:
        logger.warning(f"{context} - {summary}")

    return f"{context}: {error}" if context else summary
