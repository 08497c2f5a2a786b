"""Logging setup."""

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Route loguru to stderr at `level`; stdout belongs to the MCP stdio transport."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="{time:HH:mm:ss} | {level: <8} | {name}:{line} - {message}")
