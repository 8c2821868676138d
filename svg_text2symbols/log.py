"""Logging setup for svg-text2symbols.

Library modules only create module loggers; the CLI (or an embedding
application) decides where records go by calling configure_logging().
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from svg_text2symbols.exceptions import ConfigError

PACKAGE_LOGGER = "svg_text2symbols"

_handler: logging.Handler | None = None


def parse_level(level: str | int) -> int:
    """Convert a level name or number to a logging level int."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ConfigError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling this again swaps the handler instead of adding a second one.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(parse_level(level))

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    _handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(_handler)
    return logger
