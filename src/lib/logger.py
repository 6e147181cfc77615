"""Logging utilities for snippet-maker.

TIER 1: May import from core only.

Commands answer their host on stdout, so nothing may log there. All
loggers are children of one "snippets" logger whose only handler writes
to stderr (or a stream the caller hands in).
"""

import logging
import os
import sys
from typing import IO, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

ROOT_NAME = "snippets"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"


def _level_from_env() -> int:
    return getattr(logging, os.environ.get("SNIPPETS_LOG_LEVEL", "WARNING").upper(), logging.WARNING)


def configure_logging(level: LogLevel | None = None, stream: IO[str] | None = None) -> logging.Logger:
    """(Re)install the single snippet-maker handler.

    Args:
        level: Log level (default: SNIPPETS_LOG_LEVEL env or WARNING).
        stream: Where to write (default: sys.stderr, never stdout).

    Returns:
        The parent "snippets" logger.
    """
    root = logging.getLogger(ROOT_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level) if level else _level_from_env())
    root.propagate = False
    return root


def get_logger(name: str, level: LogLevel | None = None) -> logging.Logger:
    """Get a logger under "snippets.", configuring the parent on first use.

    Example:
        >>> logger = get_logger("storage")
        >>> logger.warning("Snippets file missing, creating it")
        20:55:39 | WARNING  | snippets.storage | Snippets file missing, creating it
    """
    if not logging.getLogger(ROOT_NAME).handlers:
        configure_logging()

    logger = logging.getLogger(f"{ROOT_NAME}.{name}")
    if level:
        logger.setLevel(getattr(logging, level))
    return logger


def set_log_level(level: LogLevel) -> None:
    """Set the level every snippet-maker logger inherits."""
    logging.getLogger(ROOT_NAME).setLevel(getattr(logging, level, logging.WARNING))
