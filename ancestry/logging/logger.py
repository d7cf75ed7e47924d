# ancestry/logging/logger.py
"""
Unified logging setup for the ancestry package.

All modules use:
    from ancestry.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in configure_logging(), normally from the CLI
entrypoint. Library code never configures handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] = sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; the handler is only added once.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module. Do NOT configure logging here."""
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "DEFAULT_FORMAT"]
