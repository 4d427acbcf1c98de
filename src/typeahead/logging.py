"""
Logging utilities for typeahead.

The interactive session owns the terminal in raw mode, so anything written
to stderr while it runs lands in the middle of the rendered frames. Use
``setup_logging(file=...)`` with ``stream=False`` for interactive runs.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Package root logger
_root_logger = logging.getLogger("typeahead")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _coerce_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(
    level: str | int = "WARNING",
    format: str | None = None,
    stream: TextIO | bool | None = None,
    file: str | None = None,
) -> None:
    """
    Configure the ``typeahead`` logger hierarchy.

    Args:
        level: Log level name (DEBUG, INFO, ...) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr); ``False`` disables the
            stream handler entirely
        file: Optional file path to append logs to

    Example:
        from typeahead.logging import setup_logging

        # CLI subcommands
        setup_logging("INFO")

        # Interactive session: keep the terminal clean
        setup_logging("DEBUG", stream=False, file="typeahead.log")
    """
    level = _coerce_level(level)
    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    formatter = logging.Formatter(format or DEFAULT_FORMAT)

    if stream is not False:
        stream_handler = logging.StreamHandler(stream or sys.stderr)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(level)
        _root_logger.addHandler(stream_handler)

    if file:
        file_handler = logging.FileHandler(file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        _root_logger.addHandler(file_handler)

    if not _root_logger.handlers:
        # Nothing configured: swallow records instead of falling back to
        # logging.lastResort on stderr.
        _root_logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Args:
        name: Submodule name (e.g., "session", "trie")

    Returns:
        Logger instance
    """
    if name.startswith("typeahead."):
        return logging.getLogger(name)
    return logging.getLogger(f"typeahead.{name}")


def set_level(level: str | int) -> None:
    """Set the log level for the package root logger."""
    _root_logger.setLevel(_coerce_level(level))


def disable() -> None:
    """Disable all typeahead logging."""
    _root_logger.disabled = True


def enable() -> None:
    """Re-enable typeahead logging."""
    _root_logger.disabled = False
