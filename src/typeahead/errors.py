"""
Exception hierarchy.

Only startup faults are fatal. A failing input stream ends the session
through an :class:`~typeahead.events.EndOfInputEvent` instead of an
exception, and an empty suggestion query is a normal result.
"""

from __future__ import annotations

from pathlib import Path


class TypeaheadError(Exception):
    """Base class for all typeahead errors."""


class StartupError(TypeaheadError):
    """Raised before the session loop starts; aborts the program."""


class DictionaryError(StartupError):
    """The seed dictionary could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read dictionary {self.path}: {reason}")


class TerminalModeError(StartupError):
    """The terminal could not be switched into raw mode."""


class InputFault(TypeaheadError):
    """The raw input source failed while the session was running."""
