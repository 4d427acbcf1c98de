"""
Events consumed by the session loop.

Every producer (the input pump, the debounce timer) puts one of these on
the session's event queue; the session handles them strictly one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass

from typeahead.keys import Key

# Event name constants
KEY_PRESS = "key_press"
EVALUATE = "evaluate"
END_OF_INPUT = "end_of_input"


@dataclass(frozen=True)
class KeyPressEvent:
    """A key read from the input source."""

    key: Key
    type: str = KEY_PRESS


@dataclass(frozen=True)
class EvaluateEvent:
    """The debounce timer expired: look up suggestions for the current word."""

    type: str = EVALUATE


@dataclass(frozen=True)
class EndOfInputEvent:
    """The input stream is finished; the session must end."""

    reason: str = "eof"  # "eof", "terminate", "error"
    error: str | None = None
    type: str = END_OF_INPUT


SessionEvent = KeyPressEvent | EvaluateEvent | EndOfInputEvent
