"""
Key parsing for terminal input.

The input reader hands over one decoded character at a time; this module
turns each one into a ``Key`` the session can dispatch on. Multi-byte
escape sequences are not assembled: a bare ESC is a key of its own.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Key data model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Key:
    """
    Parsed representation of a single key press.

    Attributes
    ----------
    name:
        Symbolic name for special keys (e.g. ``'enter'``, ``'tab'``).
        For plain printable characters this equals *char*.
    char:
        The literal character, if any.
    ctrl:
        ``True`` for Ctrl+letter combinations.
    """

    name: str
    char: str = ""
    ctrl: bool = False

    @property
    def printable(self) -> bool:
        """Whether the key inserts its character into the buffer."""
        return bool(self.char) and not self.ctrl and self.name not in _CONTROL_NAMES


# ---------------------------------------------------------------------------
# Common key constants
# ---------------------------------------------------------------------------

KEY_ENTER = Key(name="enter", char="\r")
KEY_TAB = Key(name="tab", char="\t")
KEY_ESCAPE = Key(name="escape")
KEY_BACKSPACE = Key(name="backspace")
KEY_SPACE = Key(name="space", char=" ")
KEY_CTRL_C = Key(name="ctrl+c", char="c", ctrl=True)
KEY_UNKNOWN = Key(name="unknown")

_CONTROL_NAMES = frozenset({"enter", "tab", "escape", "backspace", "unknown"})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_key(unit: str | bytes) -> Key:
    """
    Parse one input unit into a ``Key``.

    Handles:
    * CR / LF -> enter
    * TAB
    * BS / DEL -> backspace
    * ESC
    * Ctrl+letter (0x01-0x1a)
    * space and other printable characters

    Parameters
    ----------
    unit:
        A single character, or a single byte / complete UTF-8 sequence.

    Returns
    -------
    Key
        Structured representation of the key press.
    """
    if isinstance(unit, bytes):
        try:
            unit = unit.decode("utf-8")
        except UnicodeDecodeError:
            return KEY_UNKNOWN

    if len(unit) != 1:
        return KEY_UNKNOWN

    code = ord(unit)

    if code in (0x0d, 0x0a):  # CR or LF
        return KEY_ENTER
    if code == 0x09:
        return KEY_TAB
    if code in (0x7f, 0x08):  # DEL or BS
        return KEY_BACKSPACE
    if code == 0x1b:
        return KEY_ESCAPE
    if 1 <= code <= 26:
        letter = chr(code + 96)  # 1 -> 'a', 3 -> 'c'
        return Key(name=f"ctrl+{letter}", char=letter, ctrl=True)

    if unit == " ":
        return KEY_SPACE
    if unit.isprintable():
        return Key(name=unit, char=unit)

    return KEY_UNKNOWN
