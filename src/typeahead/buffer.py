"""
Typed-text buffer and word extraction.

Examples
--------
>>> current_word("this is a tes")
'tes'
>>> last_word("this is a test  ")
'test'
"""

from __future__ import annotations

SPACE = " "


def current_word(text: str, separator: str = SPACE) -> str:
    """The word being typed: the trailing run of non-separator characters."""
    idx = text.rfind(separator)
    return text[idx + 1:] if idx >= 0 else text


def last_word(text: str, separator: str = SPACE) -> str:
    """
    The most recently completed word.

    Trailing separators are skipped first, so ``"foo "`` and ``"foo   "``
    both give ``"foo"``. Returns ``""`` when the text holds no word.
    """
    return current_word(text.rstrip(separator), separator)


class InputBuffer:
    """Characters typed this session, mutated only at the tail."""

    def __init__(self, text: str = "", separator: str = SPACE) -> None:
        self._chars: list[str] = list(text)
        self.separator = separator

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def append(self, ch: str) -> None:
        self._chars.append(ch)

    def extend(self, text: str) -> None:
        self._chars.extend(text)

    def backspace(self) -> bool:
        """Drop the last character. Returns ``False`` if there was none."""
        if not self._chars:
            return False
        self._chars.pop()
        return True

    def current_word(self) -> str:
        return current_word(self.text, self.separator)

    def last_word(self) -> str:
        return last_word(self.text, self.separator)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"InputBuffer({self.text!r})"
