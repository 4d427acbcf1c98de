"""
Candidate ranking and the cyclable suggestion set.

Candidates are ordered by usage count, highest first. Equal counts are
ordered by the suffix text so a query always returns the same sequence,
independent of the order children were added to the trie.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """
    A completion produced by a trie query.

    Attributes
    ----------
    text:
        The suffix to append to the typed prefix.
    count:
        How many times the full word has been inserted.
    """

    text: str
    count: int


def rank_key(candidate: Candidate) -> tuple[int, str]:
    """Sort key: count descending, then suffix ascending."""
    return (-candidate.count, candidate.text)


def rank_candidates(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Return *candidates* in display order."""
    return sorted(candidates, key=rank_key)


class SuggestionSet:
    """
    Ranked suffixes for one debounce evaluation plus a wrapping cursor.

    The set is rebuilt from scratch on every evaluation; only the cursor
    moves in between.
    """

    __slots__ = ("_items", "_cursor")

    def __init__(self, items: Sequence[str]) -> None:
        self._items: tuple[str, ...] = tuple(items)
        self._cursor = 0

    @classmethod
    def from_candidates(cls, candidates: Iterable[Candidate]) -> SuggestionSet:
        return cls([c.text for c in rank_candidates(candidates)])

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> str:
        """The suffix under the cursor."""
        if not self._items:
            raise IndexError("empty suggestion set has no current item")
        return self._items[self._cursor]

    def advance(self) -> str:
        """Move to the next suffix, wrapping at the end, and return it."""
        if not self._items:
            raise IndexError("cannot cycle an empty suggestion set")
        self._cursor = (self._cursor + 1) % len(self._items)
        return self._items[self._cursor]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuggestionSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"SuggestionSet({list(self._items)!r}, cursor={self._cursor})"
