"""Shared pytest fixtures for typeahead tests."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable
from pathlib import Path

import pytest

from typeahead.display import Frame
from typeahead.session import Session
from typeahead.trie import Trie

# Long enough that timers never fire inside a synchronous-style test.
NEVER = 60.0


@pytest.fixture
def test_words() -> list[str]:
    return ["test", "tester", "testing"]


@pytest.fixture
def trie(test_words: list[str]) -> Trie:
    """Trie seeded with test / tester / testing, once each."""
    return Trie(test_words)


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """A small dictionary file with mixed whitespace."""
    path = tmp_path / "words.txt"
    path.write_text("test tester\ntesting\ttest\n\napple  Apple\n", encoding="utf-8")
    return path


@pytest.fixture
def make_session(trie: Trie) -> Callable[..., Session]:
    """
    Factory for sessions whose timers stay quiet unless asked otherwise.

    Must be called from inside a running event loop.
    """

    def _make(**kwargs) -> Session:
        frames: asyncio.Queue[Frame | None] = asyncio.Queue(maxsize=kwargs.pop("maxsize", 1000))
        kwargs.setdefault("debounce_delay", NEVER)
        kwargs.setdefault("blink_interval", NEVER)
        return Session(kwargs.pop("trie", trie), frames, **kwargs)

    return _make


def drain(queue: asyncio.Queue) -> list:
    """Remove and return everything currently queued."""
    items = []
    while not queue.empty():
        items.append(queue.get_nowait())
    return items


class ScriptedInput:
    """
    Blocking byte source for InputReader.

    Items are either bytes (returned by the next read) or floats (a pause
    in seconds before the following item). An exhausted script reads as
    end of stream.
    """

    def __init__(self, *items: bytes | float) -> None:
        self._items = list(items)

    def read(self) -> bytes:
        while self._items:
            item = self._items.pop(0)
            if isinstance(item, float):
                time.sleep(item)
                continue
            return item
        return b""
