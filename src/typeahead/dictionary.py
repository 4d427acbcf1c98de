"""
Seed dictionary loading.

The dictionary is a plain text file of whitespace-delimited words. Order
does not matter and case is preserved; a word listed twice starts with a
count of two.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from typeahead.errors import DictionaryError
from typeahead.logging import get_logger
from typeahead.trie import Trie

logger = get_logger("dictionary")


def parse_words(content: str) -> list[str]:
    """Split on any run of spaces, tabs or newlines."""
    return content.split()


def load_words(path: str | Path) -> list[str]:
    """
    Read the words in *path*.

    Raises:
        DictionaryError: The file is missing, unreadable or not UTF-8.
    """
    path = Path(path).expanduser()
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DictionaryError(path, "file not found") from None
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(path, str(e)) from e

    words = parse_words(content)
    logger.info("Loaded %d words from %s", len(words), path)
    return words


def build_trie(words: Iterable[str]) -> Trie:
    """A new trie seeded with one insert per word."""
    trie = Trie(words)
    logger.debug("Trie seeded: %d distinct words, %d inserts", len(trie), trie.total_inserts)
    return trie
