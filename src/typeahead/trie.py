"""
Prefix index over inserted words.

Each node maps a character to its child and counts how many times a word
ended exactly there. Counts only grow; nodes are never removed.
"""

from __future__ import annotations

from typing import Iterable

from typeahead.ranking import Candidate, rank_candidates


class TrieNode:
    """
    One character position in the trie.

    children: char -> TrieNode
    count: number of inserts that terminated at this node
    """

    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.count = 0


class Trie:
    """Frequency-annotated prefix tree used for word completion."""

    def __init__(self, words: Iterable[str] | None = None) -> None:
        self._root = TrieNode()
        self._words = 0
        self._inserts = 0
        if words is not None:
            for word in words:
                self.insert(word)

    # insertion -----------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Add one usage of *word*.

        Missing nodes along the path are created. The empty string is
        ignored so the root never turns into a completion target.
        """
        if not word:
            return

        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child

        if node.count == 0:
            self._words += 1
        node.count += 1
        self._inserts += 1

    # lookup --------------------------------------------------------------

    def _find(self, prefix: str) -> TrieNode | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def query(self, prefix: str) -> list[Candidate]:
        """
        Ranked completions for *prefix*.

        Each candidate holds the suffix below *prefix* and its count. The
        prefix itself appears as an empty suffix when it is a word. An
        empty prefix or an unknown path returns ``[]``.
        """
        if not prefix:
            return []

        start = self._find(prefix)
        if start is None:
            return []

        out: list[Candidate] = []
        stack: list[tuple[TrieNode, str]] = [(start, "")]
        while stack:
            node, suffix = stack.pop()
            if node.count > 0:
                out.append(Candidate(suffix, node.count))
            for ch, child in node.children.items():
                stack.append((child, suffix + ch))

        return rank_candidates(out)

    def autofill(self, prefix: str) -> list[str]:
        """Ranked suffix texts for *prefix*."""
        return [c.text for c in self.query(prefix)]

    def count(self, word: str) -> int:
        """How many times *word* has been inserted."""
        if not word:
            return 0
        node = self._find(word)
        return node.count if node is not None else 0

    # introspection -------------------------------------------------------

    @property
    def total_inserts(self) -> int:
        return self._inserts

    def __len__(self) -> int:
        """Number of distinct words."""
        return self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.count(word) > 0
