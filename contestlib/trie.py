"""Prefix tree of strings."""

from __future__ import annotations


class Trie:
    """A trie storing words; node 0 is the root."""

    def __init__(self) -> None:
        self._children: list[dict[str, int]] = [{}]
        self._terminal: set[int] = set()

    @property
    def node_count(self) -> int:
        """Number of nodes, the root included."""
        return len(self._children)

    def insert(self, word: str) -> None:
        """Add ``word``, creating branches as needed."""
        u = 0
        for ch in word:
            nxt = self._children[u].get(ch)
            if nxt is None:
                nxt = len(self._children)
                self._children.append({})
                self._children[u][ch] = nxt
            u = nxt
        self._terminal.add(u)

    def _walk(self, word: str) -> int | None:
        u = 0
        for ch in word:
            nxt = self._children[u].get(ch)
            if nxt is None:
                return None
            u = nxt
        return u

    def has_prefix(self, prefix: str) -> bool:
        """True if some inserted word starts with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node in self._terminal

    def __len__(self) -> int:
        return len(self._terminal)