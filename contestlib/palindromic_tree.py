"""Palindromic tree (eertree) supporting appends and undoing them."""

from __future__ import annotations

from typing import Iterable

_EVEN_ROOT = 0
_ODD_ROOT = 1


class PalindromicTree:
    """Distinct palindromic substrings of a string grown at its end.

    ``distinct`` is the number of distinct non-empty palindromic substrings;
    ``total`` counts palindromic substrings with their occurrences.
    """

    def __init__(self) -> None:
        self._text: list[str] = []
        self._len = [0, -1]
        self._link = [_ODD_ROOT, _EVEN_ROOT]
        self._next: list[dict[str, int]] = [{}, {}]
        self._depth = [0, 0]
        self._last = _EVEN_ROOT
        self._history: list[tuple[int, int, bool]] = []
        self._total = 0

    @property
    def text(self) -> str:
        return "".join(self._text)

    @property
    def distinct(self) -> int:
        return len(self._len) - 2

    @property
    def total(self) -> int:
        return self._total

    def __len__(self) -> int:
        return len(self._text)

    def _suffix(self, v: int) -> int:
        """Longest palindromic suffix node ``v`` that extends by the last char."""
        m = len(self._text)
        ch = self._text[-1]
        while True:
            j = m - self._len[v] - 2
            if j >= 0 and self._text[j] == ch:
                return v
            v = self._link[v]

    def append(self, ch: str) -> bool:
        """Append ``ch``; return True if it creates a new palindrome."""
        if len(ch) != 1:
            raise ValueError("append takes a single character")
        self._text.append(ch)
        parent = self._suffix(self._last)
        node = self._next[parent].get(ch)
        created = node is None
        if node is None:
            node = len(self._len)
            length = self._len[parent] + 2
            link = _EVEN_ROOT if length == 1 else self._next[self._suffix(self._link[parent])][ch]
            self._len.append(length)
            self._link.append(link)
            self._next.append({})
            self._depth.append(self._depth[link] + 1)
            self._next[parent][ch] = node
        self._last = node
        self._history.append((parent, node, created))
        self._total += self._depth[node]
        return created

    def pop(self) -> str:
        """Remove the last character and return it."""
        if not self._history:
            raise IndexError("pop from an empty palindromic tree")
        parent, node, created = self._history.pop()
        ch = self._text.pop()
        self._total -= self._depth[node]
        if created:
            del self._next[parent][ch]
            self._len.pop()
            self._link.pop()
            self._next.pop()
            self._depth.pop()
        self._last = self._history[-1][1] if self._history else _EVEN_ROOT
        return ch


def distinct_palindrome_counts(s: Iterable[str]) -> list[int]:
    """Number of distinct palindromic substrings of every prefix of ``s``."""
    tree = PalindromicTree()
    counts = []
    for ch in s:
        tree.append(ch)
        counts.append(tree.distinct)
    return counts


def palindrome_counts(ops: Iterable[str]) -> list[int]:
    """Total palindromic substrings after each operation.

    Each operation appends a character, or removes the last one when it is
    ``"-"``.
    """
    tree = PalindromicTree()
    counts = []
    for op in ops:
        if op == "-":
            tree.pop()
        else:
            tree.append(op)
        counts.append(tree.total)
    return counts