"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """A partition of the integers ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._parent):
            raise IndexError(f"element {v} out of range")

    def find(self, v: int) -> int:
        """Return the representative of the set holding ``v``."""
        self._check(v)
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            a, b = b, a
        self._parent[b] = a
        if self._rank[a] == self._rank[b]:
            self._rank[a] += 1
        return True