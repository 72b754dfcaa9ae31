"""Heavy-light decomposition for path queries on a tree."""

from __future__ import annotations

from typing import Callable, Sequence


class HeavyLightDecomposition:
    """Splits a rooted tree into heavy paths laid out contiguously.

    ``pos[v]`` is the index of ``v`` in a flat array where each heavy path
    is a consecutive block, suitable for a segment tree.
    """

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        if sum(map(len, adj)) != 2 * (n - 1):
            raise ValueError("adjacency does not describe a tree")
        self.parent: list[int | None] = [None] * n
        self.depth = [0] * n
        self.heavy: list[int | None] = [None] * n
        self.head = [root] * n
        self.pos = [0] * n

        seen = [False] * n
        seen[root] = True
        order = [root]
        stack = [root]
        while stack:
            v = stack.pop()
            for u in adj[v]:
                if not seen[u]:
                    seen[u] = True
                    self.parent[u] = v
                    self.depth[u] = self.depth[v] + 1
                    order.append(u)
                    stack.append(u)
        if len(order) != n:
            raise ValueError("adjacency does not describe a connected tree")

        size = [1] * n
        for v in reversed(order):
            best = 0
            for u in adj[v]:
                if u != self.parent[v]:
                    size[v] += size[u]
                    if size[u] > best:
                        best = size[u]
                        self.heavy[v] = u

        cur = 0
        stack = [root]
        while stack:
            v = stack.pop()
            self.pos[v] = cur
            cur += 1
            light = [u for u in adj[v] if u != self.parent[v] and u != self.heavy[v]]
            for u in reversed(light):
                self.head[u] = u
                stack.append(u)
            h = self.heavy[v]
            if h is not None:
                self.head[h] = self.head[v]
                stack.append(h)

    def path_ranges(self, a: int, b: int) -> list[tuple[int, int]]:
        """Inclusive position ranges that together cover the path ``a``..``b``."""
        ranges = []
        head, depth, pos = self.head, self.depth, self.pos
        while head[a] != head[b]:
            if depth[head[a]] > depth[head[b]]:
                a, b = b, a
            ranges.append((pos[head[b]], pos[b]))
            up = self.parent[head[b]]
            assert up is not None
            b = up
        if depth[a] > depth[b]:
            a, b = b, a
        ranges.append((pos[a], pos[b]))
        return ranges

    def query(self, a: int, b: int, range_query: Callable[[int, int], int]) -> int:
        """Maximum of ``range_query(lo, hi)`` over the ranges of the path."""
        return max(range_query(lo, hi) for lo, hi in self.path_ranges(a, b))