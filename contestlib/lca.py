"""Lowest common ancestors and ancestor jumps by binary lifting."""

from __future__ import annotations

from typing import Sequence


def _check_tree(adj: Sequence[Sequence[int]], root: int) -> None:
    n = len(adj)
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    if sum(map(len, adj)) != 2 * (n - 1):
        raise ValueError("adjacency does not describe a tree")


def _rooted(adj: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int | None]]:
    _check_tree(adj, root)
    n = len(adj)
    parent: list[int | None] = [None] * n
    seen = [False] * n
    seen[root] = True
    order = [root]
    stack = [root]
    while stack:
        v = stack.pop()
        for u in adj[v]:
            if not seen[u]:
                seen[u] = True
                parent[u] = v
                order.append(u)
                stack.append(u)
    if len(order) != n:
        raise ValueError("adjacency does not describe a connected tree")
    return order, parent


def _lift(first: list[int], levels: int) -> list[list[int]]:
    table = [first]
    for _ in range(1, levels):
        prev = table[-1]
        table.append([prev[prev[v]] for v in range(len(prev))])
    return table


class BinaryLiftingLCA:
    """Ancestor table over a rooted tree, compared by depth."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        order, parent = _rooted(adj, root)
        n = len(adj)
        self.root = root
        self.depth = [0] * n
        first = [root] * n
        for v in order:
            p = parent[v]
            if p is not None:
                first[v] = p
                self.depth[v] = self.depth[p] + 1
        self._up = _lift(first, max(1, (n - 1).bit_length()))

    def jump(self, v: int, d: int) -> int:
        """The ancestor ``d`` levels above ``v``; the root if ``d`` is too large."""
        if d < 0:
            raise ValueError("jump length must be non-negative")
        if d >= self.depth[v]:
            return self.root
        for i, row in enumerate(self._up):
            if (d >> i) & 1:
                v = row[v]
        return v

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``."""
        if self.depth[a] < self.depth[b]:
            a, b = b, a
        a = self.jump(a, self.depth[a] - self.depth[b])
        if a == b:
            return a
        for row in reversed(self._up):
            if row[a] != row[b]:
                a, b = row[a], row[b]
        return self._up[0][a]


class TourLCA:
    """Lowest common ancestors from entry and exit times of a depth-first tour."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        _check_tree(adj, root)
        n = len(adj)
        self.root = root
        self.tin = [0] * n
        self.tout = [0] * n
        first = [root] * n
        seen = [False] * n
        seen[root] = True
        timer = 1
        self.tin[root] = timer
        stack = [(root, iter(adj[root]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if not seen[u]:
                    seen[u] = True
                    first[u] = v
                    timer += 1
                    self.tin[u] = timer
                    stack.append((u, iter(adj[u])))
                    break
            else:
                timer += 1
                self.tout[v] = timer
                stack.pop()
        if not all(seen):
            raise ValueError("adjacency does not describe a connected tree")
        self._levels = (n - 1).bit_length()
        self._up = _lift(first, self._levels + 1)

    def is_ancestor(self, u: int, v: int) -> bool:
        """True if ``u`` is ``v`` or lies above it."""
        return self.tin[u] <= self.tin[v] and self.tout[u] >= self.tout[v]

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for row in reversed(self._up):
            if not self.is_ancestor(row[u], v):
                u = row[u]
        return self._up[0][u]

    def jump(self, x: int, d: int) -> int:
        """The ancestor ``d`` levels above ``x``; the root if ``d`` is too large."""
        if d < 0:
            raise ValueError("jump length must be non-negative")
        if d >> len(self._up):
            return self.root
        for i, row in enumerate(self._up):
            if (d >> i) & 1:
                x = row[x]
        return x


class AncestorJumper:
    """Jumps to ancestors in a forest given by parent links."""

    def __init__(self, parents: Sequence[int | None]) -> None:
        n = len(parents)
        first = []
        for v, p in enumerate(parents):
            if p is None or p < 0:
                first.append(n)
            elif p >= n or p == v:
                raise ValueError(f"invalid parent {p} for vertex {v}")
            else:
                first.append(p)
        first.append(n)
        self._n = n
        self._up = _lift(first, max(1, n.bit_length()))

    def jump(self, x: int, d: int) -> int | None:
        """The ancestor ``d`` levels above ``x``, or None past the root."""
        if not 0 <= x < self._n:
            raise IndexError(f"vertex {x} out of range")
        if d < 0:
            raise ValueError("jump length must be non-negative")
        if d >> len(self._up):
            return None
        for i, row in enumerate(self._up):
            if (d >> i) & 1:
                x = row[x]
        return None if x == self._n else x