"""Longest paths and the diameter of an unweighted tree."""

from __future__ import annotations

from collections import deque
from typing import Sequence


def _rooted(adj: Sequence[Sequence[int]], root: int) -> tuple[list[int], list[int | None]]:
    """Vertices with every parent before its children, and the parent of each."""
    n = len(adj)
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    if sum(map(len, adj)) != 2 * (n - 1):
        raise ValueError("adjacency does not describe a tree")
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


def longest_paths(adj: Sequence[Sequence[int]], root: int = 0) -> list[int]:
    """For every vertex, the number of edges of the longest path starting there."""
    order, parent = _rooted(adj, root)
    n = len(adj)
    down = [0] * n
    for v in reversed(order):
        for u in adj[v]:
            if u != parent[v]:
                down[v] = max(down[v], down[u] + 1)
    up = [0] * n
    for v in order:
        kids = [u for u in adj[v] if u != parent[v]]
        best1 = best2 = -1
        for u in kids:
            d = down[u]
            if d > best1:
                best1, best2 = d, best1
            elif d > best2:
                best2 = d
        for u in kids:
            use = best2 if down[u] == best1 else best1
            up[u] = max(up[v] + 1, use + 2)
    return [max(d, u) for d, u in zip(down, up)]


def _farthest(adj: Sequence[Sequence[int]], start: int) -> tuple[int, int]:
    dist = [-1] * len(adj)
    dist[start] = 0
    best = (start, 0)
    queue = deque([start])
    while queue:
        u = queue.popleft()
        if dist[u] > best[1]:
            best = (u, dist[u])
        for v in adj[u]:
            if dist[v] < 0:
                dist[v] = dist[u] + 1
                queue.append(v)
    return best


def tree_diameter(adj: Sequence[Sequence[int]], root: int = 0) -> int:
    """Number of edges on a longest path of the tree."""
    _rooted(adj, root)
    far, _ = _farthest(adj, root)
    return _farthest(adj, far)[1]