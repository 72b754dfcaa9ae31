"""Centroid decomposition of a tree."""

from __future__ import annotations

from typing import Sequence


def centroid_decomposition(adj: Sequence[Sequence[int]]) -> list[int | None]:
    """Parent of every vertex in the centroid tree; None for the top centroid.

    Decomposition starts from vertex 0 and visits neighbours in adjacency
    order.
    """
    n = len(adj)
    if n == 0:
        return []
    if sum(map(len, adj)) != 2 * (n - 1):
        raise ValueError("adjacency does not describe a tree")
    removed = [False] * n
    assigned = [False] * n
    size = [0] * n
    result: list[int | None] = [None] * n
    stack: list[tuple[int, int | None]] = [(0, None)]
    while stack:
        start, above = stack.pop()
        parent = {start: None}
        order = [start]
        for v in order:
            for u in adj[v]:
                if u != parent[v] and not removed[u] and u not in parent:
                    parent[u] = v
                    order.append(u)
        for v in reversed(order):
            size[v] = 1 + sum(
                size[u] for u in adj[v] if u != parent[v] and not removed[u]
            )
        total = size[start]
        centroid, prev = start, None
        moved = True
        while moved:
            moved = False
            for u in adj[centroid]:
                if u != prev and not removed[u] and size[u] * 2 > total:
                    prev, centroid = centroid, u
                    moved = True
                    break
        removed[centroid] = True
        assigned[centroid] = True
        result[centroid] = above
        for u in reversed(adj[centroid]):
            if not removed[u]:
                stack.append((u, centroid))
    if not all(assigned):
        raise ValueError("adjacency does not describe a connected tree")
    return result