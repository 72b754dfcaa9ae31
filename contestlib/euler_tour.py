"""Euler tour entry and exit times of a rooted tree."""

from __future__ import annotations

from typing import Sequence


def euler_tour(adj: Sequence[Sequence[int]], root: int = 0) -> tuple[list[int], list[int]]:
    """Entry time and end time of every vertex in a preorder walk.

    The subtree of ``v`` occupies the positions ``start[v] .. end[v] - 1``.
    """
    n = len(adj)
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    if sum(map(len, adj)) != 2 * (n - 1):
        raise ValueError("adjacency does not describe a tree")
    parent: list[int | None] = [None] * n
    seen = [False] * n
    seen[root] = True
    order: list[int] = []
    stack = [root]
    while stack:
        v = stack.pop()
        order.append(v)
        for u in reversed(adj[v]):
            if not seen[u]:
                seen[u] = True
                parent[u] = v
                stack.append(u)
    if len(order) != n:
        raise ValueError("adjacency does not describe a connected tree")
    size = [1] * n
    for v in reversed(order):
        p = parent[v]
        if p is not None:
            size[p] += size[v]
    start = [0] * n
    for t, v in enumerate(order):
        start[v] = t
    end = [start[v] + size[v] for v in range(n)]
    return start, end