"""Bipartiteness test by breadth-first two-colouring."""

from __future__ import annotations

from collections import deque
from typing import Sequence


def is_bipartite(adj: Sequence[Sequence[int]]) -> bool:
    """True if the undirected graph can be split into two independent sides."""
    side: list[int | None] = [None] * len(adj)
    for start in range(len(adj)):
        if side[start] is not None:
            continue
        side[start] = 0
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if side[v] is None:
                    side[v] = side[u] ^ 1
                    queue.append(v)
                elif side[v] == side[u]:
                    return False
    return True