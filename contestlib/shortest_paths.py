"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, Sequence

INF = math.inf

Adjacency = Sequence[Sequence[tuple[int, int]]]


def _check_vertex(v: int, n: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range")


def bfs01(adj: Adjacency, source: int) -> list[float]:
    """Distances from ``source`` in a graph whose edge weights are 0 or 1.

    ``adj[u]`` lists ``(v, w)`` pairs. Unreachable vertices get ``INF``.
    """
    _check_vertex(source, len(adj))
    dist: list[float] = [INF] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, w in adj[u]:
            if w not in (0, 1):
                raise ValueError(f"edge weight {w} is not 0 or 1")
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                if w:
                    queue.append(v)
                else:
                    queue.appendleft(v)
    return dist


def bellman_ford(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> tuple[list[float], list[int | None], int | None]:
    """Shortest distances with possibly negative edges ``(u, v, w)``.

    Returns ``(dist, parent, last)``. ``last`` is None when no negative
    cycle is reachable from ``source``; otherwise it is a vertex relaxed in
    the final round, usable with :func:`negative_cycle`.
    """
    _check_vertex(source, n)
    edge_list = list(edges)
    dist: list[float] = [INF] * n
    parent: list[int | None] = [None] * n
    dist[source] = 0
    last: int | None = None
    for _ in range(n):
        last = None
        for u, v, w in edge_list:
            if dist[u] < INF and dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                parent[v] = u
                last = v
        if last is None:
            break
    return dist, parent, last


def negative_cycle(n: int, parent: Sequence[int | None], vertex: int) -> list[int]:
    """The negative cycle behind ``vertex``, in edge order.

    ``parent`` and ``vertex`` come from :func:`bellman_ford`; consecutive
    entries, and the last followed by the first, are edges of the cycle.
    """

    def step(v: int) -> int:
        p = parent[v]
        if p is None:
            raise ValueError(f"vertex {v} has no parent; not on a negative cycle")
        return p

    y = vertex
    for _ in range(n):
        y = step(y)
    cycle = [y]
    cur = step(y)
    while cur != y:
        cycle.append(cur)
        cur = step(cur)
    cycle.reverse()
    return cycle


def dijkstra(adj: Adjacency, source: int) -> tuple[list[float], list[int | None]]:
    """Distances and predecessors from ``source`` with non-negative weights."""
    n = len(adj)
    _check_vertex(source, n)
    dist: list[float] = [INF] * n
    parent: list[int | None] = [None] * n
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        dv, v = heapq.heappop(heap)
        if dv != dist[v]:
            continue
        for to, length in adj[v]:
            if dv + length < dist[to]:
                dist[to] = dv + length
                parent[to] = v
                heapq.heappush(heap, (dist[to], to))
    return dist, parent


def restore_path(source: int, target: int, parent: Sequence[int | None]) -> list[int]:
    """Vertices on the path from ``source`` to ``target`` given predecessors."""
    path = []
    v: int | None = target
    while v != source:
        if v is None:
            raise ValueError(f"vertex {target} is not reachable from {source}")
        path.append(v)
        v = parent[v]
    path.append(source)
    path.reverse()
    return path


def floyd_warshall(
    dist: Sequence[Sequence[float]],
) -> tuple[list[list[float]], list[list[int | None]]]:
    """All-pairs shortest distances.

    ``dist`` holds edge weights with ``INF`` for missing edges and 0 on the
    diagonal. Returns the distance matrix and, for each pair, the last
    intermediate vertex that shortened it (None if none did). A negative
    value on the diagonal of the result marks a negative cycle.
    """
    d = [list(row) for row in dist]
    n = len(d)
    if any(len(row) != n for row in d):
        raise ValueError("distance matrix must be square")
    via: list[list[int | None]] = [[None] * n for _ in range(n)]
    for k, row_k in enumerate(d):
        for i, row_i in enumerate(d):
            dik = row_i[k]
            if dik == INF:
                continue
            for j, dkj in enumerate(row_k):
                if dkj < INF and dik + dkj < row_i[j]:
                    row_i[j] = dik + dkj
                    via[i][j] = k
    return d, via