"""Cycle detection in directed, undirected and functional graphs."""

from __future__ import annotations

from typing import Sequence

_WHITE, _GREY, _BLACK = 0, 1, 2


def _walk_back(start: int, end: int, parent: Sequence[int | None]) -> list[int]:
    cycle = [start]
    v: int | None = end
    while v != start:
        assert v is not None
        cycle.append(v)
        v = parent[v]
    cycle.append(start)
    return cycle


def find_directed_cycle(adj: Sequence[Sequence[int]]) -> list[int] | None:
    """A directed cycle as ``[v0, v1, ..., v0]``, or None if acyclic."""
    n = len(adj)
    color = [_WHITE] * n
    parent: list[int | None] = [None] * n
    for s in range(n):
        if color[s] != _WHITE:
            continue
        color[s] = _GREY
        stack = [(s, iter(adj[s]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if color[u] == _WHITE:
                    parent[u] = v
                    color[u] = _GREY
                    stack.append((u, iter(adj[u])))
                    break
                if color[u] == _GREY:
                    cycle = _walk_back(u, v, parent)
                    cycle.reverse()
                    return cycle
            else:
                color[v] = _BLACK
                stack.pop()
    return None


def find_undirected_cycle(adj: Sequence[Sequence[int]]) -> list[int] | None:
    """A cycle of an undirected graph as ``[v0, ..., v0]``, or None.

    Edges back to a vertex's tree parent are not counted as cycles.
    """
    n = len(adj)
    state = [_WHITE] * n
    parent: list[int | None] = [None] * n
    for s in range(n):
        if state[s] != _WHITE:
            continue
        state[s] = _GREY
        stack = [(s, iter(adj[s]))]
        while stack:
            v, neighbours = stack[-1]
            for u in neighbours:
                if u == parent[v]:
                    continue
                if state[u] == _GREY:
                    return _walk_back(u, v, parent)
                if state[u] == _WHITE:
                    parent[u] = v
                    state[u] = _GREY
                    stack.append((u, iter(adj[u])))
                    break
            else:
                state[v] = _BLACK
                stack.pop()
    return None


_UNSEEN = -2
_ON_PATH = -3


def functional_graph_cycles(
    succ: Sequence[int],
) -> tuple[list[int], list[dict[int, int]]]:
    """Cycles of the graph ``v -> succ[v]``.

    Returns ``(cycle_id, cycles)``: ``cycle_id[v]`` is the index of the
    cycle holding ``v`` or -1 if ``v`` is on none, and each cycle maps its
    vertices to their position along it.
    """
    n = len(succ)
    if any(not 0 <= s < n for s in succ):
        raise ValueError("successor out of range")
    cycle_id = [_UNSEEN] * n
    cycles: list[dict[int, int]] = []
    for p in range(n):
        if cycle_id[p] != _UNSEEN:
            continue
        path = [p]
        cycle_id[p] = _ON_PATH
        at = p
        while cycle_id[succ[at]] == _UNSEEN:
            at = succ[at]
            cycle_id[at] = _ON_PATH
            path.append(at)
        entry = succ[at]
        cycle: dict[int, int] = {}
        in_cycle = False
        for v in path:
            in_cycle = in_cycle or v == entry
            if in_cycle:
                cycle[v] = len(cycle)
        label = len(cycles) if cycle else -1
        for v in path:
            cycle_id[v] = label if v in cycle else -1
        if cycle:
            cycles.append(cycle)
    return cycle_id, cycles


def floyd_cycle(succ: Sequence[int], start: int) -> tuple[int, int]:
    """First cycle vertex reached from ``start`` and the cycle's length."""
    a = succ[start]
    b = succ[succ[start]]
    while a != b:
        a = succ[a]
        b = succ[succ[b]]
    a = start
    while a != b:
        a = succ[a]
        b = succ[b]
    first = a
    b = succ[a]
    length = 1
    while a != b:
        b = succ[b]
        length += 1
    return first, length