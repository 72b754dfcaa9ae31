"""Minimum spanning tree by Kruskal's algorithm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from contestlib.dsu import DisjointSet


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    u: int
    v: int
    weight: int


def kruskal(n: int, edges: Iterable[Edge]) -> tuple[int, list[Edge]]:
    """Return the total weight and the edges of a minimum spanning forest."""
    ds = DisjointSet(n)
    cost = 0
    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if ds.union(edge.u, edge.v):
            cost += edge.weight
            chosen.append(edge)
    return cost, chosen