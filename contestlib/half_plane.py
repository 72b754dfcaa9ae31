"""Intersection of half-planes, each keeping the left side of a directed line."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable

from contestlib.convex_hull import Point, cross, dot

EPS = 1e-9
INF = 1e9


class Halfplane:
    """The region to the left of the line through ``a`` towards ``b``."""

    __slots__ = ("p", "pq", "angle")

    def __init__(self, a: Point, b: Point) -> None:
        self.p = a
        self.pq = b - a
        self.angle = math.atan2(self.pq.y, self.pq.x)

    def __repr__(self) -> str:
        return f"Halfplane({self.p!r}, {self.p + self.pq!r})"

    def out(self, r: Point) -> bool:
        """True if ``r`` lies strictly outside the half-plane."""
        return cross(self.pq, r - self.p) < -EPS

    def intersection(self, other: Halfplane) -> Point:
        """Crossing point of the two boundary lines, which must not be parallel."""
        denom = cross(self.pq, other.pq)
        if denom == 0:
            raise ValueError("boundary lines are parallel")
        alpha = cross(other.p - self.p, other.pq) / denom
        return self.p + self.pq * alpha


def hp_intersect(halfplanes: Iterable[Halfplane]) -> list[Point]:
    """Vertices of the intersection polygon, counter-clockwise.

    The plane is bounded by a box of half-width ``INF``. An empty or
    degenerate intersection gives an empty list.
    """
    box = [Point(INF, INF), Point(-INF, INF), Point(-INF, -INF), Point(INF, -INF)]
    planes = list(halfplanes)
    planes.extend(Halfplane(box[i], box[(i + 1) % 4]) for i in range(4))
    planes.sort(key=lambda h: h.angle)

    dq: deque[Halfplane] = deque()
    for h in planes:
        while len(dq) > 1 and h.out(dq[-1].intersection(dq[-2])):
            dq.pop()
        while len(dq) > 1 and h.out(dq[0].intersection(dq[1])):
            dq.popleft()
        if dq and abs(cross(h.pq, dq[-1].pq)) < EPS:
            if dot(h.pq, dq[-1].pq) < 0:
                return []
            if h.out(dq[-1].p):
                dq.pop()
            else:
                continue
        dq.append(h)

    while len(dq) > 2 and dq[0].out(dq[-1].intersection(dq[-2])):
        dq.pop()
    while len(dq) > 2 and dq[-1].out(dq[0].intersection(dq[1])):
        dq.popleft()

    if len(dq) < 3:
        return []
    planes = list(dq)
    return [a.intersection(b) for a, b in zip(planes, planes[1:] + planes[:1])]