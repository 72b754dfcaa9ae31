"""Planar points, convex hulls and Minkowski sums of convex polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float = 0
    y: float = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)


def cross(a: Point, b: Point) -> float:
    """The z component of the cross product ``a x b``."""
    return a.x * b.y - a.y * b.x


def dot(a: Point, b: Point) -> float:
    """The dot product of ``a`` and ``b``."""
    return a.x * b.x + a.y * b.y


def norm(a: Point) -> float:
    """The Euclidean length of ``a``."""
    return math.sqrt(dot(a, a))


def area(polygon: Sequence[Point]) -> float:
    """Area of a simple polygon given by its vertices in order."""
    n = len(polygon)
    total = sum(cross(polygon[i], polygon[(i + 1) % n]) for i in range(n))
    return abs(total) / 2


def orientation(a: Point, b: Point, c: Point) -> int:
    """-1 if ``a, b, c`` turn clockwise, +1 if counter-clockwise, 0 if collinear."""
    v = a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)
    if v < 0:
        return -1
    if v > 0:
        return 1
    return 0


def _clockwise(a: Point, b: Point, c: Point, include_collinear: bool) -> bool:
    o = orientation(a, b, c)
    return o < 0 or (include_collinear and o == 0)


def convex_hull(points: Iterable[Point], include_collinear: bool = False) -> list[Point]:
    """Vertices of the convex hull by Graham scan, starting from the lowest point.

    With ``include_collinear`` the points lying on hull edges are kept too.
    """
    pts = list(points)
    if not pts:
        raise ValueError("convex hull of no points")
    p0 = min(pts, key=lambda p: (p.y, p.x))

    def sq_dist(p: Point) -> float:
        return (p0.x - p.x) ** 2 + (p0.y - p.y) ** 2

    def before(a: Point, b: Point) -> bool:
        o = orientation(p0, a, b)
        if o == 0:
            return sq_dist(a) < sq_dist(b)
        return o < 0

    def compare(a: Point, b: Point) -> int:
        if before(a, b):
            return -1
        if before(b, a):
            return 1
        return 0

    pts.sort(key=cmp_to_key(compare))
    if include_collinear:
        i = len(pts) - 1
        while i >= 0 and orientation(p0, pts[i], pts[-1]) == 0:
            i -= 1
        pts[i + 1 :] = pts[i + 1 :][::-1]

    stack: list[Point] = []
    for p in pts:
        while len(stack) > 1 and not _clockwise(stack[-2], stack[-1], p, include_collinear):
            stack.pop()
        stack.append(p)

    if not include_collinear and len(stack) == 2 and stack[0] == stack[1]:
        stack.pop()
    return stack


def reorder_polygon(polygon: Sequence[Point]) -> list[Point]:
    """The polygon rotated to start at its lowest (then leftmost) vertex."""
    if not polygon:
        return []
    pos = min(range(len(polygon)), key=lambda i: (polygon[i].y, polygon[i].x))
    return list(polygon[pos:]) + list(polygon[:pos])


def minkowski_sum(p: Sequence[Point], q: Sequence[Point]) -> list[Point]:
    """Minkowski sum of two convex polygons given counter-clockwise.

    The result is counter-clockwise and starts at its lowest vertex. The
    distance between two polygons is the distance from the origin to
    ``minkowski_sum(p, [-v for v in q])``.
    """
    if not p or not q:
        raise ValueError("polygons must not be empty")
    pp = reorder_polygon(p)
    qq = reorder_polygon(q)
    n, m = len(pp), len(qq)
    pp += [pp[0], pp[1 % n]]
    qq += [qq[0], qq[1 % m]]
    result = []
    i = j = 0
    while i < n or j < m:
        result.append(pp[i] + qq[j])
        turn = cross(pp[i + 1] - pp[i], qq[j + 1] - qq[j])
        if turn >= 0 and i < n:
            i += 1
        if turn <= 0 and j < m:
            j += 1
    return result