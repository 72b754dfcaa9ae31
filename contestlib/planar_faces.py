"""Planar graphs from line segments, and the faces of a planar embedding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key, total_ordering
from itertools import groupby
from typing import Iterable, Sequence

EPS = 1e-9
_SCALE = 1_000_000_000


@total_ordering
@dataclass(frozen=True, eq=False)
class Point:
    """A point in the plane; equality and order tolerate an error of ``EPS``."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPS and abs(self.y - other.y) < EPS

    def __lt__(self, other: Point) -> bool:
        if abs(self.x - other.x) < EPS:
            if abs(self.y - other.y) < EPS:
                return False
            return self.y < other.y
        return self.x < other.x

    def cross(self, p: Point, q: Point | None = None) -> float:
        """``self x p``, or ``(p - self) x (q - self)`` when ``q`` is given."""
        if q is None:
            return self.x * p.y - self.y * p.x
        return (p - self).cross(q - self)

    def dot(self, p: Point, q: Point | None = None) -> float:
        """``self . p``, or ``(p - self) . (q - self)`` when ``q`` is given."""
        if q is None:
            return self.x * p.x + self.y * p.y
        return (p - self).dot(q - self)


@dataclass(frozen=True)
class Segment:
    """The closed segment from ``a`` to ``b``."""

    a: Point
    b: Point

    def __iter__(self):
        yield self.a
        yield self.b

    def orth(self) -> Point:
        """A vector orthogonal to the segment."""
        return Point(self.b.y - self.a.y, self.a.x - self.b.x)

    def on_line(self, t: Point) -> bool:
        """True if ``t`` lies on the line through the segment."""
        return abs(self.a.cross(self.b, t)) < EPS

    def on_segment(self, t: Point) -> bool:
        """True if ``t`` lies on the segment."""
        return self.on_line(t) and t.dot(self.a, self.b) < EPS


def intersect_lines(l1: Segment, l2: Segment) -> list[Point]:
    """Common points of the lines through two segments.

    Parallel lines give no points, coincident lines the two ends of ``l1``.
    """
    if abs(l1.orth().cross(l2.orth())) < EPS:
        return [l1.a, l1.b] if l1.on_line(l2.a) else []
    u = l2.b - l2.a
    v = l1.b - l1.a
    s = u.cross(l2.a - l1.a) / u.cross(v)
    return [l1.a + v * s]


def intersect_segments(l1: Segment, l2: Segment) -> list[Point]:
    """Common points of two segments: none, one, or the two ends of an overlap."""
    if l1.a == l1.b:
        if l2.a == l2.b:
            return [l1.a] if l1.a == l2.a else []
        return [l1.a] if l2.on_segment(l1.a) else []
    if l2.a == l2.b:
        return [l2.a] if l1.on_segment(l2.a) else []
    crossing = intersect_lines(l1, l2)
    if not crossing:
        return []
    if len(crossing) == 2:
        lo1, hi1 = (l1.a, l1.b) if l1.a < l1.b else (l1.b, l1.a)
        lo2, hi2 = (l2.a, l2.b) if l2.a < l2.b else (l2.b, l2.a)
        start = lo2 if lo1 < lo2 else lo1
        end = hi1 if hi1 < hi2 else hi2
        if start == end:
            return [start]
        if end < start:
            return []
        return [start, end]
    cand = crossing[0]
    if l1.on_segment(cand) and l2.on_segment(cand):
        return [cand]
    return []


def _grid(value: float) -> int:
    scaled = value * _SCALE
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return int(rounded + 1e-6)


def _point_order(a: Point, b: Point) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def build_graph(segments: Iterable[Segment]) -> tuple[list[Point], list[list[int]]]:
    """Points where segments end or cross, and the sorted neighbour ids of each.

    Two points are the same vertex when they agree to nine decimal places.
    """
    segs = list(segments)
    points: list[Point] = []
    adj: list[list[int]] = []
    ids: dict[tuple[int, int], int] = {}

    def point_id(pt: Point) -> int:
        key = (_grid(pt.x), _grid(pt.y))
        found = ids.get(key)
        if found is not None:
            return found
        ids[key] = len(points)
        points.append(pt)
        adj.append([])
        return ids[key]

    def by_point(l: int, r: int) -> int:
        return _point_order(points[l], points[r])

    for i, seg in enumerate(segs):
        curr = [point_id(seg.a), point_id(seg.b)]
        for j, other in enumerate(segs):
            if i != j:
                curr.extend(point_id(pt) for pt in intersect_segments(seg, other))
        curr.sort(key=cmp_to_key(by_point))
        chain = [k for k, _ in groupby(curr)]
        for u, v in zip(chain, chain[1:]):
            adj[u].append(v)
            adj[v].append(u)
    return points, [sorted(set(nbrs)) for nbrs in adj]


def _half(v: Point) -> bool:
    return v.y < 0 or (v.y == 0 and v.x < 0)


def _angle_order(a: Point, b: Point) -> int:
    ha, hb = _half(a), _half(b)
    if ha != hb:
        return -1 if hb else 1
    c = a.x * b.y - a.y * b.x
    if c > 0:
        return -1
    if c < 0:
        return 1
    return 0


def find_faces(points: Sequence[Point], adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Faces of a planar embedding as lists of vertex ids.

    Bounded faces come out counter-clockwise; each outer face clockwise. Every
    directed edge belongs to exactly one face.
    """
    n = len(points)
    if len(adj) != n:
        raise ValueError("need one adjacency list per point")
    for v, nbrs in enumerate(adj):
        for u in nbrs:
            if not 0 <= u < n:
                raise IndexError(f"neighbour {u} of vertex {v} out of range")
            if v not in adj[u]:
                raise ValueError("adjacency is not symmetric")

    ordered: list[list[int]] = []
    for v, nbrs in enumerate(adj):
        origin = points[v]
        ordered.append(
            sorted(
                nbrs,
                key=cmp_to_key(
                    lambda a, b, o=origin: _angle_order(points[a] - o, points[b] - o)
                ),
            )
        )
    position = [{u: k for k, u in enumerate(nbrs)} for nbrs in ordered]
    used = [[False] * len(nbrs) for nbrs in ordered]

    faces: list[list[int]] = []
    for start, nbrs in enumerate(ordered):
        for first_edge in range(len(nbrs)):
            if used[start][first_edge]:
                continue
            face = []
            v, e = start, first_edge
            while not used[v][e]:
                used[v][e] = True
                face.append(v)
                u = ordered[v][e]
                e = (position[u][v] + 1) % len(ordered[u])
                v = u
            faces.append(face)
    return faces