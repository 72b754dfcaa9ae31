"""Sweep line search for a pair of intersecting segments.

Segments are ``(x1, y1, x2, y2)`` tuples of integers.
"""

from __future__ import annotations

import argparse
from bisect import bisect_left
from pathlib import Path
from typing import Sequence

Segment = tuple[int, int, int, int]


def _sign(ax: int, ay: int, bx: int, by: int) -> int:
    val = ax * by - ay * bx
    return (val > 0) - (val < 0)


def segments_intersect(a: Sequence[int], b: Sequence[int]) -> bool:
    """True if the two closed segments share a point.

    Collinear segments are always reported as intersecting.
    """
    return (
        _sign(b[2] - a[0], b[3] - a[1], a[2] - a[0], a[3] - a[1])
        * _sign(a[2] - a[0], a[3] - a[1], b[0] - a[0], b[1] - a[1])
        >= 0
        and _sign(a[2] - b[0], a[3] - b[1], b[2] - b[0], b[3] - b[1])
        * _sign(b[2] - b[0], b[3] - b[1], a[0] - b[0], a[1] - b[1])
        >= 0
    )


def _normalized(segments: Sequence[Sequence[int]]) -> list[Segment]:
    out = []
    for s in segments:
        x1, y1, x2, y2 = s
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        out.append((x1, y1, x2, y2))
    return out


def find_intersecting_pair(segments: Sequence[Sequence[int]]) -> tuple[int, int] | None:
    """Indices of some pair of intersecting segments, or None if there is none.

    The first index of the pair is the smaller one.
    """
    seg = _normalized(segments)
    events = sorted(
        ev for i, (x1, _, x2, _) in enumerate(seg) for ev in ((x1, 0, i), (x2, 1, i))
    )
    active: list[int] = []
    sweep = 0

    def key(i: int) -> tuple[float, int]:
        x1, y1, x2, y2 = seg[i]
        if x1 == x2:
            return float(y1), i
        return y1 + (sweep - x1) * (y2 - y1) / (x2 - x1), i

    for x, kind, idx in events:
        sweep = x
        if kind:
            pos = active.index(idx)
            if 0 < pos < len(active) - 1:
                above, below = active[pos + 1], active[pos - 1]
                if segments_intersect(seg[above], seg[below]):
                    return tuple(sorted((above, below)))  # type: ignore[return-value]
            del active[pos]
        else:
            pos = bisect_left(active, key(idx), key=key)
            active.insert(pos, idx)
            neighbours = []
            if pos + 1 < len(active):
                neighbours.append(active[pos + 1])
            if pos > 0:
                neighbours.append(active[pos - 1])
            for other in neighbours:
                if segments_intersect(seg[other], seg[idx]):
                    return tuple(sorted((other, idx)))  # type: ignore[return-value]
    return None


def segment_to_remove(segments: Sequence[Sequence[int]]) -> int:
    """Index of the segment whose removal can leave the rest disjoint.

    Of the first intersecting pair found, the higher index is chosen if it
    meets more than one segment, otherwise the lower one.
    """
    pair = find_intersecting_pair(segments)
    if pair is None:
        raise ValueError("no two segments intersect")
    first, second = pair
    seg = _normalized(segments)
    hits = sum(
        segments_intersect(seg[second], s) for i, s in enumerate(seg) if i != second
    )
    return second if hits > 1 else first


def _read_segments(text: str) -> list[Segment]:
    numbers = [int(tok) for tok in text.split()]
    if not numbers:
        raise ValueError("empty input")
    n = numbers[0]
    values = numbers[1 : 1 + 4 * n]
    if len(values) != 4 * n:
        raise ValueError("input ends before all segments were read")
    return [tuple(values[k : k + 4]) for k in range(0, 4 * n, 4)]  # type: ignore[misc]


def main(argv: Sequence[str] | None = None) -> int:
    """Read segments from a file and write the 1-based index to remove."""
    parser = argparse.ArgumentParser(description="Find the segment to remove.")
    parser.add_argument("input", nargs="?", default="cowjump.in")
    parser.add_argument("output", nargs="?", default="cowjump.out")
    args = parser.parse_args(argv)
    segments = _read_segments(Path(args.input).read_text())
    Path(args.output).write_text(f"{segment_to_remove(segments) + 1}\n")
    return 0