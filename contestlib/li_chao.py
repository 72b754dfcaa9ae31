"""Li Chao tree: maximum of lines at integer points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """The line ``y = m*x + b``."""

    m: float
    b: float

    def __call__(self, x: float) -> float:
        return self.m * x + self.b


class LiChaoTree:
    """Maintains lines and answers the maximum value at x in ``[lo, hi)``."""

    def __init__(self, lo: int, hi: int) -> None:
        if lo >= hi:
            raise ValueError("lo must be smaller than hi")
        self.lo = lo
        self.hi = hi
        self._nodes: list[Line | None] = [None] * (4 * (hi - lo))

    def insert(self, m: float, b: float) -> None:
        """Add the line ``y = m*x + b``."""
        seg = Line(m, b)
        lo, hi, o = self.lo, self.hi, 0
        while True:
            cur = self._nodes[o]
            if cur is None:
                self._nodes[o] = seg
                return
            if lo + 1 == hi:
                if seg(lo) > cur(lo):
                    self._nodes[o] = seg
                return
            mid = (lo + hi) >> 1
            if cur.m > seg.m:
                cur, seg = seg, cur
            if cur(mid) < seg(mid):
                cur, seg = seg, cur
                self._nodes[o] = cur
                hi, o = mid, 2 * o + 1
            else:
                self._nodes[o] = cur
                lo, o = mid, 2 * o + 2

    def query(self, x: int) -> float:
        """Maximum value of the inserted lines at ``x``."""
        if not self.lo <= x < self.hi:
            raise IndexError(f"x={x} outside [{self.lo}, {self.hi})")
        if self._nodes[0] is None:
            raise ValueError("no lines inserted")
        lo, hi, o = self.lo, self.hi, 0
        best = float("-inf")
        while True:
            line = self._nodes[o]
            if line is not None:
                best = max(best, line(x))
            if lo + 1 == hi:
                return best
            mid = (lo + hi) >> 1
            if x < mid:
                hi, o = mid, 2 * o + 1
            else:
                lo, o = mid, 2 * o + 2