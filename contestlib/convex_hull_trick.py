"""Dynamic convex hull trick: best value of y = a*x + b over a set of lines."""

from __future__ import annotations

from sortedcontainers import SortedDict

_NEG_INF = float("-inf")


def _intersect_x(l1: tuple[int, int], l2: tuple[int, int]) -> float:
    return (l2[1] - l1[1]) / (l1[0] - l2[0])


class ConvexHullDynamic:
    """Keeps only the lines that can be optimal, for maximum or minimum queries."""

    def __init__(self, is_max: bool) -> None:
        self.is_max = is_max
        self._lines: SortedDict = SortedDict()

    def __len__(self) -> int:
        return len(self._lines)

    def _line(self, i: int) -> tuple[int, int]:
        return self._lines.peekitem(i)

    def _irrelevant(self, i: int) -> bool:
        if i <= 0 or i >= len(self._lines) - 1:
            return False
        prev, cur, nxt = self._line(i - 1), self._line(i), self._line(i + 1)
        if self.is_max:
            return _intersect_x(prev, nxt) <= _intersect_x(prev, cur)
        return _intersect_x(nxt, prev) <= _intersect_x(nxt, cur)

    def add_line(self, a: int, b: int) -> None:
        """Add the line ``y = a*x + b``."""
        existing = self._lines.get(a)
        if existing is not None:
            if (self.is_max and existing < b) or (not self.is_max and existing > b):
                del self._lines[a]
            else:
                return
        self._lines[a] = b
        i = self._lines.index(a)
        if self._irrelevant(i):
            del self._lines[a]
            return
        while i > 0 and self._irrelevant(i - 1):
            self._lines.popitem(i - 1)
            i -= 1
        while i + 1 < len(self._lines) and self._irrelevant(i + 1):
            self._lines.popitem(i + 1)

    def _left_border(self, i: int) -> float:
        if self.is_max:
            return _NEG_INF if i == 0 else _intersect_x(self._line(i), self._line(i - 1))
        if i == len(self._lines) - 1:
            return _NEG_INF
        return _intersect_x(self._line(i), self._line(i + 1))

    def get_best(self, x: int) -> int:
        """Maximum (or minimum) of the lines at ``x``."""
        n = len(self._lines)
        if n == 0:
            raise ValueError("no lines added")
        if self.is_max:
            lo, hi = 1, n
            while lo < hi:
                mid = (lo + hi) // 2
                if self._left_border(mid) < x:
                    lo = mid + 1
                else:
                    hi = mid
            idx = lo - 1
        else:
            lo, hi = 0, n - 1
            while lo < hi:
                mid = (lo + hi) // 2
                if self._left_border(mid) <= x:
                    hi = mid
                else:
                    lo = mid + 1
            idx = lo
        a, b = self._line(idx)
        return a * x + b