"""Sum segment trees: point update, and range add with lazy propagation."""

from __future__ import annotations

from typing import Iterable


class SegmentTree:
    """Iterative segment tree of sums with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        self._n = len(leaves)
        self._tree = [0] * self._n + leaves
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, pos: int, value: int) -> None:
        """Set the element at ``pos`` to ``value``."""
        if not 0 <= pos < self._n:
            raise IndexError(f"position {pos} out of range")
        pos += self._n
        self._tree[pos] = value
        while pos > 1:
            self._tree[pos // 2] = self._tree[pos] + self._tree[pos ^ 1]
            pos //= 2

    def query(self, left: int, right: int) -> int:
        """Sum of the elements in the inclusive range ``[left, right]``."""
        if left < 0 or right >= self._n:
            raise IndexError("range out of bounds")
        res = 0
        left += self._n
        right += self._n
        while left <= right:
            if left % 2:
                res += self._tree[left]
                left += 1
            if right % 2 == 0:
                res += self._tree[right]
                right -= 1
            left //= 2
            right //= 2
        return res


class LazySegmentTree:
    """Segment tree of sums supporting range increments."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._sum = [0] * (4 * self._n)
        self._lazy = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, p: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._sum[p] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * p, lo, mid, items)
        self._build(2 * p + 1, mid + 1, hi, items)
        self._sum[p] = self._sum[2 * p] + self._sum[2 * p + 1]

    def _push(self, p: int, lo: int, hi: int) -> None:
        pending = self._lazy[p]
        if pending:
            self._sum[p] += (hi - lo + 1) * pending
            if lo != hi:
                self._lazy[2 * p] += pending
                self._lazy[2 * p + 1] += pending
            self._lazy[p] = 0

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element of the inclusive range."""
        self._check(left, right)
        self._add(1, 0, self._n - 1, left, right, value)

    def _add(self, p: int, lo: int, hi: int, i: int, j: int, value: int) -> None:
        self._push(p, lo, hi)
        if hi < i or lo > j:
            return
        if i <= lo and hi <= j:
            self._lazy[p] += value
            self._push(p, lo, hi)
            return
        mid = (lo + hi) // 2
        self._add(2 * p, lo, mid, i, j, value)
        self._add(2 * p + 1, mid + 1, hi, i, j, value)
        self._sum[p] = self._sum[2 * p] + self._sum[2 * p + 1]

    def query(self, left: int, right: int) -> int:
        """Sum of the elements in the inclusive range ``[left, right]``."""
        self._check(left, right)
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, p: int, lo: int, hi: int, i: int, j: int) -> int:
        self._push(p, lo, hi)
        if hi < i or lo > j:
            return 0
        if i <= lo and hi <= j:
            return self._sum[p]
        mid = (lo + hi) // 2
        return self._query(2 * p, lo, mid, i, j) + self._query(
            2 * p + 1, mid + 1, hi, i, j
        )