"""Sorted set with rank queries, and an interval nesting count built on it."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from sortedcontainers import SortedList


class OrderedSet:
    """A set of distinct, comparable items that knows each item's rank."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(items))

    def add(self, x: Any) -> None:
        """Insert ``x`` unless it is already present."""
        if x not in self._items:
            self._items.add(x)

    def discard(self, x: Any) -> None:
        """Remove ``x`` if it is present."""
        self._items.discard(x)

    def order_of_key(self, x: Any) -> int:
        """Number of items strictly smaller than ``x``."""
        return self._items.bisect_left(x)

    def find_by_order(self, k: int) -> Any:
        """The item of rank ``k``, counting from 0."""
        if not 0 <= k < len(self._items):
            raise IndexError(f"rank {k} out of range")
        return self._items[k]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, x: object) -> bool:
        return x in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


def count_covering_pairs(pairs: Iterable[tuple[int, int]]) -> int:
    """Count nested intervals given as ``(start, end)`` pairs.

    Intervals are taken in order of ``(end, start)``; each adds the number
    of distinct earlier start points not smaller than its own start.
    """
    ordered = sorted(pairs, key=lambda p: (p[1], p[0]))
    starts = OrderedSet()
    total = 0
    for start, _ in ordered:
        total += len(starts) - starts.order_of_key(start)
        starts.add(start)
    return total