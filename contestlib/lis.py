"""Longest strictly increasing subsequence in O(n log n)."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterable


def longest_increasing_subsequence(nums: Iterable[Any]) -> list[Any]:
    """Tails of the increasing subsequences of each length.

    Entry ``k`` is the smallest value that ends a strictly increasing
    subsequence of length ``k + 1``; the list's length is the length of the
    longest one, and the list itself is strictly increasing.
    """
    tails: list[Any] = []
    for x in nums:
        if not tails or x > tails[-1]:
            tails.append(x)
        else:
            tails[bisect_left(tails, x)] = x
    return tails