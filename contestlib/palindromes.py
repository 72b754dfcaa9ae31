"""Palindrome radii by Manacher's algorithm."""

from __future__ import annotations

from typing import Any, Sequence

_GAP = object()


def manacher_odd(s: Sequence[Any]) -> list[int]:
    """For every centre ``i``, ``(x + 1) // 2`` where ``x`` is the length of
    the longest odd palindrome centred at ``i``."""
    n = len(s)
    radius = [0] * n
    left, right = 0, -1
    for i in range(n):
        k = 1 if i > right else min(radius[left + right - i], right - i + 1)
        while i - k >= 0 and i + k < n and s[i - k] == s[i + k]:
            k += 1
        radius[i] = k
        if i + k - 1 > right:
            left, right = i - k + 1, i + k - 1
    return radius


def manacher(s: Sequence[Any]) -> list[int]:
    """Radii over all ``2n - 1`` centres, characters and gaps alike.

    Entry ``c`` is one more than the length of the longest palindrome whose
    centre is at ``c / 2``: even ``c`` is the character ``c // 2``, odd ``c``
    the gap between characters ``(c - 1) // 2`` and ``(c + 1) // 2``.
    """
    if not s:
        return []
    spaced: list[Any] = [_GAP]
    for c in s:
        spaced.append(c)
        spaced.append(_GAP)
    return manacher_odd(spaced)[1:-1]


def palindrome_radii(s: Sequence[Any]) -> tuple[list[int], list[int]]:
    """Odd and even palindrome radii, each indexed by position.

    ``odd[i] = k`` means ``s[i-k+1 : i+k]`` is the longest palindrome centred
    on ``i``; ``even[i] = k`` means ``s[i-k : i+k]`` is the longest even
    palindrome centred on the gap before ``i``.
    """
    n = len(s)
    radii = [[0] * n, [0] * n]  # index 0: even, index 1: odd
    for z in (0, 1):
        shift = 1 - z
        p = radii[z]
        left = right = 0
        for i in range(n):
            if i < right:
                p[i] = min(right - i, p[left + right - i + shift])
            while (
                i - p[i] - shift >= 0
                and i + p[i] < n
                and s[i - p[i] - shift] == s[i + p[i]]
            ):
                p[i] += 1
            if i + p[i] > right:
                left = i - p[i] - shift
                right = i + p[i]
    return radii[1], radii[0]