"""Ternary search for the maximum of a unimodal function."""

from __future__ import annotations

from typing import Callable


def ternary_search(
    f: Callable[[float], float], lo: float, hi: float, eps: float = 1e-9
) -> float:
    """Maximum of ``f`` on ``[lo, hi]`` for ``f`` increasing then decreasing."""
    if eps <= 0:
        raise ValueError("eps must be positive")
    while hi - lo > eps:
        third = (hi - lo) / 3
        m1 = lo + third
        m2 = hi - third
        if m1 == lo and m2 == hi:
            break  # the interval can no longer shrink in floating point
        if f(m1) < f(m2):
            lo = m1
        else:
            hi = m2
    return f(lo)