"""Standings of a contest decided by solved count and penalty time."""

from __future__ import annotations

from typing import Iterable, Sequence


def _score(limit: int, times: Iterable[int]) -> tuple[int, int]:
    elapsed = penalty = solved = 0
    for t in sorted(times):
        if elapsed + t > limit:
            break
        elapsed += t
        penalty += elapsed
        solved += 1
    return solved, penalty


def contest_rank(limit: int, times: Sequence[Iterable[int]]) -> int:
    """1-based rank of participant 0.

    Each participant solves problems shortest first while the total time
    stays within ``limit``. Ranking is by more problems, then less penalty
    (the sum of finishing times), then lower index.
    """
    if not times:
        raise ValueError("no participants")
    standings = []
    for idx, row in enumerate(times):
        solved, penalty = _score(limit, row)
        standings.append((-solved, penalty, idx))
    standings.sort()
    return next(rank for rank, entry in enumerate(standings, 1) if entry[2] == 0)