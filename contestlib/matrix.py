"""Modular matrix multiplication and exponentiation."""

from __future__ import annotations

from typing import Sequence

MOD = 1_000_000_007

Matrix = list[list[int]]


def _check_square(m: Sequence[Sequence[int]]) -> None:
    if any(len(row) != len(m) for row in m):
        raise ValueError("matrix must be square")


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD) -> Matrix:
    """Product ``a @ b`` with entries reduced modulo ``mod``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def mat_pow(m: Sequence[Sequence[int]], k: int, mod: int = MOD) -> Matrix:
    """``m`` raised to the power ``k`` modulo ``mod``."""
    _check_square(m)
    if k < 0:
        raise ValueError("exponent must be non-negative")
    n = len(m)
    result = [[int(i == j) % mod for j in range(n)] for i in range(n)]
    base = [[x % mod for x in row] for row in m]
    while k > 0:
        if k % 2:
            result = mat_mul(result, base, mod)
        base = mat_mul(base, base, mod)
        k //= 2
    return result


def count_walks(adj: Sequence[Sequence[int]], k: int, mod: int = MOD) -> int:
    """Number of walks of exactly ``k`` edges in the graph, modulo ``mod``."""
    return sum(map(sum, mat_pow(adj, k, mod))) % mod