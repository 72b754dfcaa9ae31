"""Modular exponentiation, inverses and binomial coefficients."""

from __future__ import annotations

from functools import lru_cache

MOD = 998_244_353
_CARD_LIMIT = 60


def pow_mod(a: int, b: int, mod: int = MOD) -> int:
    """``a**b`` modulo ``mod``; 0 whenever ``a`` is a multiple of ``mod``."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    a %= mod
    if a == 0:
        return 0
    return pow(a, b, mod)


def mod_inverse(a: int, mod: int = MOD) -> int:
    """Inverse of ``a`` modulo the prime ``mod``."""
    if a % mod == 0:
        raise ZeroDivisionError("zero has no modular inverse")
    return pow_mod(a, mod - 2, mod)


class Binomial:
    """Binomial coefficients modulo a prime, for ``n`` up to ``limit``."""

    def __init__(self, limit: int, mod: int = MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.mod = mod
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % mod
        self._fact = fact
        self._inv_fact = [mod_inverse(f, mod) for f in fact]

    def choose(self, n: int, k: int) -> int:
        """``n`` choose ``k`` modulo ``mod``; 0 when ``k`` is out of range."""
        if not 0 <= n <= self.limit:
            raise ValueError(f"n={n} outside [0, {self.limit}]")
        if not 0 <= k <= n:
            return 0
        return self._fact[n] * self._inv_fact[k] % self.mod * self._inv_fact[n - k] % self.mod


@lru_cache(maxsize=None)
def _card_table() -> tuple[Binomial, tuple[int, ...]]:
    binom = Binomial(_CARD_LIMIT, MOD)
    wins = [0] * (_CARD_LIMIT + 1)
    wins[2] = 1
    wins[4] = 3
    for i in range(6, _CARD_LIMIT + 1, 2):
        wins[i] = (
            binom.choose(i - 1, i // 2 - 1) + binom.choose(i - 4, i // 2 - 3) + wins[i - 4]
        ) % MOD
    return binom, tuple(wins)


def card_game_outcomes(n: int) -> tuple[int, int, int]:
    """Deals of ``n`` cards won by the first player, the second, and drawn.

    ``n`` must be even and between 2 and 60; counts are modulo 998244353.
    """
    if n % 2 or not 2 <= n <= _CARD_LIMIT:
        raise ValueError(f"n must be even and in [2, {_CARD_LIMIT}]")
    binom, wins = _card_table()
    total = binom.choose(n, n // 2)
    first = wins[n]
    second = (total - first - 1) % MOD
    return first, second, 1