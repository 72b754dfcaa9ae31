"""Polynomial string hashing and a double-modulus hash value."""

from __future__ import annotations

from dataclasses import dataclass

BASE = 31
MOD = 1_000_000_009
MOD1 = 1_000_000_009
MOD2 = 1_000_000_007


def _char_value(c: str) -> int:
    return ord(c) - ord("a") + 1


def compute_hash(s: str) -> int:
    """Sum of ``value(s[i]) * 31**i`` modulo 1e9+9."""
    hash_value = 0
    p_pow = 1
    for c in s:
        hash_value = (hash_value + _char_value(c) * p_pow) % MOD
        p_pow = p_pow * BASE % MOD
    return hash_value


def count_unique_substrings(s: str) -> int:
    """Number of distinct non-empty substrings, compared by hash."""
    n = len(s)
    p_pow = [1] * n
    for i in range(1, n):
        p_pow[i] = p_pow[i - 1] * BASE % MOD
    prefix = [0] * (n + 1)
    for i, c in enumerate(s):
        prefix[i + 1] = (prefix[i] + _char_value(c) * p_pow[i]) % MOD
    count = 0
    for length in range(1, n + 1):
        seen = {
            (prefix[i + length] - prefix[i]) % MOD * p_pow[n - i - 1] % MOD
            for i in range(n - length + 1)
        }
        count += len(seen)
    return count


@dataclass(frozen=True)
class Hasher:
    """A pair of residues modulo 1e9+9 and 1e9+7."""

    x: int = 0
    y: int = 0

    @property
    def value(self) -> int:
        """Both residues packed into one integer."""
        return (self.x << 31) | self.y

    def __add__(self, other: Hasher) -> Hasher:
        return Hasher((self.x + other.x) % MOD1, (self.y + other.y) % MOD2)

    def __sub__(self, other: Hasher) -> Hasher:
        return Hasher((self.x - other.x) % MOD1, (self.y - other.y) % MOD2)

    def __mul__(self, other: Hasher) -> Hasher:
        return Hasher(self.x * other.x % MOD1, self.y * other.y % MOD2)


SEED = Hasher(31, 131)