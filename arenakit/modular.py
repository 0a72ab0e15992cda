"""Modular arithmetic helpers: fast exponentiation, inverses and binomials."""

from __future__ import annotations

MOD = 10**9 + 7
DEFAULT_LIMIT = 200_005


def power_mod(a: int, b: int, m: int) -> int:
    """Return ``a ** b`` modulo ``m``; a non-positive exponent yields 1."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    if b <= 0:
        return 1
    return pow(a % m, b, m)


def power(a: int, b: int) -> int:
    """Return ``a ** b`` without a modulus; a non-positive exponent yields 1."""
    if b <= 0:
        return 1
    return a**b


def inverse(a: int, m: int = MOD) -> int:
    """Return the inverse of ``a`` modulo the prime ``m`` (Fermat's little theorem)."""
    return power_mod(a, m - 2, m) % m


class Binomial:
    """Binomial coefficients modulo a prime, backed by a factorial table."""

    def __init__(self, limit: int = DEFAULT_LIMIT, mod: int = MOD) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        if mod <= 0:
            raise ValueError(f"modulus must be positive, got {mod}")
        self.limit = limit
        self.mod = mod
        factorials = [1]
        for i in range(1, limit):
            factorials.append(factorials[-1] * i % mod)
        self._factorials = factorials

    def ncr(self, n: int, r: int) -> int:
        """Return ``C(n, r)`` modulo the table's prime; 0 when ``r`` is out of range."""
        if r > n or r < 0:
            return 0
        if n >= self.limit:
            raise IndexError(f"n={n} is beyond the factorial table of size {self.limit}")
        facts = self._factorials
        result = facts[n]
        result = result * inverse(facts[r], self.mod) % self.mod
        result = result * inverse(facts[n - r], self.mod) % self.mod
        return result