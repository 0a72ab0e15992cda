"""Fibonacci numbers modulo a prime by 2x2 matrix exponentiation."""

from __future__ import annotations

import argparse
import sys

MOD = 1_000_000_007

Matrix = tuple[tuple[int, int], tuple[int, int]]

IDENTITY: Matrix = ((1, 0), (0, 1))
BASE: Matrix = ((1, 1), (1, 0))


def mat_mul(a: Matrix, b: Matrix, mod: int = MOD) -> Matrix:
    """Multiply two 2x2 matrices modulo ``mod``."""
    columns = tuple(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) % mod for col in columns)
        for row in a
    )  # type: ignore[return-value]


def mat_pow(a: Matrix, n: int, mod: int = MOD) -> Matrix:
    """Raise a 2x2 matrix to the ``n``-th power modulo ``mod``."""
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = IDENTITY
    while n:
        if n & 1:
            result = mat_mul(result, a, mod)
        a = mat_mul(a, a, mod)
        n >>= 1
    return result


def fib(n: int, mod: int = MOD) -> int:
    """Return the ``n``-th Fibonacci number modulo ``mod``."""
    return mat_pow(BASE, n, mod)[0][1] % mod


def main(argv: list[str] | None = None) -> int:
    """Print F(n) mod 1e9+7; n comes from the arguments or standard input."""
    parser = argparse.ArgumentParser(
        prog="fibonacci", description="Print the n-th Fibonacci number modulo 1e9+7."
    )
    parser.add_argument("n", nargs="?", type=int, help="index; read from stdin if omitted")
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("expected n on standard input")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"invalid integer: {tokens[0]!r}")
    if n < 0:
        parser.error("n must be non-negative")
    print(fib(n))
    return 0