"""Locating an array's maximum using only second-maximum range queries."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Sequence

Query = Callable[[int, int], int]


def second_max_position(values: Sequence[int], lo: int, hi: int) -> int:
    """1-based position of the second largest value among positions ``lo..hi``."""
    if lo >= hi:
        raise ValueError(f"range needs at least two positions, got [{lo}, {hi}]")
    if lo < 1 or hi > len(values):
        raise IndexError(f"range [{lo}, {hi}] out of bounds for length {len(values)}")
    order = sorted(range(lo - 1, hi), key=values.__getitem__, reverse=True)
    return order[1] + 1


def find_second_max(n: int, query: Query) -> int:
    """Find the 1-based position of the maximum by asking for second maxima.

    ``query(lo, hi)`` must return the position of the second largest value
    in the inclusive range.
    """
    if n < 1:
        raise ValueError(f"array length must be positive, got {n}")
    lo, hi = 1, n
    while hi > lo + 1:
        m = query(lo, hi)
        md = (lo + hi) // 2
        if m > md:
            # A one-element right half cannot hold both the maximum and m.
            same = md + 1 < hi and query(md + 1, hi) == m
            if same:
                lo = md
            else:
                hi = md
        else:
            if query(lo, md) == m:
                hi = md
            else:
                lo = md
    if hi == lo:
        return lo
    return hi if query(lo, hi) == lo else lo


class ArrayOracle:
    """Answers queries from a known array and keeps a transcript of the exchange."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)
        self.transcript: list[str] = []
        self.queries = 0

    def query(self, lo: int, hi: int) -> int:
        """Reply with the second-maximum position in ``lo..hi``."""
        self.transcript.append(f"? {lo} {hi}")
        reply = second_max_position(self.values, lo, hi)
        self.queries += 1
        self.transcript.append(f"Reply: {reply}")
        return reply

    def answer(self, pos: int) -> int:
        """Check a claimed maximum position; return the true one or raise ValueError."""
        if not self.values:
            raise ValueError("no values to answer about")
        expected = max(range(len(self.values)), key=self.values.__getitem__) + 1
        self.transcript.append(f"! {pos}")
        self.transcript.append(f"Answer is {expected}")
        if pos != expected:
            raise ValueError(f"answered {pos}, but the maximum is at {expected}")
        return expected


def _ask_stdin(lo: int, hi: int) -> int:
    print(f"? {lo} {hi}", flush=True)
    return int(input())


def main(argv: list[str] | None = None) -> int:
    """Run random self-checking rounds, or talk to a judge over stdin/stdout."""
    parser = argparse.ArgumentParser(
        prog="interactive", description="Find the maximum with second-maximum queries."
    )
    parser.add_argument("--tests", type=int, default=10, help="number of rounds")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--interactive", action="store_true", help="read n and replies from stdin"
    )
    args = parser.parse_args(argv)

    begin = time.perf_counter()
    if args.interactive:
        for _ in range(args.tests):
            n = int(input())
            print(f"! {find_second_max(n, _ask_stdin)}", flush=True)
    else:
        rng = random.Random(args.seed)
        for _ in range(args.tests):
            n = rng.randrange(10) + 2
            values = list(range(1, n + 1))
            rng.shuffle(values)
            print("Current Test")
            print(n)
            print("".join(f"{v} " for v in values))
            print()
            oracle = ArrayOracle(values)
            pos = find_second_max(n, oracle.query)
            try:
                oracle.answer(pos)
            finally:
                print("\n".join(oracle.transcript))
    elapsed = time.perf_counter() - begin
    print(f"Time measured: {elapsed} seconds.", file=sys.stderr)
    return 0