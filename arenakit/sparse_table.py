"""Sparse table for O(1) range queries with an idempotent operation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

S = TypeVar("S")


class SparseTable(Generic[S]):
    """Range products over half-open intervals; ``op`` must be idempotent (min, max, gcd)."""

    def __init__(self, values: Iterable[S], op: Callable[[S, S], S], identity: S) -> None:
        self.op = op
        self.identity = identity
        level = list(values)
        self._size = len(level)
        self._levels: list[list[S]] = [level] if level else []
        width = 1
        while 2 * width <= self._size:
            level = [op(a, b) for a, b in zip(level, level[width:])]
            self._levels.append(level)
            width *= 2

    def __len__(self) -> int:
        return self._size

    def prod(self, left: int, right: int) -> S:
        """Combine the values at indices ``left`` up to but excluding ``right``."""
        if not 0 <= left <= right <= self._size:
            raise IndexError(f"range [{left}, {right}) out of bounds for size {self._size}")
        if left == right:
            return self.identity
        i = (right - left).bit_length() - 1
        row = self._levels[i]
        return self.op(row[left], row[right - (1 << i)])