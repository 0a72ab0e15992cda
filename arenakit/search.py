"""Ternary search for the maximum of a unimodal function over integers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

_FINAL_WINDOW = 6


def ternary_search(f: Callable[[int], Any], lo: int, hi: int) -> int:
    """Return an argmax of ``f`` on ``[lo, hi]``; ties in the final window go to the smallest."""
    if lo > hi:
        raise ValueError(f"empty range [{lo}, {hi}]")
    left, right = lo, hi
    while right > left + _FINAL_WINDOW:
        third = (right - left) // 3
        m1, m2 = left + third, right - third
        if f(m1) < f(m2):
            left = m1
        else:
            right = m2
    best, best_value = right, f(right)
    for x in range(right, left - 1, -1):
        value = f(x)
        if value >= best_value:
            best, best_value = x, value
    return best