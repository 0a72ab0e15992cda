"""Manacher's algorithm: palindrome radii around every centre of a string."""

from __future__ import annotations


def _radii(t: str) -> list[int]:
    """For each index, the count of matching steps outward including the centre."""
    n = len(t)
    p = [0] * n
    left = right = 0  # exclusive bounds of the rightmost palindrome found
    for i in range(n):
        k = min(right - i, p[left + right - i]) if i < right else 0
        while i - k >= 0 and i + k < n and t[i - k] == t[i + k]:
            k += 1
        p[i] = k
        if i + k > right:
            left, right = i - k, i + k
    return p


class Manacher:
    """Answers palindrome queries on a fixed string in constant time."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.radii = _radii("#" + "#".join(text) + "#")

    def longest_palindrome(self, center: int, odd: bool = True) -> int:
        """Length of the longest palindrome centred at ``center``.

        With ``odd`` false the centre is the gap after ``center``.
        """
        if not 0 <= center < len(self.text):
            raise IndexError(f"center {center} out of range for length {len(self.text)}")
        position = 2 * center + 1 + (0 if odd else 1)
        return self.radii[position] - 1

    def is_palindrome(self, left: int, right: int) -> bool:
        """Whether ``text[left:right + 1]`` reads the same both ways."""
        if not 0 <= left <= right < len(self.text):
            raise IndexError(f"range [{left}, {right}] out of bounds")
        center = (left + right) // 2
        return right - left + 1 <= self.longest_palindrome(center, left % 2 == right % 2)