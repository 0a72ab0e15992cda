"""Algorithms for contest-style problems: modular arithmetic, Fibonacci, tries, palindromes, range queries, search and debug formatting."""

__version__ = "0.1.0"