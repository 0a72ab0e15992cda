"""Binary trie over fixed-width integers for maximum-XOR queries."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_BITS = 31


class _Node:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: list[_Node | None] = [None, None]
        self.count = 0


class BitTrie:
    """A multiset of non-negative integers supporting maximum-XOR lookups."""

    def __init__(self, bits: int = DEFAULT_BITS) -> None:
        if bits < 1:
            raise ValueError(f"bit width must be at least 1, got {bits}")
        self.bits = bits
        self._root = _Node()
        self._size = 0

    def _in_range(self, x: int) -> bool:
        return 0 <= x < (1 << self.bits)

    def _path(self, x: int) -> Iterator[int]:
        if not self._in_range(x):
            raise ValueError(f"{x} does not fit in {self.bits} unsigned bits")
        return ((x >> j) & 1 for j in range(self.bits - 1, -1, -1))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int) or not self._in_range(x):
            return False
        node: _Node | None = self._root
        for bit in self._path(x):
            node = node.children[bit]
            if node is None:
                return False
        return True

    def insert(self, x: int) -> None:
        """Add one occurrence of ``x``."""
        node = self._root
        for bit in self._path(x):
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _Node()
            child.count += 1
            node = child
        self._size += 1

    def remove(self, x: int) -> None:
        """Remove one occurrence of ``x``; raise KeyError if it is absent."""
        if x not in self:
            raise KeyError(x)
        node = self._root
        for bit in self._path(x):
            child = node.children[bit]
            assert child is not None
            child.count -= 1
            if child.count == 0:
                node.children[bit] = None
                break
            node = child
        self._size -= 1

    def query(self, x: int) -> int:
        """Return the largest ``x ^ y`` over every stored ``y``."""
        if not self._size:
            raise LookupError("query on an empty trie")
        answer = 0
        node = self._root
        for j in range(self.bits - 1, -1, -1):
            bit = (x >> j) & 1
            other = node.children[bit ^ 1]
            if other is not None:
                answer |= 1 << j
                node = other
            else:
                same = node.children[bit]
                assert same is not None
                node = same
        return answer