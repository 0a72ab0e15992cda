"""Integers modulo a fixed modulus with arithmetic operators."""

from __future__ import annotations

MOD = 1_000_000_007


class ModInt:
    """An integer reduced modulo ``mod``; division assumes ``mod`` is prime."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int | ModInt = 0, mod: int = MOD) -> None:
        if mod <= 0:
            raise ValueError(f"modulus must be positive, got {mod}")
        if isinstance(value, ModInt):
            value = value.value
        self.mod = mod
        self.value = value % mod

    def _coerce(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError(f"moduli differ: {self.mod} and {other.mod}")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return None

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value + v)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value - v)

    def __rsub__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(v - self.value)

    def __mul__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self * self._make(v).inv()

    def __rtruediv__(self, other: object) -> ModInt:
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return self._make(v) * self.inv()

    def __pow__(self, k: int) -> ModInt:
        return self.pow(k)

    def __neg__(self) -> ModInt:
        return self._make(-self.value)

    def __pos__(self) -> ModInt:
        return self

    def pow(self, k: int) -> ModInt:
        """Return ``self ** k``; a negative ``k`` uses Fermat's little theorem."""
        if k < 0:
            k = self.mod - 1 - (-k % (self.mod - 1))
        return self._make(pow(self.value, k, self.mod))

    def inv(self) -> ModInt:
        """Return the multiplicative inverse modulo a prime modulus."""
        if self.value == 0:
            raise ZeroDivisionError("zero has no modular inverse")
        return self._make(pow(self.value, self.mod - 2, self.mod))

    def _compare(self, other: object) -> int | None:
        return self._coerce(other)

    def __eq__(self, other: object) -> bool:
        v = self._compare(other)
        if v is None:
            return NotImplemented
        return self.value == v

    def __lt__(self, other: object) -> bool:
        v = self._compare(other)
        if v is None:
            return NotImplemented
        return self.value < v

    def __le__(self, other: object) -> bool:
        v = self._compare(other)
        if v is None:
            return NotImplemented
        return self.value <= v

    def __gt__(self, other: object) -> bool:
        v = self._compare(other)
        if v is None:
            return NotImplemented
        return self.value > v

    def __ge__(self, other: object) -> bool:
        v = self._compare(other)
        if v is None:
            return NotImplemented
        return self.value >= v

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"