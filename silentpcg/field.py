"""The binary field F2 and a 128-bit prime field."""

from __future__ import annotations

import secrets
from random import Random

__all__ = ["F2", "Field128", "MODULUS"]

MODULUS = 340282366920938463463374607431768211297


class F2:
    """An element of the field with two elements."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % 2

    @classmethod
    def random(cls, rng: Random | None = None) -> F2:
        bit = rng.getrandbits(1) if rng is not None else secrets.randbits(1)
        return cls(bit)

    @classmethod
    def zero(cls) -> F2:
        return cls(0)

    @classmethod
    def one(cls) -> F2:
        return cls(1)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def inverse(self) -> F2:
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse in F2")
        return self

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, F2):
            return other._value
        if isinstance(other, int):
            return other % 2
        return None

    def __add__(self, other: object) -> F2:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return F2(self._value ^ value)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __mul__(self, other: object) -> F2:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return F2(self._value & value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> F2:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self * F2(value).inverse()

    def __neg__(self) -> F2:
        return self

    def __int__(self) -> int:
        return self._value

    __index__ = __int__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, F2):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((F2, self._value))

    def __repr__(self) -> str:
        return f"F2({self._value})"


class Field128:
    """An element of the prime field of order ``MODULUS``."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = int(value) % MODULUS

    @classmethod
    def random(cls, rng: Random | None = None) -> Field128:
        value = rng.randrange(MODULUS) if rng is not None else secrets.randbelow(MODULUS)
        return cls(value)

    @classmethod
    def zero(cls) -> Field128:
        return cls(0)

    @classmethod
    def one(cls) -> Field128:
        return cls(1)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def inverse(self) -> Field128:
        if self._value == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return Field128(pow(self._value, -1, MODULUS))

    def to_bytes(self) -> bytes:
        """Return the canonical value as 16 little-endian bytes."""
        return self._value.to_bytes(16, "little")

    def to_f2(self) -> F2:
        """Map the element to F2 by the parity of its canonical value."""
        return F2(self._value & 1)

    @staticmethod
    def _coerce(other: object) -> int | None:
        if isinstance(other, Field128):
            return other._value
        if isinstance(other, F2):
            return int(other)
        if isinstance(other, int):
            return other % MODULUS
        return None

    def __add__(self, other: object) -> Field128:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Field128(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Field128:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Field128(self._value - value)

    def __rsub__(self, other: object) -> Field128:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Field128(value - self._value)

    def __mul__(self, other: object) -> Field128:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return Field128(self._value * value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Field128:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self * Field128(value).inverse()

    def __neg__(self) -> Field128:
        return Field128(-self._value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Field128):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Field128, self._value))

    def __repr__(self) -> str:
        return f"Field128({self._value})"