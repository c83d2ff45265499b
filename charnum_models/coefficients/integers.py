# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import ClassVar, Self

import numpy as np

from ..utils.utils import bits_mask
from .coefficient import Coefficient, CoefficientRing


class IntegerRing(CoefficientRing[int]):
    """The integers, with Python's arbitrary-precision int as representation."""

    def add(self, left: int, right: int) -> int:
        return left + right

    def negate(self, operand: int) -> int:
        return -operand

    def multiply(self, left: int, right: int) -> int:
        return left * right

    def mod(self, left: int, right: int) -> int:
        if right == 0:
            raise ZeroDivisionError("modulus by zero")
        return left % right

    def from_int(self, val: int) -> int:
        return int(val)

    def to_int(self, elem: int) -> int:
        return elem


class FixedWidthIntegerRing(CoefficientRing[np.signedinteger]):
    """The integers modulo 2ⁿ, represented as a signed numpy scalar of width n.

    Arithmetic wraps around on overflow like machine integers; the representation is always the two's-complement
    value in [-2ⁿ⁻¹, 2ⁿ⁻¹).
    """

    def __init__(self, dtype: type[np.signedinteger] = np.int64) -> None:
        self.dtype = np.dtype(dtype)
        assert np.issubdtype(self.dtype, np.signedinteger)
        self.bits = np.iinfo(self.dtype).bits

    def _wrap(self, val: int) -> np.signedinteger:
        half = 1 << (self.bits - 1)
        return self.dtype.type(((val + half) & bits_mask(self.bits)) - half)

    def add(self, left: np.signedinteger, right: np.signedinteger) -> np.signedinteger:
        return self._wrap(int(left) + int(right))

    def negate(self, operand: np.signedinteger) -> np.signedinteger:
        return self._wrap(-int(operand))

    def multiply(self, left: np.signedinteger, right: np.signedinteger) -> np.signedinteger:
        return self._wrap(int(left) * int(right))

    def mod(self, left: np.signedinteger, right: np.signedinteger) -> np.signedinteger:
        # truncated division: the remainder takes the sign of the dividend
        if right == 0:
            raise ZeroDivisionError("modulus by zero")
        return self._wrap(int(np.fmod(left, right)))

    def from_int(self, val: int) -> np.signedinteger:
        return self._wrap(int(val))

    def to_int(self, elem: np.signedinteger) -> int:
        return int(elem)


class BigInt(Coefficient[int]):
    ring: ClassVar[IntegerRing] = IntegerRing()

    def __mod__(self, other: Self) -> Self:
        self._check(other)
        return self.__class__(self.ring.mod(self.value, other.value))


class Int(Coefficient[np.signedinteger]):
    ring: ClassVar[FixedWidthIntegerRing] = FixedWidthIntegerRing(np.int64)

    def __mod__(self, other: Self) -> Self:
        self._check(other)
        return self.__class__(self.ring.mod(self.value, other.value))
