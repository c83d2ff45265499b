# (C) 2024 Irreducible Inc.

from __future__ import annotations

from typing import ClassVar, Self

from galois import GF, is_prime

from .coefficient import Coefficient, CoefficientRing


class BinaryRing(CoefficientRing[int]):
    """The two-element field ℤ/2, with 0 and 1 as representation."""

    def add(self, left: int, right: int) -> int:
        return left ^ right

    def negate(self, operand: int) -> int:
        return operand

    def multiply(self, left: int, right: int) -> int:
        return left & right  # single-bit AND gate

    def inverse(self, operand: int) -> int:
        if operand == 0:
            raise ValueError("inverting zero")
        return operand

    def from_int(self, val: int) -> int:
        return int(val) & 1

    def to_int(self, elem: int) -> int:
        return elem


class PrimeRing(CoefficientRing[int]):
    """The prime field ℤ/p, with integers in [0, p) as representation."""

    def __init__(self, prime: int) -> None:
        if not is_prime(prime):
            raise ValueError(f"modulus {prime} is not prime")
        self.p = prime
        self.gf = GF(prime)

    @property
    def prime(self) -> int:
        return self.p

    def add(self, left: int, right: int) -> int:
        return (left + right) % self.p

    def negate(self, operand: int) -> int:
        return -operand % self.p

    def multiply(self, left: int, right: int) -> int:
        return int(self.gf(left) * self.gf(right))

    def inverse(self, operand: int) -> int:
        if operand == 0:
            raise ValueError("inverting zero")
        return int(self.gf(1) / self.gf(operand))

    def from_int(self, val: int) -> int:
        return int(val) % self.p

    def to_int(self, elem: int) -> int:
        return elem


class IntMod2(Coefficient[int]):
    ring: ClassVar[BinaryRing] = BinaryRing()

    def inverse(self) -> Self:
        return self.__class__(self.ring.inverse(self.value))


class IntModP(Coefficient[int]):
    """Base class for prime-field coefficients.

    Subclass once per prime and set the ring class variable, e.g.

        class IntMod3(IntModP):
            ring = PrimeRing(3)
    """

    ring: ClassVar[PrimeRing]

    def inverse(self) -> Self:
        return self.__class__(self.ring.inverse(self.value))

    def __truediv__(self, other: Self) -> Self:
        self._check(other)
        return self * other.inverse()


class IntMod3(IntModP):
    ring = PrimeRing(3)
