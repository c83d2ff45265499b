# (C) 2024 Irreducible Inc.

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, Self, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Coefficient(Generic[R]):
    """An element of a commutative coefficient ring.

    This class cannot be instantiated directly. Each concrete ring subclasses it and sets the ring class variable
    to an instance of CoefficientRing. The subclass itself then serves as the canonical factory for the ring, so
    generic code holding only the type can materialize zero, one and the image of any integer.
    """

    value: R
    ring: ClassVar[CoefficientRing]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.ring.from_int(self.value))

    def _check(self, other: Coefficient) -> None:
        if type(other) is not type(self):
            raise TypeError(f"cannot combine {type(self).__name__} with {type(other).__name__}")

    def __add__(self, other: Self) -> Self:
        self._check(other)
        return self.__class__(self.ring.add(self.value, other.value))

    def __mul__(self, other: Self) -> Self:
        self._check(other)
        return self.__class__(self.ring.multiply(self.value, other.value))

    def __sub__(self, other: Self) -> Self:
        self._check(other)
        return self.__class__(self.ring.add(self.value, self.ring.negate(other.value)))

    def __neg__(self) -> Self:
        return self.__class__(self.ring.negate(self.value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coefficient):
            return NotImplemented
        return type(other) is type(self) and bool(self.value == other.value)

    def __str__(self) -> str:
        return self.ring.format_str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ring.format_repr(self.value)})"

    def is_zero(self) -> bool:
        return self.ring.is_zero(self.value)

    def is_one(self) -> bool:
        return bool(self.value == self.ring.one())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def to_int(self) -> int:
        return self.ring.to_int(self.value)

    def __int__(self) -> int:
        return self.to_int()

    @classmethod
    def convert_from(cls, elem: Coefficient) -> Self:
        """Maps a coefficient of another ring through its integer lift, e.g. reduction of an integer mod 2."""
        return cls.from_int(elem.to_int())

    @classmethod
    def zero(cls) -> Self:
        return cls(cls.ring.zero())

    @classmethod
    def one(cls) -> Self:
        return cls(cls.ring.one())

    @classmethod
    def from_int(cls, val: int) -> Self:
        return cls(cls.ring.from_int(val))


class CoefficientRing(ABC, Generic[R]):
    """A commutative ring with unit, acting on raw representations of type R.

    An instance of CoefficientRing encapsulates the representation of ring elements and the logic of the basic
    ring operations. The unique ring homomorphism from the integers is from_int; every representation it returns is
    canonical, so equality of representations is equality of ring elements.
    """

    def zero(self) -> R:
        return self.from_int(0)

    def one(self) -> R:
        return self.from_int(1)

    def is_zero(self, operand: R) -> bool:
        return bool(operand == self.zero())

    @abstractmethod
    def add(self, left: R, right: R) -> R:
        pass

    @abstractmethod
    def negate(self, operand: R) -> R:
        pass

    @abstractmethod
    def multiply(self, left: R, right: R) -> R:
        pass

    @abstractmethod
    def from_int(self, val: int) -> R:
        """Creates a ring element from an integer."""
        pass

    @abstractmethod
    def to_int(self, elem: R) -> int:
        """Returns the canonical integer lift of an element."""
        pass

    def format_str(self, elem: R) -> str:
        return str(self.to_int(elem))

    def format_repr(self, elem: R) -> str:
        return str(self.to_int(elem))
