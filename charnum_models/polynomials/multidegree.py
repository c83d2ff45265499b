# (C) 2024 Irreducible Inc.

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Iterator

from ..utils.utils import is_multiple

# Sentinel entry for a generator with no degree ceiling.
UNBOUNDED = (1 << 63) - 1


@dataclass(frozen=True)
class MultiDegree:
    """A tuple of non-negative exponents, one per generator of a polynomial ring.

    MultiDegrees are immutable. Every operation returns a new MultiDegree; the arity (`vars`) of an instance never
    changes. Equality and hashing are by value.
    """

    degrees: tuple[int, ...]

    def __init__(self, degrees: Iterable[int] = ()) -> None:
        degrees = tuple(int(d) for d in degrees)
        if any(d < 0 for d in degrees):
            raise ValueError(f"degrees must be non-negative: {list(degrees)}")
        object.__setattr__(self, "degrees", degrees)
        object.__setattr__(self, "_hash", hash(degrees))  # memoized for term-map lookups

    def __hash__(self) -> int:
        return self._hash

    @property
    def vars(self) -> int:
        return len(self.degrees)

    @cached_property
    def total(self) -> int:
        return sum(self.degrees)

    def get(self, i: int) -> int:
        if not 0 <= i < self.vars:
            raise IndexError(f"variable index {i} out of range for {self.vars} variables")
        return self.degrees[i]

    def __getitem__(self, i: int) -> int:
        return self.get(i)

    def __len__(self) -> int:
        return self.vars

    def __iter__(self) -> Iterator[int]:
        return iter(self.degrees)

    def __str__(self) -> str:
        return str(list(self.degrees))

    def __repr__(self) -> str:
        return f"MultiDegree({list(self.degrees)})"

    def __add__(self, other: MultiDegree) -> MultiDegree:
        return MultiDegree.add(self, other)

    def _check_arity(self, other: MultiDegree) -> None:
        if self.vars != other.vars:
            raise ValueError(f"arity mismatch: {self.vars} != {other.vars}")

    def exceeds(self, trunc: MultiDegree) -> bool:
        """Returns whether any entry is strictly greater than the corresponding entry of trunc."""
        self._check_arity(trunc)
        return any(d > t for d, t in zip(self.degrees, trunc.degrees))

    def divides(self, other: MultiDegree) -> bool:
        """Returns whether every entry of other is an integer multiple of the corresponding entry of self.

        A zero entry divides only a zero entry.
        """
        self._check_arity(other)
        return all(is_multiple(d, e) for d, e in zip(self.degrees, other.degrees))

    def is_bounded(self) -> bool:
        return UNBOUNDED not in self.degrees

    def raised(self) -> MultiDegree:
        return MultiDegree(d + 1 for d in self.degrees)

    def lowered(self) -> MultiDegree:
        return MultiDegree(d - 1 for d in self.degrees)

    def with_entry(self, i: int, value: int) -> MultiDegree:
        self.get(i)  # bounds check
        return MultiDegree(self.degrees[:i] + (value,) + self.degrees[i + 1 :])

    def incremented(self, i: int) -> MultiDegree:
        return self.with_entry(i, self.get(i) + 1)

    def resized(self, vars: int) -> MultiDegree:
        """Truncates, or extends with zeros, to the given number of variables."""
        if vars < 0:
            raise ValueError("number of variables must be non-negative")
        return MultiDegree(self.degrees[:vars] + (0,) * (vars - self.vars))

    def zeroed(self) -> MultiDegree:
        return MultiDegree.zeros(self.vars)

    @staticmethod
    def filled(vars: int, value: int) -> MultiDegree:
        if vars < 0:
            raise ValueError("number of variables must be non-negative")
        return MultiDegree((value,) * vars)

    @staticmethod
    def zeros(vars: int) -> MultiDegree:
        return MultiDegree.filled(vars, 0)

    @staticmethod
    def ones(vars: int) -> MultiDegree:
        return MultiDegree.filled(vars, 1)

    @staticmethod
    def unbounded(vars: int) -> MultiDegree:
        return MultiDegree.filled(vars, UNBOUNDED)

    @staticmethod
    def concat(*parts: MultiDegree) -> MultiDegree:
        return MultiDegree(d for part in parts for d in part.degrees)

    @staticmethod
    def pad(d: MultiDegree, left: int, right: int) -> MultiDegree:
        """Prepends `left` zeros and appends `right` zeros."""
        if left < 0 or right < 0:
            raise ValueError("padding must be non-negative")
        return MultiDegree.concat(MultiDegree.zeros(left), d, MultiDegree.zeros(right))

    @staticmethod
    def add(d: MultiDegree, e: MultiDegree) -> MultiDegree:
        d._check_arity(e)
        return MultiDegree(a + b for a, b in zip(d.degrees, e.degrees))
