# (C) 2024 Irreducible Inc.

from __future__ import annotations

from functools import total_ordering
from typing import Iterable, Iterator

from ..utils.utils import merge_sorted


@total_ordering
class Partition:
    """A partition of n: a multiset of positive integers summing to n, stored in ascending order.

    Partitions are immutable; the empty partition is the unique partition of 0. New partitions are made from old ones
    with merge and scale. Hash, sum and max are computed once at construction since partitions are used heavily as
    dictionary keys.
    """

    __slots__ = ("_numbers", "_sum", "_max", "_hash")

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        numbers = tuple(sorted(int(k) for k in numbers))
        if numbers and numbers[0] <= 0:
            raise ValueError(f"partition entries must be positive: {list(numbers)}")
        self._numbers = numbers
        self._sum = sum(numbers)
        self._max = numbers[-1] if numbers else 0
        self._hash = hash(numbers)

    @property
    def numbers(self) -> list[int]:
        return list(self._numbers)

    @property
    def sum(self) -> int:
        return self._sum

    @property
    def max(self) -> int:
        return self._max

    def __len__(self) -> int:
        return len(self._numbers)

    def __iter__(self) -> Iterator[int]:
        return iter(self._numbers)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._numbers == other._numbers

    def __lt__(self, other: Partition) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._numbers < other._numbers

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return str(list(self._numbers))

    def __repr__(self) -> str:
        return f"Partition({list(self._numbers)})"

    @staticmethod
    def merge(p: Partition, q: Partition) -> Partition:
        """The partition of p.sum + q.sum whose parts are those of p together with those of q."""
        # linear time: sorting an already ascending sequence is a single pass
        return Partition(merge_sorted(p._numbers, q._numbers))

    @staticmethod
    def scale(p: Partition, s: int) -> Partition:
        """The partition of s·p.sum whose parts are those of p multiplied by s."""
        if s <= 0:
            raise ValueError(f"scale factor must be positive, got {s}")
        return Partition(k * s for k in p._numbers)
