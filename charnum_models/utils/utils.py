# (C) 2024 Irreducible Inc.

from typing import Sequence, TypeVar

T = TypeVar("T", int, float)


def bits_mask(n_bits: int) -> int:
    """Returns a mask for the least-significant bits.

    For example, bits_mask(4) returns 0x0f and bits_mask(9) returns 0x01ff.

    :param n_bits: the number of bits which will be 1.
    """
    return (1 << n_bits) - 1


def merge_sorted(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merges two ascending sequences into one ascending list, keeping repeated values."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def is_multiple(divisor: int, dividend: int) -> bool:
    """Returns whether dividend is an integer multiple of divisor. Zero divides only zero."""
    if divisor == 0:
        return dividend == 0
    return dividend % divisor == 0
