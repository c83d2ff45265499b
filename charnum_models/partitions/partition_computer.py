# (C) 2024 Irreducible Inc.

from __future__ import annotations

import logging
import threading

import numpy as np

from .partition import Partition

logger = logging.getLogger(__name__)


class PartitionComputer:
    """Generates and caches the partitions of each n, and which partitions contain a given part.

    The tables grow monotonically on demand and are never evicted, so one computer can be reused across many queries.
    Extension of the tables is serialized by an internal lock; reads of already computed rows need no locking.

    :param n: extend the tables eagerly up to this n
    """

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._partitions: list[tuple[Partition, ...]] = [(Partition(),)]
        self._occurrences: list[dict[int, frozenset[Partition]]] = [{}]
        self._counts: np.ndarray | None = None
        self._lock = threading.Lock()
        self._extend(n)

    def get_partitions(self, n: int) -> tuple[Partition, ...]:
        """All partitions of n, in ascending order of their largest part."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if n >= len(self._partitions):
            self._extend(n)
        return self._partitions[n]

    def get_occurrences(self, n: int) -> dict[int, frozenset[Partition]]:
        """Maps each k to the set of partitions of n that have k as a part."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if n >= len(self._partitions):
            self._extend(n)
        return dict(self._occurrences[n])

    def _extend(self, max_n: int) -> None:
        with self._lock:
            start = len(self._partitions)
            if start > max_n:
                return
            logger.debug("extending partition tables from %d to %d", start - 1, max_n)
            for n in range(start, max_n + 1):
                row: list[Partition] = []
                occurrences: dict[int, set[Partition]] = {}
                # partitions of n with largest part exactly k, for k = 1, 2, …, n
                for k in range(1, n + 1):
                    for i in range(1, n // k + 1):
                        ks = Partition((k,) * i)
                        # rows are ordered by max, so stop at the first partition using a part ≥ k;
                        # the case of no copies of k was handled with a smaller k
                        for part in self._partitions[n - i * k]:
                            if part.max >= k:
                                break
                            extension = Partition.merge(part, ks)
                            row.append(extension)
                            for value in set(extension):
                                occurrences.setdefault(value, set()).add(extension)
                # occurrences first: a row counts as computed once it is in _partitions
                self._occurrences.append({value: frozenset(parts) for value, parts in occurrences.items()})
                self._partitions.append(tuple(row))

    def count_partitions(self, n: int) -> int:
        """The number of partitions of n, without materializing them.

        Fills the table count[m][k] of partitions of m with all parts at most k, for m, k ≤ n, by summing over the
        multiplicity of k. The table is kept and only rebuilt when a larger n is requested.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        with self._lock:
            if self._counts is None or n >= len(self._counts):
                logger.debug("building partition count table up to %d", n)
                self._counts = _count_table(n)
            return int(self._counts[n, n])

    dynamic_count_partitions = count_partitions


def _count_table(max_n: int) -> np.ndarray:
    # dtype=object keeps arbitrary precision; p(n) overflows int64 in the low 400s
    count = np.zeros((max_n + 1, max_n + 1), dtype=object)
    count[0, :] = 1
    for m in range(1, max_n + 1):
        for k in range(1, max_n + 1):
            count[m, k] = sum(count[m - i * k, k - 1] for i in range(m // k + 1))
    return count
