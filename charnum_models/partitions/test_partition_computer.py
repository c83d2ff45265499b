# (C) 2024 Irreducible Inc.

import threading

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from charnum_models.partitions.partition import Partition
from charnum_models.partitions.partition_computer import PartitionComputer
from charnum_models.tests.helpers import random_integers_strategy

# OEIS A000041
PARTITION_COUNTS = [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42, 56, 77, 101, 135, 176, 231]


def test_get_partitions() -> None:
    pc = PartitionComputer()
    assert len(pc.get_partitions(0)) == 1
    assert len(pc.get_partitions(1)) == 1
    assert len(pc.get_partitions(6)) == 11
    assert len(pc.get_partitions(12)) == 77


def test_partitions_of_four() -> None:
    pc = PartitionComputer()
    assert set(pc.get_partitions(4)) == {
        Partition([4]),
        Partition([1, 3]),
        Partition([2, 2]),
        Partition([1, 1, 2]),
        Partition([1, 1, 1, 1]),
    }
    assert pc.get_partitions(0) == (Partition(),)


@pytest.mark.parametrize("n", range(len(PARTITION_COUNTS)))
def test_partitions_are_distinct_and_valid(n: int) -> None:
    pc = PartitionComputer()
    row = pc.get_partitions(n)
    assert len(row) == PARTITION_COUNTS[n]
    assert len(set(row)) == len(row)
    assert all(p.sum == n for p in row)
    assert [p.max for p in row] == sorted(p.max for p in row)


def test_eager_extension() -> None:
    pc = PartitionComputer(12)
    assert len(pc.get_partitions(12)) == 77
    with pytest.raises(ValueError):
        PartitionComputer(-1)
    with pytest.raises(ValueError):
        pc.get_partitions(-1)


def test_rows_are_cached() -> None:
    pc = PartitionComputer()
    assert pc.get_partitions(8) is pc.get_partitions(8)
    pc.get_partitions(10)
    assert len(pc.get_partitions(8)) == 22


def test_get_occurrences() -> None:
    pc = PartitionComputer(12)
    occ6 = pc.get_occurrences(6)
    assert len(occ6[4]) == 2
    assert occ6[4] == {Partition([2, 4]), Partition([1, 1, 4])}
    assert occ6[6] == {Partition([6])}
    assert len(occ6[1]) == PARTITION_COUNTS[5]
    assert pc.get_occurrences(0) == {}


@pytest.mark.parametrize_hypothesis(
    slow=(
        settings(deadline=None),
        given(n=st.integers(0, 14)),
    ),
    fast=(
        settings(deadline=None, max_examples=1),
        given(n=random_integers_strategy(0, 14)),
    ),
)
def test_occurrences_match_partitions(n: int) -> None:
    pc = PartitionComputer()
    occurrences = pc.get_occurrences(n)
    for p in pc.get_partitions(n):
        for k in p:
            assert p in occurrences[k]
    for k, containing in occurrences.items():
        assert all(k in p.numbers for p in containing)


def test_count_partitions() -> None:
    pc = PartitionComputer()
    assert pc.dynamic_count_partitions(100) == 190569292
    assert [pc.count_partitions(n) for n in range(len(PARTITION_COUNTS))] == PARTITION_COUNTS
    with pytest.raises(ValueError):
        pc.count_partitions(-1)


def test_count_partitions_is_arbitrary_precision() -> None:
    pc = PartitionComputer()
    assert pc.count_partitions(500) == 2300165032574323995027


def test_counts_agree_with_generation() -> None:
    pc = PartitionComputer()
    assert all(len(pc.get_partitions(n)) == pc.count_partitions(n) for n in range(20))


def test_concurrent_extension() -> None:
    pc = PartitionComputer()
    threads = [threading.Thread(target=pc.get_partitions, args=(15,)) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(pc.get_partitions(15)) == PARTITION_COUNTS[15]
    assert len(pc.get_partitions(14)) == PARTITION_COUNTS[14]


def test_occurrences_readable_during_extension() -> None:
    pc = PartitionComputer()
    extender = threading.Thread(target=pc.get_partitions, args=(35,))
    errors: list[tuple[int, Exception]] = []
    extender.start()
    while extender.is_alive():
        n = len(pc._partitions) - 1
        try:
            occurrences = pc.get_occurrences(n)
            assert all(p.sum == n for containing in occurrences.values() for p in containing)
        except (IndexError, AssertionError) as e:
            errors.append((n, e))
    extender.join()
    assert errors == []
    assert len(pc.get_occurrences(35)[35]) == 1
