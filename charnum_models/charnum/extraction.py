# (C) 2024 Irreducible Inc.

# Characteristic numbers of a closed manifold M. Let w = 1 + w₁ + w₂ + ⋯ be a total characteristic class of M
# living in (a truncated polynomial model of) its cohomology ring, with wⱼ in degree scale·j. For every partition
# π = (i₁, …, iₖ) of n = dim(M) / scale, the product w_{i₁} ⋯ w_{iₖ} is a top-degree class, and its coefficient
# at the fundamental class μ is the characteristic number w_π[M].

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Mapping

from ..coefficients.coefficient import Coefficient
from ..coefficients.modular import IntMod2
from ..partitions.partition import Partition
from ..partitions.partition_computer import PartitionComputer
from ..polynomials.multidegree import MultiDegree
from ..polynomials.poly_ring import C, PolyRing, PolyRingElem

logger = logging.getLogger(__name__)


class Grading(IntEnum):
    """The degree step between consecutive components of a total characteristic class."""

    STIEFEL_WHITNEY = 1
    CHERN = 2
    PONTRYAGIN = 4


def characteristic_numbers(
    ring: PolyRing[C],
    char_class: PolyRingElem[C],
    mu: MultiDegree,
    scale: int,
    partitions: PartitionComputer | None = None,
) -> dict[Partition, C]:
    """Computes the characteristic numbers of a total characteristic class.

    :param ring: the cohomology model the class lives in
    :param char_class: the total class 1 + c₁ + c₂ + ⋯
    :param mu: the multidegree of the fundamental class; mu.total is the dimension of the manifold
    :param scale: 1, 2 or 4 for Stiefel-Whitney, Chern or Pontryagin type classes
    :param partitions: a PartitionComputer to reuse; a fresh one is made if omitted
    :returns: the non-zero numbers, keyed by partition of mu.total // scale
    """
    if not isinstance(scale, int) or scale not in set(Grading):
        raise ValueError(f"scale must be one of {[g.value for g in Grading]}, got {scale}")
    if mu.vars != ring.vars:
        raise ValueError(f"fundamental class has {mu.vars} variables, ring has {ring.vars}")
    if char_class.ring_id != ring.ring_id:
        raise ValueError("characteristic class does not belong to the given ring")
    if mu.total % scale != 0:
        raise ValueError(f"dimension {mu.total} is not a multiple of {scale}")
    if partitions is None:
        partitions = PartitionComputer()

    n = mu.total // scale
    parts = ring.homogeneous_parts(char_class)
    graded = [parts.get(scale * j, ring.zero()) for j in range(n + 1)]

    row = partitions.get_partitions(n)
    numbers: dict[Partition, C] = {}
    for partition in row:
        product = ring.one()
        for i in partition:
            product = ring.multiply(product, graded[i])
        number = product.get(mu)
        if not number.is_zero():
            numbers[partition] = number
    logger.debug("dimension %d, scale %d: %d of %d numbers non-zero", mu.total, scale, len(numbers), len(row))
    return numbers


def stiefel_whitney_from_chern(chern_numbers: Mapping[Partition, Coefficient]) -> dict[Partition, IntMod2]:
    """Stiefel-Whitney numbers of a complex manifold from its Chern numbers.

    The total Stiefel-Whitney class is the mod 2 reduction of the total Chern class with degrees doubled, so
    w_{2π}[M] = c_π[M] mod 2, and every Stiefel-Whitney number indexed by a partition with an odd part vanishes.
    """
    sw_numbers: dict[Partition, IntMod2] = {}
    for partition, number in chern_numbers.items():
        reduced = IntMod2.convert_from(number)
        if not reduced.is_zero():
            sw_numbers[Partition.scale(partition, 2)] = reduced
    return sw_numbers


class CharacteristicNumberComputer:
    """Computes characteristic numbers, sharing one partition cache across all queries."""

    def __init__(self, partitions: PartitionComputer | None = None) -> None:
        self.partitions = partitions if partitions is not None else PartitionComputer()

    def compute(
        self, ring: PolyRing[C], char_class: PolyRingElem[C], mu: MultiDegree, scale: int
    ) -> dict[Partition, C]:
        return characteristic_numbers(ring, char_class, mu, scale, self.partitions)

    def stiefel_whitney_numbers(
        self, ring: PolyRing[C], char_class: PolyRingElem[C], mu: MultiDegree
    ) -> dict[Partition, C]:
        return self.compute(ring, char_class, mu, Grading.STIEFEL_WHITNEY)

    def chern_numbers(self, ring: PolyRing[C], char_class: PolyRingElem[C], mu: MultiDegree) -> dict[Partition, C]:
        return self.compute(ring, char_class, mu, Grading.CHERN)

    def pontryagin_numbers(
        self, ring: PolyRing[C], char_class: PolyRingElem[C], mu: MultiDegree
    ) -> dict[Partition, C]:
        return self.compute(ring, char_class, mu, Grading.PONTRYAGIN)
