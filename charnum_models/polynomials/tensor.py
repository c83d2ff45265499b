# (C) 2024 Irreducible Inc.

# Given truncated polynomial rings R₁, …, Rₙ over a common coefficient ring, construct R₁ ⊗ ⋯ ⊗ Rₙ as a
# single truncated polynomial ring on the disjoint union of their generators. When the Rᵢ are cohomology rings of
# spaces Xᵢ, this is the cohomology of X₁ × ⋯ × Xₙ only if the Künneth correction (Tor) terms vanish; that is a
# contract on the caller and is not checked here.

from __future__ import annotations

from itertools import accumulate
from typing import Sequence

from .multidegree import MultiDegree
from .poly_ring import C, PolyRing, PolyRingElem


class Tensor(PolyRing[C]):
    def __init__(self, factors: Sequence[PolyRing[C]]) -> None:
        if not factors:
            raise ValueError("a tensor product needs at least one factor")
        coefficients = factors[0].coefficients
        if any(factor.coefficients is not coefficients for factor in factors):
            raise ValueError("all factors must share one coefficient type")
        super().__init__(
            coefficients,
            MultiDegree.concat(*(factor.variables for factor in factors)),
            MultiDegree.concat(*(factor.truncation for factor in factors)),
        )
        self.factors = list(factors)
        # offsets[i] is the number of generators in the factors before factor i
        self.offsets = [0, *accumulate(factor.vars for factor in factors)]

    def inject(self, p: PolyRingElem[C], i: int) -> PolyRingElem[C]:
        """Maps p ∈ Rᵢ to 1 ⊗ ⋯ ⊗ p ⊗ ⋯ ⊗ 1."""
        if not 0 <= i < len(self.factors):
            raise IndexError(f"factor index {i} out of range for {len(self.factors)} factors")
        if p.ring_id != self.factors[i].ring_id:
            raise ValueError(f"element belongs to ring {p.ring_id}, not factor {i} (ring {self.factors[i].ring_id})")
        left = self.offsets[i]
        right = self.vars - self.offsets[i + 1]
        return PolyRingElem(self, {MultiDegree.pad(d, left, right): a for d, a in p})

    def tensor(self, elems: Sequence[PolyRingElem[C]]) -> PolyRingElem[C]:
        """Returns elems[0] ⊗ ⋯ ⊗ elems[n-1]; elems[i] must belong to the i-th factor ring."""
        if len(elems) != len(self.factors):
            raise ValueError(f"expected {len(self.factors)} factors, got {len(elems)}")
        for i, p in enumerate(elems):
            if p.ring_id != self.factors[i].ring_id:
                raise ValueError(f"factor {i} belongs to ring {p.ring_id}, expected ring {self.factors[i].ring_id}")
        product = self.one()
        for i, p in enumerate(elems):
            product = self.multiply(product, self.inject(p, i))
        return product
