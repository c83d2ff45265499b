# (C) 2024 Irreducible Inc.

# A polynomial ring C[x₁, …, xₙ] modulo a degree-truncation ideal. Generator xᵢ stands for a cohomology class
# of degree variables[i], and a multidegree records cohomological degrees (so xᵢᵏ has entry k·variables[i]).
# Any monomial whose multidegree exceeds the truncation is identified with zero.

from __future__ import annotations

import itertools
from typing import Generic, Iterator, Mapping, TypeVar

from ..coefficients.coefficient import Coefficient
from .multidegree import MultiDegree

C = TypeVar("C", bound=Coefficient)

_ring_ids = itertools.count()


class PolyRingElem(Generic[C]):
    """An immutable element of a PolyRing: a sparse map from multidegrees to non-zero coefficients.

    Every element carries the id of the ring that made it. Elements of distinct rings never compare equal, even when
    the rings have the same shape.
    """

    def __init__(self, ring: PolyRing[C], terms: dict[MultiDegree, C]) -> None:
        # callers hand over ownership of `terms`
        assert all(not a.is_zero() for a in terms.values())
        self.ring = ring
        self.ring_id = ring.ring_id
        self._terms = terms

    @property
    def vars(self) -> int:
        return self.ring.vars

    @property
    def terms(self) -> dict[MultiDegree, C]:
        return dict(self._terms)

    @property
    def degree(self) -> int:
        """The highest total degree of a term; 0 for the zero element."""
        return max((d.total for d in self._terms), default=0)

    def get(self, d: MultiDegree) -> C:
        return self._terms.get(d, self.ring.coefficients.zero())

    def is_zero(self) -> bool:
        return not self._terms

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[tuple[MultiDegree, C]]:
        return iter(self._terms.items())

    def __eq__(self, other) -> bool:
        if not isinstance(other, PolyRingElem):
            return NotImplemented
        return self.ring_id == other.ring_id and self._terms == other._terms

    def __hash__(self) -> int:
        return hash((self.ring_id, frozenset(self._terms.items())))

    def __add__(self, other: PolyRingElem[C]) -> PolyRingElem[C]:
        return self.ring.add(self, other)

    def __sub__(self, other: PolyRingElem[C]) -> PolyRingElem[C]:
        return self.ring.subtract(self, other)

    def __neg__(self) -> PolyRingElem[C]:
        return self.ring.negate(self)

    def __mul__(self, other: PolyRingElem[C]) -> PolyRingElem[C]:
        return self.ring.multiply(self, other)

    def __pow__(self, exponent: int) -> PolyRingElem[C]:
        return self.ring.pow(self, exponent)

    def homogeneous_parts(self) -> dict[int, PolyRingElem[C]]:
        return self.ring.homogeneous_parts(self)

    def homogeneous_part(self, total: int) -> PolyRingElem[C]:
        return self.ring.homogeneous_part(self, total)

    def __repr__(self) -> str:
        terms = ", ".join(f"{d}: {a}" for d, a in sorted(self._terms.items(), key=lambda t: (t[0].total, t[0].degrees)))
        return f"PolyRingElem(ring={self.ring_id}, {{{terms}}})"


class PolyRing(Generic[C]):
    """A truncated multivariate polynomial ring over the coefficient type C.

    :param coefficients: the coefficient class, e.g. BigInt; used as the factory for zero and one
    :param variables: the intrinsic degree of each generator
    :param truncation: the per-generator degree ceiling
    """

    def __init__(self, coefficients: type[C], variables: MultiDegree, truncation: MultiDegree) -> None:
        if variables.vars != truncation.vars:
            raise ValueError(f"variables and truncation have different arity: {variables.vars} != {truncation.vars}")
        self.coefficients = coefficients
        self.variables = variables
        self.truncation = truncation
        self.ring_id = next(_ring_ids)

    @classmethod
    def truncated(cls, coefficients: type[C], truncation: MultiDegree) -> PolyRing[C]:
        """A ring whose generators all have degree 1."""
        return cls(coefficients, MultiDegree.ones(truncation.vars), truncation)

    @classmethod
    def free(cls, coefficients: type[C], vars: int) -> PolyRing[C]:
        """A ring of degree-1 generators with no truncation."""
        return cls(coefficients, MultiDegree.ones(vars), MultiDegree.unbounded(vars))

    @property
    def vars(self) -> int:
        return self.variables.vars

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.coefficients.__name__}, variables={self.variables}, "
            f"truncation={self.truncation}, id={self.ring_id})"
        )

    def _check(self, *elems: PolyRingElem[C]) -> None:
        for p in elems:
            if p.vars != self.vars:
                raise ValueError(f"element has {p.vars} variables, ring has {self.vars}")
            if p.ring_id != self.ring_id:
                raise ValueError(f"element belongs to ring {p.ring_id}, not ring {self.ring_id}")

    def zero(self) -> PolyRingElem[C]:
        return PolyRingElem(self, {})

    def one(self) -> PolyRingElem[C]:
        return PolyRingElem(self, {MultiDegree.zeros(self.vars): self.coefficients.one()})

    def scalar(self, a: C) -> PolyRingElem[C]:
        return self.make_element(MultiDegree.zeros(self.vars), a)

    def generator(self, i: int) -> PolyRingElem[C]:
        """The generator xᵢ, of multidegree variables[i] in coordinate i."""
        d = MultiDegree.zeros(self.vars).with_entry(i, self.variables.get(i))
        return self.make_element(d, self.coefficients.one())

    def make_element(self, d: MultiDegree, a: C) -> PolyRingElem[C]:
        """The monomial a·xᵈ.

        Raises ValueError if d is not a realizable multidegree, i.e. if the generator degrees do not divide it.
        """
        if not isinstance(a, self.coefficients):
            raise TypeError(f"expected a {self.coefficients.__name__} coefficient, got {type(a).__name__}")
        if not self.variables.divides(d):
            raise ValueError(f"{d} is not a multiple of the generator degrees {self.variables}")
        if a.is_zero() or d.exceeds(self.truncation):
            return self.zero()
        return PolyRingElem(self, {d: a})

    def from_terms(self, terms: Mapping[MultiDegree, C]) -> PolyRingElem[C]:
        result = self.zero()
        for d, a in terms.items():
            result = self.add(result, self.make_element(d, a))
        return result

    def add(self, p: PolyRingElem[C], q: PolyRingElem[C]) -> PolyRingElem[C]:
        self._check(p, q)
        terms = dict(p._terms)
        for d, a in q._terms.items():
            _accumulate(terms, d, a)
        return PolyRingElem(self, terms)

    def negate(self, p: PolyRingElem[C]) -> PolyRingElem[C]:
        self._check(p)
        return PolyRingElem(self, {d: -a for d, a in p._terms.items()})

    def subtract(self, p: PolyRingElem[C], q: PolyRingElem[C]) -> PolyRingElem[C]:
        return self.add(p, self.negate(q))

    def multiply(self, p: PolyRingElem[C], q: PolyRingElem[C]) -> PolyRingElem[C]:
        """The truncated product: terms whose multidegree exceeds the truncation are discarded."""
        self._check(p, q)
        terms: dict[MultiDegree, C] = {}
        for d_q, a_q in q._terms.items():
            for d_p, a_p in p._terms.items():
                d = d_p + d_q
                if d.exceeds(self.truncation):
                    continue
                a = a_p * a_q
                if a.is_zero():
                    continue
                _accumulate(terms, d, a)
        return PolyRingElem(self, terms)

    def pow(self, base: PolyRingElem[C], exponent: int) -> PolyRingElem[C]:
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        self._check(base)
        acc = self.one()
        val = base

        while exponent:
            if exponent % 2:
                acc = self.multiply(acc, val)
            val = self.multiply(val, val)
            exponent >>= 1

        return acc

    def homogeneous_parts(self, p: PolyRingElem[C]) -> dict[int, PolyRingElem[C]]:
        """Groups the terms of p by total degree, in ascending order of degree."""
        self._check(p)
        parts: dict[int, dict[MultiDegree, C]] = {}
        for d in sorted(p._terms, key=lambda d: d.total):
            parts.setdefault(d.total, {})[d] = p._terms[d]
        return {total: PolyRingElem(self, terms) for total, terms in parts.items()}

    def homogeneous_part(self, p: PolyRingElem[C], total: int) -> PolyRingElem[C]:
        self._check(p)
        return PolyRingElem(self, {d: a for d, a in p._terms.items() if d.total == total})


def _accumulate(terms: dict[MultiDegree, C], d: MultiDegree, a: C) -> None:
    b = terms.get(d)
    if b is None:
        terms[d] = a
        return
    total = a + b
    if total.is_zero():
        del terms[d]
    else:
        terms[d] = total
