# (C) 2024 Irreducible Inc.

from hypothesis import strategies as st

from charnum_models.coefficients.coefficient import Coefficient
from charnum_models.polynomials.multidegree import MultiDegree
from charnum_models.polynomials.poly_ring import PolyRing, PolyRingElem


def random_integers_strategy(
    min_value: int,
    max_value: int,
) -> st.SearchStrategy[int]:
    return st.builds(lambda rng: rng.randint(min_value, max_value), st.randoms(use_true_random=True))


def multidegrees(vars: int, max_entry: int = 8) -> st.SearchStrategy[MultiDegree]:
    return st.lists(st.integers(0, max_entry), min_size=vars, max_size=vars).map(MultiDegree)


def elements(ring: PolyRing, max_terms: int = 6, max_coefficient: int = 20) -> st.SearchStrategy[PolyRingElem]:
    """Random elements of a bounded ring with small integer coefficients."""
    assert ring.truncation.is_bounded()
    coefficients: type[Coefficient] = ring.coefficients

    def monomial_degrees() -> st.SearchStrategy[MultiDegree]:
        return st.tuples(
            *(st.integers(0, t // v) for v, t in zip(ring.variables, ring.truncation))
        ).map(lambda exponents: MultiDegree(e * v for e, v in zip(exponents, ring.variables)))

    return st.dictionaries(
        monomial_degrees(),
        st.integers(-max_coefficient, max_coefficient).map(coefficients.from_int),
        max_size=max_terms,
    ).map(ring.from_terms)
