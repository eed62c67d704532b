import bisect
import operator

import numpy as np
import pytest

from q_ary_search import searches
from q_ary_search.parameters import SUPPORTED_ARITIES, QArySearchParameters
from q_ary_search.searches import (
    Q_ARY_SEARCHES, q_ary_contains, q_ary_lower_bound, q_ary_upper_bound,
    reference_contains, reference_lower_bound, reference_upper_bound,
)

ORDINARY = [2, 4, 6, 7, 12, 13, 16, 19, 23, 24, 27, 32, 36]
FRAGMENTED = [3, 3, 3, 7, 7, 7, 7, 12, 12, 16, 16, 16, 16]
CONSTANT = [4] * 9

# (lower_bound, upper_bound, contains) of every arity, plus bisect
BOUNDARY_FUNCTIONS = [
    pytest.param(family.lower_bound, family.upper_bound, family.contains, id=family.name)
    for family in Q_ARY_SEARCHES.values()
] + [pytest.param(reference_lower_bound, reference_upper_bound, reference_contains, id="bisect")]


@pytest.mark.parametrize("lower_bound, upper_bound, contains", BOUNDARY_FUNCTIONS)
def test_ordinary_sequence(lower_bound, upper_bound, contains):
    assert lower_bound(ORDINARY, 19) == 7
    assert lower_bound(ORDINARY, 20) == 8
    assert lower_bound(ORDINARY, 42) == 13
    assert lower_bound(ORDINARY, 1) == 0
    assert upper_bound(ORDINARY, 19) == 8
    assert upper_bound(ORDINARY, 36) == 13
    assert contains(ORDINARY, 19)
    assert not contains(ORDINARY, 20)
    assert not contains(ORDINARY, 42)
    assert not contains(ORDINARY, 1)


@pytest.mark.parametrize("lower_bound, upper_bound, contains", BOUNDARY_FUNCTIONS)
def test_tie_runs(lower_bound, upper_bound, contains):
    assert lower_bound(FRAGMENTED, 8) == 7
    assert lower_bound(FRAGMENTED, 15) == 9
    assert lower_bound(FRAGMENTED, 2) == 0
    assert lower_bound(FRAGMENTED, 20) == 13
    assert lower_bound(FRAGMENTED, 7) == 3
    assert upper_bound(FRAGMENTED, 7) == 7
    assert upper_bound(FRAGMENTED, 16) == 13
    assert upper_bound(FRAGMENTED, 3) == 3
    assert contains(FRAGMENTED, 12)
    assert not contains(FRAGMENTED, 8)


@pytest.mark.parametrize("lower_bound, upper_bound, contains", BOUNDARY_FUNCTIONS)
def test_constant_sequence(lower_bound, upper_bound, contains):
    assert lower_bound(CONSTANT, 4) == 0
    assert lower_bound(CONSTANT, 5) == 9
    assert upper_bound(CONSTANT, 4) == 9
    assert upper_bound(CONSTANT, 3) == 0
    assert contains(CONSTANT, 4)
    assert not contains(CONSTANT, 5)


@pytest.mark.parametrize("lower_bound, upper_bound, contains", BOUNDARY_FUNCTIONS)
def test_empty_sequence(lower_bound, upper_bound, contains):
    assert lower_bound([], 6) == 0
    assert upper_bound([], 12) == 0
    assert not contains([], 6)


@pytest.mark.parametrize("lower_bound, upper_bound, contains", BOUNDARY_FUNCTIONS)
def test_window_arguments(lower_bound, upper_bound, contains):
    assert lower_bound(ORDINARY, 19, 2, 6) == 6
    assert upper_bound(ORDINARY, 6, 2, 6) == 3
    # 19 lives at position 7, outside of the window
    assert not contains(ORDINARY, 19, 0, 7)
    assert contains(ORDINARY, 19, 7, 8)


@pytest.mark.parametrize("arity", SUPPORTED_ARITIES)
def test_agreement_with_bisect_on_random_arrays(arity):
    rng = np.random.default_rng(arity)
    for _ in range(1000):
        length = int(rng.integers(0, 500, endpoint=True))
        data = sorted(rng.integers(0, 100, size=length).tolist())
        for query in rng.integers(-5, 105, size=3).tolist():
            p = q_ary_lower_bound(data, query, arity)
            assert p == bisect.bisect_left(data, query)
            assert q_ary_upper_bound(data, query, arity) == bisect.bisect_right(data, query)
            assert q_ary_contains(data, query, arity) == (query in data)
            # Boundary correctness
            assert all(x < query for x in data[:p])
            assert all(not x < query for x in data[p:])


@pytest.mark.parametrize("arity", SUPPORTED_ARITIES)
def test_real_values(arity):
    rng = np.random.default_rng(100 + arity)
    data = np.sort(rng.uniform(0.0, 1.0, size=777)).tolist()
    for query in rng.uniform(-0.1, 1.1, size=200).tolist() + data[::50]:
        assert q_ary_lower_bound(data, query, arity) == bisect.bisect_left(data, query)
        assert q_ary_upper_bound(data, query, arity) == bisect.bisect_right(data, query)


@pytest.mark.parametrize("arity", SUPPORTED_ARITIES)
def test_explicit_parameters(arity):
    data = list(range(0, 300, 3))
    parameters = QArySearchParameters(arity, arity)
    for query in (-1, 0, 1, 150, 151, 297, 298):
        assert q_ary_lower_bound(data, query, arity, parameters=parameters) == bisect.bisect_left(data, query)
        assert q_ary_upper_bound(data, query, arity, parameters=parameters) == bisect.bisect_right(data, query)


def test_named_entry_points():
    assert searches.binary_lower_bound(ORDINARY, 19) == 7
    assert searches.ternary_upper_bound(FRAGMENTED, 7) == 7
    assert searches.quaternary_contains(CONSTANT, 4)
    assert searches.quinary_search(ORDINARY, 20, operator.lt) == 8
    assert searches.senary_search(FRAGMENTED, 7, operator.le, 0, 13) == 7
    assert searches.senary_lower_bound.__name__ == "senary_lower_bound"


def test_families_are_bound_to_their_arity():
    for arity, family in Q_ARY_SEARCHES.items():
        assert family.arity == arity
        assert family.lower_bound.__name__ == f"{family.name}_lower_bound"
