import numpy as np
import pytest

from q_ary_search.data_loader import prepare_sorted_array, prepare_sorted_int_array, prepare_sorted_real_array


def test_sorted_int_array():
    data = prepare_sorted_int_array(1000, 5, 15, rng=0)
    assert len(data) == 1000
    assert data == sorted(data)
    assert all(isinstance(x, int) for x in data)
    assert min(data) >= 5 and max(data) <= 15
    # Both ends of the range are reachable
    assert {5, 15} <= set(data)


def test_sorted_real_array():
    data = prepare_sorted_real_array(500, -1.0, 1.0, rng=np.random.default_rng(3))
    assert len(data) == 500
    assert data == sorted(data)
    assert all(isinstance(x, float) for x in data)
    assert all(-1.0 <= x < 1.0 for x in data)


def test_same_seed_same_array():
    assert prepare_sorted_array(100, 0, 10_000, "int", rng=7) == prepare_sorted_array(100, 0, 10_000, "int", rng=7)


def test_empty_array():
    assert prepare_sorted_array(0, 0, 10, "real") == []


def test_unknown_data_type():
    with pytest.raises(ValueError):
        prepare_sorted_array(10, 0, 10, "complex")
