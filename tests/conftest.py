import pytest

from q_ary_search.parameters import reset_search_parameters


@pytest.fixture(autouse=True)
def default_thresholds():
    """Every test starts and ends with the default thresholds."""
    reset_search_parameters()
    yield
    reset_search_parameters()
