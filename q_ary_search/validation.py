# --- Correctness Checks for Search Functions ---

import numpy as np

from .searches import (
    QArySearchFamily, reference_contains, reference_lower_bound, reference_upper_bound,
)


class SearchValidationError(AssertionError):
    """Raised when a search function returns a different position than expected."""
    def __init__(self, name: str, query, expected, actual, data=None):
        self.name = name
        self.query = query
        self.expected = expected
        self.actual = actual
        self.data = data
        message = f"{name}: query {query!r} returned {actual!r}, expected {expected!r}"
        if data is not None and len(data) <= 20:
            message += f" on {list(data)!r}"
        super().__init__(message)


# (description, sorted data, [(query, expected lower bound position), ...])
SORTED_INT_FIXTURES = [
    (
        "ordinary sequence",
        [2, 4, 6, 7, 12, 13, 16, 19, 23, 24, 27, 32, 36],
        [(19, 7), (36, 12), (6, 2), (20, 8), (8, 4), (1, 0), (42, 13)],
    ),
    (
        "fragmented sequence",
        [3, 3, 3, 7, 7, 7, 7, 12, 12, 16, 16, 16, 16],
        [(7, 3), (8, 7), (2, 0), (20, 13), (15, 9)],
    ),
    (
        "constant sequence",
        [4, 4, 4, 4, 4, 4, 4, 4, 4],
        [(4, 0), (5, 9)],
    ),
    (
        "empty sequence",
        [],
        [(6, 0), (12, 0)],
    ),
]


def validate_search_on_sorted_int_array(name: str, search_f):
    """
    Runs the canned fixtures through a lower bound function taking (data, query).
    Returns the number of checked queries, raises SearchValidationError on the first mismatch.
    """
    checked = 0
    for description, data, cases in SORTED_INT_FIXTURES:
        for query, expected in cases:
            result = search_f(data, query)
            if result != expected:
                raise SearchValidationError(f"{name} ({description})", query, expected, result, data)
            checked += 1
    return checked


def random_sorted_array(rng: np.random.Generator, max_length: int = 500, max_value: int = 1000) -> list[int]:
    """A sorted integer array of random length in [0, max_length], with plenty of ties."""
    length = int(rng.integers(0, max_length, endpoint=True))
    return np.sort(rng.integers(0, max_value, size=length, endpoint=True)).tolist()


def check_agreement(name: str, search_f, reference_f, trials: int = 1000, max_length: int = 500,
                    queries_per_array: int = 10, rng=None) -> int:
    """
    Compares 'search_f' against 'reference_f' on random sorted arrays and random queries,
    including queries below and above all elements.
    Returns the number of checked queries, raises SearchValidationError on disagreement.
    """
    rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    checked = 0
    for _ in range(trials):
        data = random_sorted_array(rng, max_length)
        queries = rng.integers(-1, 1002, size=queries_per_array).tolist()
        for query in queries:
            expected = reference_f(data, query)
            result = search_f(data, query)
            if result != expected:
                raise SearchValidationError(name, query, expected, result, data)
            checked += 1
    return checked


def check_family_agreement(family: QArySearchFamily, trials: int = 1000, max_length: int = 500, rng=None) -> int:
    """Checks lower bound, upper bound and membership of one arity against bisect."""
    rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)
    checked = 0
    for search_f, reference_f in ((family.lower_bound, reference_lower_bound),
                                  (family.upper_bound, reference_upper_bound),
                                  (family.contains, reference_contains)):
        checked += check_agreement(search_f.__name__, search_f, reference_f, trials, max_length, rng=rng)
    return checked
