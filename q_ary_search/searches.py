# --- Boundary Searches built on the Q-ary Search Core ---

import bisect
import operator
from typing import Any, Callable, NamedTuple, Sequence

from .core import q_ary_search
from .parameters import QArySearchParameters, SUPPORTED_ARITIES


def q_ary_lower_bound(data: Sequence, query: Any, arity: int = 2, begin: int = 0, end: int = None,
                      parameters: QArySearchParameters = None) -> int:
    """Returns the first position whose element is not less than the query."""
    return q_ary_search(data, query, operator.lt, arity, begin, end, parameters)


def q_ary_upper_bound(data: Sequence, query: Any, arity: int = 2, begin: int = 0, end: int = None,
                      parameters: QArySearchParameters = None) -> int:
    """Returns the first position whose element is greater than the query."""
    return q_ary_search(data, query, operator.le, arity, begin, end, parameters)


def q_ary_contains(data: Sequence, query: Any, arity: int = 2, begin: int = 0, end: int = None,
                   parameters: QArySearchParameters = None) -> bool:
    """Checks whether the query is present, reusing the lower bound position."""
    if end is None:
        end = len(data)
    result = q_ary_search(data, query, operator.lt, arity, begin, end, parameters)
    return result != end and not (query < data[result])


# --- Per-arity entry points ---

class QArySearchFamily(NamedTuple):
    """The four entry points of one fixed arity, all taking (data, query, begin, end)."""
    arity: int
    name: str
    search: Callable[..., int]
    lower_bound: Callable[..., int]
    upper_bound: Callable[..., int]
    contains: Callable[..., bool]


ARITY_NAMES = {2: "binary", 3: "ternary", 4: "quaternary", 5: "quinary", 6: "senary"}


def make_q_ary_search_family(arity: int) -> QArySearchFamily:
    """Binds the generic searches to a fixed arity."""
    name = ARITY_NAMES[arity]

    def search(data, query, pred, begin=0, end=None):
        return q_ary_search(data, query, pred, arity, begin, end)

    def lower_bound(data, query, begin=0, end=None):
        return q_ary_search(data, query, operator.lt, arity, begin, end)

    def upper_bound(data, query, begin=0, end=None):
        return q_ary_search(data, query, operator.le, arity, begin, end)

    def contains(data, query, begin=0, end=None):
        return q_ary_contains(data, query, arity, begin, end)

    for function, suffix in ((search, "search"), (lower_bound, "lower_bound"),
                             (upper_bound, "upper_bound"), (contains, "contains")):
        function.__name__ = function.__qualname__ = f"{name}_{suffix}"
    return QArySearchFamily(arity, name, search, lower_bound, upper_bound, contains)


Q_ARY_SEARCHES = {arity: make_q_ary_search_family(arity) for arity in SUPPORTED_ARITIES}

binary_search, binary_lower_bound, binary_upper_bound, binary_contains = Q_ARY_SEARCHES[2][2:]
ternary_search, ternary_lower_bound, ternary_upper_bound, ternary_contains = Q_ARY_SEARCHES[3][2:]
quaternary_search, quaternary_lower_bound, quaternary_upper_bound, quaternary_contains = Q_ARY_SEARCHES[4][2:]
quinary_search, quinary_lower_bound, quinary_upper_bound, quinary_contains = Q_ARY_SEARCHES[5][2:]
senary_search, senary_lower_bound, senary_upper_bound, senary_contains = Q_ARY_SEARCHES[6][2:]


# --- Baseline Search Algorithms (Provided for Benchmarking) ---

def reference_lower_bound(data: Sequence, query: Any, begin: int = 0, end: int = None) -> int:
    """Standard binary search lower bound, via bisect."""
    if end is None:
        end = len(data)
    return bisect.bisect_left(data, query, begin, end)


def reference_upper_bound(data: Sequence, query: Any, begin: int = 0, end: int = None) -> int:
    """Standard binary search upper bound, via bisect."""
    if end is None:
        end = len(data)
    return bisect.bisect_right(data, query, begin, end)


def reference_contains(data: Sequence, query: Any, begin: int = 0, end: int = None) -> bool:
    if end is None:
        end = len(data)
    result = bisect.bisect_left(data, query, begin, end)
    return result != end and not (query < data[result])
