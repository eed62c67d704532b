# --- Fragment-Partition Search Core ---

from typing import Any, Callable, Sequence

from .parameters import QArySearchParameters, get_search_parameters


def q_ary_search(
    data: Sequence,
    query: Any,
    pred: Callable[[Any, Any], bool],
    arity: int = 2,
    begin: int = 0,
    end: int = None,
    parameters: QArySearchParameters = None,
) -> int:
    """
    Q-ary search with partitioning into 'arity' fragments on each step.
    At the end, linear search is performed.

    Returns the first position p in the range [begin, end) on which
    pred(data[p], query) is not satisfied, or 'end' if there is no such position.
    The range must be sorted consistently with 'pred'; this is never checked,
    and an unsorted range gives an unspecified result.

    With arity=2 this is almost the same as binary search, with the difference
    that a linear search finishes the work on short ranges.
    """
    if end is None:
        end = len(data)
    if parameters is None:
        parameters = get_search_parameters(arity)
    elif parameters.arity != arity:
        raise ValueError(f"Parameters for arity {parameters.arity} passed to a {arity}-ary search")
    threshold = parameters.to_linear_threshold
    last = arity - 1

    # Work with {begin, length}, not with [begin, end)
    length = end - begin
    while length >= threshold:
        fragment_length = length // arity
        for _ in range(last):
            probe = begin + fragment_length
            if not pred(data[probe], query):
                break
            begin = probe
        else:
            # The last fragment takes the remainder
            length -= last * fragment_length
            continue
        length = fragment_length

    # Linear search
    end = begin + length
    while begin != end and pred(data[begin], query):
        begin += 1
    return begin
