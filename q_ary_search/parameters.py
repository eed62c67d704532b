# --- Threshold Policy for Q-ary Searches ---

from dataclasses import dataclass, replace

SUPPORTED_ARITIES = (2, 3, 4, 5, 6)


@dataclass(frozen=True)
class QArySearchParameters:
    """
    Parameters used by the Q-ary search of one arity.

    to_linear_threshold is the minimal length of the search range, below which
    the search stops partitioning into fragments and switches to linear search.
    Defaults to 2 * arity.
    """
    arity: int
    to_linear_threshold: int | None = None

    def __post_init__(self):
        if self.arity not in SUPPORTED_ARITIES:
            raise ValueError(f"Unsupported arity {self.arity}, expected one of {SUPPORTED_ARITIES}")
        if self.to_linear_threshold is None:
            object.__setattr__(self, 'to_linear_threshold', 2 * self.arity)
        # A threshold below the arity would allow empty fragments
        if self.to_linear_threshold < self.arity:
            raise ValueError(
                f"Linear threshold {self.to_linear_threshold} is below the arity {self.arity}"
            )


def _default_parameters() -> dict[int, QArySearchParameters]:
    return {arity: QArySearchParameters(arity) for arity in SUPPORTED_ARITIES}


# Process-wide defaults, one per arity. Read once at the start of every search call.
DEFAULT_SEARCH_PARAMETERS = _default_parameters()


def get_search_parameters(arity: int) -> QArySearchParameters:
    """Returns the current default parameters for the given arity."""
    try:
        return DEFAULT_SEARCH_PARAMETERS[arity]
    except KeyError:
        raise ValueError(f"Unsupported arity {arity}, expected one of {SUPPORTED_ARITIES}") from None


def set_linear_threshold(arity: int, threshold: int) -> QArySearchParameters:
    """
    Replaces the default linear threshold of the given arity.
    Searches already running keep the value they started with.
    """
    parameters = replace(get_search_parameters(arity), to_linear_threshold=threshold)
    DEFAULT_SEARCH_PARAMETERS[arity] = parameters
    return parameters


def reset_search_parameters():
    """Restores the default threshold (2 * Q) of every arity."""
    DEFAULT_SEARCH_PARAMETERS.update(_default_parameters())
