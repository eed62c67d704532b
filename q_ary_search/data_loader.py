import numpy as np

DATA_TYPES = ("int", "real")


def _as_generator(rng) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def prepare_sorted_int_array(n: int, min_value: int, max_value: int, rng=None) -> list[int]:
    """
    Prepares a sorted array of integers of length 'n'.
    Values are randomly and uniformly generated in the range [min_value, max_value].
    """
    values = _as_generator(rng).integers(min_value, max_value, size=n, endpoint=True)
    return np.sort(values).tolist()


def prepare_sorted_real_array(n: int, min_value: float, max_value: float, rng=None) -> list[float]:
    """
    Prepares a sorted array of real numbers of length 'n'.
    Values are randomly and uniformly generated in the range [min_value, max_value).
    """
    values = _as_generator(rng).uniform(min_value, max_value, size=n)
    return np.sort(values).tolist()


def prepare_sorted_array(n: int, min_value, max_value, data_type: str = "int", rng=None) -> list:
    """Prepares a sorted array of the requested data type ('int' or 'real')."""
    if data_type == "int":
        return prepare_sorted_int_array(n, int(min_value), int(max_value), rng)
    if data_type == "real":
        return prepare_sorted_real_array(n, float(min_value), float(max_value), rng)
    raise ValueError(f"Can't generate array of random numbers with data type {data_type!r}, expected one of {DATA_TYPES}")
