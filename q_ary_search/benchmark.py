# --- Throughput Benchmark of Q-ary Searches against bisect ---

import bisect
import operator
import time
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from .core import q_ary_search
from .parameters import QArySearchParameters, SUPPORTED_ARITIES, get_search_parameters
from .searches import ARITY_NAMES, reference_lower_bound
from .utils import CountingKey, CountingPredicate

REFERENCE_NAME = "bisect.bisect_left"


@dataclass
class SearchTiming:
    elapsed_seconds: float
    num_queries: int
    # Sum of all returned offsets, keeps the work observable
    collector: int


@dataclass
class BenchmarkResult:
    name: str
    arity: int
    to_linear_threshold: int
    total_time_ms: float
    avg_time_us: float
    avg_comparisons: float
    collector: int

    def as_row(self) -> dict:
        return {
            'Method': self.name,
            'Threshold': self.to_linear_threshold if self.to_linear_threshold is not None else "N/A",
            'Total Time (ms)': round(self.total_time_ms, 2),
            'Avg Time (µs)': round(self.avg_time_us, 3),
            'Avg Comparisons': round(self.avg_comparisons, 2),
        }


def query_range(start_q, finish_q, step_q) -> list:
    """All queries start_q, start_q + step_q, ... up to and including finish_q."""
    if step_q <= 0:
        raise ValueError(f"Query step must be positive, got {step_q}")
    queries = np.arange(start_q, finish_q + step_q, step_q)
    return queries[queries <= finish_q].tolist()


def run_searches(search_f, data, queries) -> SearchTiming:
    """
    Invokes 'search_f(data, q)' for every query and measures the time spent on all of them.
    """
    collector = 0
    start_time = time.perf_counter()
    for q in queries:
        collector += search_f(data, q)
    elapsed = time.perf_counter() - start_time
    return SearchTiming(elapsed, len(queries), collector)


def count_comparisons(arity, data, queries, parameters: QArySearchParameters = None) -> float:
    """
    Average number of element comparisons per lower bound query.
    'arity' None measures the bisect reference.
    """
    if not queries:
        return 0.0
    if arity is None:
        key = CountingKey()
        for q in queries:
            bisect.bisect_left(data, q, key=key)
        return key.comparisons / len(queries)
    pred = CountingPredicate(operator.lt)
    for q in queries:
        q_ary_search(data, q, pred, arity, parameters=parameters)
    return pred.comparisons / len(queries)


def _lower_bound_with(arity: int, parameters: QArySearchParameters):
    def lower_bound(data, query):
        return q_ary_search(data, query, operator.lt, arity, parameters=parameters)
    return lower_bound


def benchmark_searches(data, queries, arities=SUPPORTED_ARITIES, parameters: dict = None,
                       show_progress: bool = False) -> list[BenchmarkResult]:
    """
    Times the bisect reference and the lower bound of every requested arity on the same queries.
    'parameters' optionally maps an arity to the QArySearchParameters to use for it.
    """
    parameters = parameters or {}
    methods = [(REFERENCE_NAME, None, None, reference_lower_bound)]
    for arity in arities:
        arity_parameters = parameters.get(arity) or get_search_parameters(arity)
        methods.append((f"{arity}-ary ({ARITY_NAMES[arity]})", arity, arity_parameters,
                        _lower_bound_with(arity, arity_parameters)))

    iterator = tqdm(methods, desc="Benchmarking", unit="method") if show_progress else methods
    return [_benchmark_method(name, arity, arity_parameters, search_f, data, queries)
            for name, arity, arity_parameters, search_f in iterator]


def _benchmark_method(name, arity, parameters, search_f, data, queries) -> BenchmarkResult:
    timing = run_searches(search_f, data, queries)
    num_queries = max(timing.num_queries, 1)
    return BenchmarkResult(
        name=name,
        arity=arity,
        to_linear_threshold=parameters.to_linear_threshold if parameters else None,
        total_time_ms=timing.elapsed_seconds * 1e3,
        avg_time_us=timing.elapsed_seconds * 1e6 / num_queries,
        avg_comparisons=count_comparisons(arity, data, queries, parameters),
        collector=timing.collector,
    )


def threshold_sweep(arity: int, data, queries, thresholds) -> list[BenchmarkResult]:
    """Benchmarks the lower bound of one arity with each of the given linear thresholds."""
    results = []
    for threshold in thresholds:
        parameters = QArySearchParameters(arity, threshold)
        results.append(_benchmark_method(f"{arity}-ary, threshold {threshold}", arity, parameters,
                                         _lower_bound_with(arity, parameters), data, queries))
    return results


def speedups(results: list[BenchmarkResult]) -> dict[str, float]:
    """Ratio of the reference time to each method's time (above 1 means faster than bisect)."""
    reference = next((r for r in results if r.arity is None), None)
    if reference is None:
        return {}
    return {r.name: reference.total_time_ms / r.total_time_ms if r.total_time_ms else float('nan')
            for r in results if r.arity is not None}
