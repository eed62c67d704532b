import argparse
import sys
import time

import numpy as np
from tabulate import tabulate

from q_ary_search.parameters import SUPPORTED_ARITIES, QArySearchParameters
from q_ary_search.searches import Q_ARY_SEARCHES, reference_lower_bound
from q_ary_search.validation import (
    SearchValidationError, check_family_agreement, validate_search_on_sorted_int_array,
)
from q_ary_search.data_loader import prepare_sorted_array
from q_ary_search.benchmark import benchmark_searches, query_range, speedups


def parse_threshold(value: str) -> tuple[int, int]:
    """Parses 'Q=T' into (arity, threshold)."""
    try:
        arity, threshold = (int(part) for part in value.split("=", 1))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected ARITY=THRESHOLD, got {value!r}") from None
    return arity, threshold


def run_validation(arities, trials: int, seed=None):
    """Checks every search on the canned fixtures and against bisect on random arrays."""
    print("Testing search algorithms:")
    print("\t bisect.bisect_left() ...")
    validate_search_on_sorted_int_array("bisect.bisect_left", reference_lower_bound)
    rng = np.random.default_rng(seed)
    for arity in arities:
        family = Q_ARY_SEARCHES[arity]
        print(f"\t {family.lower_bound.__name__}() ...")
        validate_search_on_sorted_int_array(family.lower_bound.__name__, family.lower_bound)
        if trials > 0:
            checked = check_family_agreement(family, trials=trials, rng=rng)
            print(f"\t\t agrees with bisect on {checked} random queries")


def run_benchmark(size: int, data_type: str, start_q, finish_q, step_q, arities,
                  thresholds: dict = None, seed=None):
    """
    Generates a sorted array, runs every search over the query range,
    and prints the benchmark results.
    """
    parameters = {arity: QArySearchParameters(arity, threshold)
                  for arity, threshold in (thresholds or {}).items()}

    print("Benchmarking search algorithms:")
    print(f"\t ... generating sorted array of length N={size}, with values in [{start_q}, {finish_q}],")
    start_time = time.perf_counter()
    data = prepare_sorted_array(size, start_q, finish_q, data_type, rng=seed)
    queries = query_range(start_q, finish_q, step_q)
    print(f"\t ... generated in {(time.perf_counter() - start_time) * 1e3:.2f} ms")
    print(f"\t ... running search algorithms for {len(queries)} times each,")

    results = benchmark_searches(data, queries, arities, parameters, show_progress=True)

    print("\n--- Benchmark Results ---")
    rows = [result.as_row() for result in results]
    print(tabulate(rows, headers="keys", tablefmt="grid"))

    print("\nAnalysis:")
    for name, ratio in speedups(results).items():
        print(f"{name}: {ratio:.2f}x the speed of bisect")
    fastest = min(results, key=lambda r: r.total_time_ms)
    print(f"Fastest method: {fastest.name}, {fastest.avg_time_us:.3f} µs per query on average.")
    print(f"Average comparisons across Q-ary searches: "
          f"{np.mean([r.avg_comparisons for r in results if r.arity is not None]):.2f}")
    # Printed so the searches can't be skipped as unused work
    print(f"Final value of the collector: {sum(r.collector for r in results)}")
    print("-" * 80)
    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate and benchmark Q-ary searches against bisect.")
    parser.add_argument("--size", type=int, default=10_000, help="Length of the sorted array.")
    parser.add_argument("--data-type", choices=["int", "real"], default="real",
                        help="Type of the generated values.")
    parser.add_argument("--start-q", type=float, default=0, help="Start of the query (and value) range.")
    parser.add_argument("--finish-q", type=float, default=100_000, help="Finish of the query (and value) range.")
    parser.add_argument("--step-q", type=float, default=1, help="The step inside the query range.")
    parser.add_argument("--arities", type=int, nargs="+", default=list(SUPPORTED_ARITIES),
                        choices=SUPPORTED_ARITIES, help="Arities to validate and benchmark.")
    parser.add_argument("--threshold", type=parse_threshold, action="append", default=[],
                        metavar="Q=T", help="Linear threshold T for arity Q (repeatable).")
    parser.add_argument("--trials", type=int, default=200,
                        help="Random arrays used to check agreement with bisect (0 disables).")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random generator.")
    parser.add_argument("--skip-validation", action="store_true", help="Only run the benchmark.")
    args = parser.parse_args(argv)

    if args.step_q <= 0:
        print(f"Invalid query step: {args.step_q} is not positive")
        return 2
    if args.data_type == "int":
        if not float(args.step_q).is_integer():
            print(f"Invalid query step: {args.step_q} is not a whole number, as int data requires")
            return 2
        args.start_q, args.finish_q, args.step_q = int(args.start_q), int(args.finish_q), int(args.step_q)

    try:
        thresholds = dict(args.threshold)
        # Validates the thresholds before any work is done
        for arity, threshold in thresholds.items():
            QArySearchParameters(arity, threshold)
    except ValueError as e:
        print(f"Invalid threshold: {e}")
        return 2

    if not args.skip_validation:
        try:
            run_validation(args.arities, args.trials, args.seed)
        except SearchValidationError as e:
            print(f"Validation failed: {e}")
            return 1

    run_benchmark(args.size, args.data_type, args.start_q, args.finish_q, args.step_q,
                  args.arities, thresholds, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
