from __future__ import annotations

import argparse
import math
import statistics
import time
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

try:
    from fenwick import utils
    from fenwick.common.constants import RNG_SEEDS
    from fenwick.reference import NaivePrefixArray
    from fenwick.tree import FenwickTree
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from fenwick import utils
    from fenwick.common.constants import RNG_SEEDS
    from fenwick.reference import NaivePrefixArray
    from fenwick.tree import FenwickTree


IMPLEMENTATIONS: Dict[str, Callable[[int], object]] = {
    "fenwick": FenwickTree,
    "naive": NaivePrefixArray,
}


def parse_sizes(value: str) -> Tuple[int, ...]:
    sizes = tuple(int(p.strip()) for p in value.split(",") if p.strip())
    if not sizes or any(n <= 0 for n in sizes):
        raise argparse.ArgumentTypeError("sizes must be positive integers")
    return sizes


def positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return parsed


def gen_workload(
    rng: np.random.Generator,
    n: int,
    ops: int,
    *,
    low: int = -1000,
    high: int = 1000,
) -> Tuple[List[int], np.ndarray, np.ndarray, np.ndarray]:
    """Return a 1-indexed build array plus update indices, deltas and query bounds."""
    values = [0] + rng.integers(low, high, size=n).tolist()
    update_idx = rng.integers(1, n + 1, size=ops)
    deltas = rng.integers(low, high, size=ops)
    bounds = np.sort(rng.integers(1, n + 1, size=(ops, 2)), axis=1)
    return values, update_idx, deltas, bounds


def time_once(fn: Callable[[], object]) -> float:
    start = time.perf_counter()
    fn()
    return time.perf_counter() - start


def run_workload(
    impl: Callable[[int], object],
    n: int,
    values: Sequence[int],
    update_idx: np.ndarray,
    deltas: np.ndarray,
    bounds: np.ndarray,
) -> Tuple[Dict[str, float], List[int]]:
    struct = impl(n)
    timings: Dict[str, float] = {}
    timings["build"] = time_once(lambda: struct.build(values))

    def _updates() -> None:
        for i, d in zip(update_idx.tolist(), deltas.tolist()):
            struct.update(i, d)

    results: List[int] = []

    def _queries() -> None:
        for l, r in bounds.tolist():
            results.append(struct.query_range(l, r))

    timings["update"] = time_once(_updates)
    timings["query"] = time_once(_queries)
    return timings, results


def run_benchmark(args: argparse.Namespace) -> None:
    utils.VERBOSE = args.verbose
    rng = np.random.default_rng(args.seed)
    print(f"{'n':>10} {'impl':>8} {'build':>12} {'update/op':>12} {'query/op':>12}")
    for n in args.sizes:
        samples: Dict[str, Dict[str, List[float]]] = {
            name: {"build": [], "update": [], "query": []} for name in args.impl
        }
        for _ in range(args.repeats):
            values, update_idx, deltas, bounds = gen_workload(rng, n, args.ops)
            answers: Dict[str, List[int]] = {}
            for name in args.impl:
                timings, answers[name] = run_workload(
                    IMPLEMENTATIONS[name], n, values, update_idx, deltas, bounds
                )
                for key, elapsed in timings.items():
                    samples[name][key].append(elapsed)
            expected = answers[args.impl[0]]
            for name, results in answers.items():
                if results != expected:
                    raise AssertionError(f"{name} disagrees with {args.impl[0]} at n={n}")

        ops = args.ops
        for name in args.impl:
            build = statistics.median(samples[name]["build"])
            update = statistics.median(samples[name]["update"]) / ops
            query = statistics.median(samples[name]["query"]) / ops
            print(f"{n:>10} {name:>8} {build:>12.6f} {update:>12.3e} {query:>12.3e}")
        utils.log(f"[bench] n={n} log2(n)={math.log2(n):.1f} repeats={args.repeats}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark Fenwick tree against the naive prefix array.")
    parser.add_argument(
        "--sizes",
        type=parse_sizes,
        default=parse_sizes("1000,10000"),
        help="Comma separated array sizes.",
    )
    parser.add_argument("--ops", type=positive_int, default=2000, help="Updates and range queries per run.")
    parser.add_argument("--repeats", type=positive_int, default=3, help="Runs per size; medians are reported.")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"], help="Deterministic RNG seed.")
    parser.add_argument(
        "--impl",
        nargs="+",
        choices=sorted(IMPLEMENTATIONS),
        default=["fenwick", "naive"],
        help="Implementations to time.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print debug traces.")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    run_benchmark(args)


if __name__ == "__main__":
    main()
