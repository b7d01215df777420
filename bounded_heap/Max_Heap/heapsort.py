"""
Heapsort a random array of priorities from the command line.

Example:

python -m bounded_heap.Max_Heap.heapsort --n 1000000 --seed 51 --dtype float64 --show 10
"""

import sys
import math
import time
import argparse
import numpy as np
from jaxtyping import Num
from typing import List, Optional

from bounded_heap.Max_Heap.max_heap import MaxHeap
from bounded_heap.Max_Heap.records import make_records, priorities_of


N = 100_000
SEED = 51
LOW = 0.0
HIGH = 1_000_000.0
SHOW = 10


def random_priorities(
    n: int,
    seed: int,
    low: float,
    high: float,
    dtype: str,
) -> Num[np.ndarray, "n"]:
    """
    Draw n priorities uniformly from [low, high) with a seeded generator.
    Integer dtypes draw the integers inside the same half-open range,
    i.e. from [ceil(low), ceil(high)).
    """
    rng = np.random.default_rng(seed)
    if np.issubdtype(np.dtype(dtype), np.integer):
        return rng.integers(math.ceil(low), math.ceil(high), size=n, dtype=dtype)
    return rng.uniform(low, high, size=n).astype(dtype)


def main(argv: Optional[List[str]] = None) -> np.ndarray:
    parser = argparse.ArgumentParser(description="Heapsort random priorities with a bounded MaxHeap")
    parser.add_argument("--n", type=int, default=N, help="Number of records to sort")
    parser.add_argument("--seed", type=int, default=SEED, help="Random seed")
    parser.add_argument("--low", type=float, default=LOW, help="Smallest priority (inclusive)")
    parser.add_argument("--high", type=float, default=HIGH, help="Largest priority (exclusive)")
    parser.add_argument("--dtype", type=str, default="float64", help="Priority dtype", choices=["float32", "float64", "int64"])
    parser.add_argument("--show", type=int, default=SHOW, help="Print the first K sorted priorities")
    args = parser.parse_args(argv)
    print(f"heapsort: {args = }")

    if args.n < 0:
        parser.error(f"--n must be non-negative, got {args.n}")
    if args.show < 0:
        parser.error(f"--show must be non-negative, got {args.show}")
    if args.high <= args.low:
        parser.error(f"--high must be greater than --low, got [{args.low}, {args.high})")
    if np.issubdtype(np.dtype(args.dtype), np.integer) and math.ceil(args.high) <= math.ceil(args.low):
        parser.error(f"no integer priorities in [{args.low}, {args.high}) for --dtype {args.dtype}")

    priorities = random_priorities(args.n, args.seed, args.low, args.high, args.dtype)

    # build 1-indexed records
    start_time = time.perf_counter()
    records = make_records(priorities)
    end_time = time.perf_counter()
    print(f"_make_records: {end_time - start_time:.4f} sec for {args.n} records")

    # heapify + drain
    start_time = time.perf_counter()
    MaxHeap.heapsort(records)
    end_time = time.perf_counter()
    print(f"_heapsort: {end_time - start_time:.4f} sec for {args.n} records")

    sorted_priorities = priorities_of(records)
    if not np.all(np.diff(sorted_priorities) >= 0):
        raise SystemExit("heapsort: result is not in ascending order")

    # elements are input positions, so the sorted elements are an argsort
    order = np.fromiter((r.element for r in records[1:]), dtype=np.int64, count=args.n)
    if not np.array_equal(np.sort(order), np.arange(args.n)):
        raise SystemExit("heapsort: result is not a permutation of the input")

    print(f"first {min(args.show, args.n)} priorities: {sorted_priorities[:args.show].tolist()}")
    return sorted_priorities


if __name__ == "__main__":
    main(sys.argv[1:])
