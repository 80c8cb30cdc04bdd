"""
Array Demo -- Walkthrough of the custom arrays and a timing comparison against
Python's built-in list.

Sections:
1. Built-in list: append, middle insert and middle delete with timings
2. Custom arrays: StaticArray bounds checks, DynamicArray growth, insert,
   search, pop, delete, memory information
3. Performance comparison: append, head insert, middle delete, random access
   and linear search at TEST_SIZE elements

Generates (unless --no-plot is given):
- viz/capacity_growth.png -- length vs capacity while appending, written
  under the current directory or the directory given with --out
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

import dynamic_array
from array_errors import IndexOutOfRangeError
from dynamic_array import DynamicArray
from static_array import StaticArray

SEED = 42
TEST_SIZE = 50_000
ACCESS_COUNT = 1000
TRACE_SIZE = 100

# Relative, so it resolves against the working directory at run time
VIZ_DIR = Path("viz")

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
}


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000


def _access_indices(size: int, count: int = ACCESS_COUNT) -> np.ndarray:
    rng = np.random.default_rng(SEED)
    return rng.integers(0, size, count)


# ---------------------------------------------------------------------------
# Measurements
# ---------------------------------------------------------------------------

def benchmark_dynamic_array(size: int = TEST_SIZE) -> Dict[str, object]:
    """
    Time the core operations of DynamicArray on ``size`` elements.

    Returns:
        Dict with per-operation times in milliseconds plus the final length,
        capacity and memory information.
    """
    if size < 1:
        raise ValueError("size must be positive")
    arr = DynamicArray()

    t0 = time.perf_counter()
    for i in range(size):
        arr.append(i)
    append_ms = _elapsed_ms(t0)

    t0 = time.perf_counter()
    arr.insert(0, -1)
    insert_ms = _elapsed_ms(t0)

    t0 = time.perf_counter()
    arr.delete(size // 2)
    delete_ms = _elapsed_ms(t0)

    indices = _access_indices(arr.length())
    t0 = time.perf_counter()
    for i in indices:
        arr.get(int(i))
    access_ms = _elapsed_ms(t0)

    t0 = time.perf_counter()
    found = arr.index_of(size // 2)
    search_ms = _elapsed_ms(t0)

    return {
        "size": size,
        "append_ms": append_ms,
        "insert_head_ms": insert_ms,
        "delete_middle_ms": delete_ms,
        "access_ms": access_ms,
        "search_ms": search_ms,
        "found_index": found,
        "length": arr.length(),
        "capacity": arr.capacity(),
        "memory": arr.memory_info(),
    }


def benchmark_builtin_list(size: int = TEST_SIZE) -> Dict[str, object]:
    """Same operations as benchmark_dynamic_array, on a plain list."""
    if size < 1:
        raise ValueError("size must be positive")
    values: List[int] = []

    t0 = time.perf_counter()
    for i in range(size):
        values.append(i)
    append_ms = _elapsed_ms(t0)

    t0 = time.perf_counter()
    values.insert(0, -1)
    insert_ms = _elapsed_ms(t0)

    t0 = time.perf_counter()
    del values[size // 2]
    delete_ms = _elapsed_ms(t0)

    indices = _access_indices(len(values))
    t0 = time.perf_counter()
    for i in indices:
        values[int(i)]
    access_ms = _elapsed_ms(t0)

    t0 = time.perf_counter()
    try:
        found = values.index(size // 2)
    except ValueError:
        found = -1
    search_ms = _elapsed_ms(t0)

    return {
        "size": size,
        "append_ms": append_ms,
        "insert_head_ms": insert_ms,
        "delete_middle_ms": delete_ms,
        "access_ms": access_ms,
        "search_ms": search_ms,
        "found_index": found,
        "length": len(values),
        "size_bytes": sys.getsizeof(values),
    }


def capacity_trace(n: int = TRACE_SIZE) -> Tuple[List[int], List[int]]:
    """Length and capacity of a fresh DynamicArray after each of ``n`` appends."""
    arr = DynamicArray()
    lengths, capacities = [], []
    for i in range(n):
        arr.append(i)
        lengths.append(arr.length())
        capacities.append(arr.capacity())
    return lengths, capacities


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

def _banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def print_info(arr: DynamicArray) -> None:
    info = arr.info()
    print("  DynamicArray info:")
    print(f"    length:   {info['length']}")
    print(f"    capacity: {info['capacity']}")
    print(f"    empty:    {info['is_empty']}")
    print_memory(arr)


def print_memory(arr: DynamicArray) -> None:
    mem = arr.memory_info()
    print(f"    memory: used={mem['used_bytes']} bytes, "
          f"allocated={mem['allocated_bytes']} bytes, "
          f"utilization={mem['utilization']:.1f}%")


def demonstrate_builtin_list() -> None:
    _banner("Section 1: Built-in list")

    values = [1, 2, 3, 4, 5]
    print(f"  list: {values}")
    print(f"  values[2] = {values[2]}")

    t0 = time.perf_counter()
    values.append(6)
    print(f"  after append(6): {values}  ({_elapsed_ms(t0):.4f} ms)")

    t0 = time.perf_counter()
    values.insert(2, 99)
    print(f"  after insert(2, 99): {values}  ({_elapsed_ms(t0):.4f} ms)")

    t0 = time.perf_counter()
    del values[2]
    print(f"  after del values[2]: {values}  ({_elapsed_ms(t0):.4f} ms)")

    print("\n  Size in bytes as the list grows:")
    for i in range(10):
        values.append(i)
        print(f"    length={len(values):>3}  bytes={sys.getsizeof(values)}")


def demonstrate_custom_arrays() -> None:
    _banner("Section 2: Custom arrays")

    print("\n--- StaticArray ---")
    static = StaticArray(5)
    print(f"  initial: {static}")
    for i in range(static.size()):
        static.set(i, (i + 1) * 10)
    print(f"  after set: {static}")
    print(f"  get(2) = {static.get(2)}")
    try:
        static.get(10)
    except IndexOutOfRangeError as exc:
        print(f"  error: {exc}")

    print("\n--- DynamicArray: append ---")
    arr = DynamicArray()
    print(f"  initial: {arr} (length={arr.length()}, capacity={arr.capacity()})")
    for i in range(1, 9):
        t0 = time.perf_counter()
        arr.append(i * 10)
        print(f"  append({i * 10}): {arr} (length={arr.length()}, "
              f"capacity={arr.capacity()})  {_elapsed_ms(t0):.4f} ms")
    print_memory(arr)

    print("\n--- DynamicArray: insert / set ---")
    t0 = time.perf_counter()
    arr.insert(3, 999)
    print(f"  insert(3, 999): {arr}  {_elapsed_ms(t0):.4f} ms")
    print(f"  get(3) = {arr.get(3)}")
    arr.set(0, 1111)
    print(f"  set(0, 1111): {arr}")

    print("\n--- DynamicArray: search ---")
    print(f"  index_of(999) = {arr.index_of(999)}")
    print(f"  contains(999) = {arr.contains(999)}")
    print(f"  contains(777) = {arr.contains(777)}")

    print("\n--- DynamicArray: pop / delete ---")
    print(f"  pop() = {arr.pop()}, now {arr}")
    t0 = time.perf_counter()
    arr.delete(3)
    print(f"  delete(3): {arr}  {_elapsed_ms(t0):.4f} ms")

    print("\n--- DynamicArray: final state ---")
    print_info(arr)
    print(f"  to_list(): {arr.to_list()}")
    arr.clear()
    print(f"  after clear(): {arr} (empty={arr.is_empty()}, capacity={arr.capacity()})")


def print_benchmark(name: str, results: Dict[str, object]) -> None:
    print(f"\n  {name} ({results['size']:,} elements):")
    print(f"    {'append all':<22} {results['append_ms']:>10.3f} ms")
    print(f"    {'insert at head':<22} {results['insert_head_ms']:>10.3f} ms")
    print(f"    {'delete from middle':<22} {results['delete_middle_ms']:>10.3f} ms")
    print(f"    {f'{ACCESS_COUNT} random accesses':<22} {results['access_ms']:>10.3f} ms")
    print(f"    {'linear search':<22} {results['search_ms']:>10.3f} ms")
    if "capacity" in results:
        print(f"    final: length={results['length']}, capacity={results['capacity']}")
        mem = results["memory"]
        print(f"    memory: used={mem['used_bytes']} bytes, "
              f"allocated={mem['allocated_bytes']} bytes, "
              f"utilization={mem['utilization']:.1f}%")
    else:
        print(f"    final: length={results['length']}, size={results['size_bytes']} bytes")


def performance_comparison(size: int = TEST_SIZE) -> Dict[str, Dict[str, object]]:
    _banner("Section 3: Performance comparison")
    custom = benchmark_dynamic_array(size)
    builtin = benchmark_builtin_list(size)
    print_benchmark("DynamicArray", custom)
    print_benchmark("built-in list", builtin)
    return {"dynamic_array": custom, "builtin_list": builtin}


def plot_capacity_growth(n: int = TRACE_SIZE, out_dir: Path = VIZ_DIR) -> Path:
    """Plot length vs capacity over ``n`` appends and save it as a PNG."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    lengths, capacities = capacity_trace(n)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / "capacity_growth.png"

    fig, ax = plt.subplots(figsize=(9, 5))
    ax.plot(lengths, lengths, color=COLORS["blue"], label="length")
    ax.step(lengths, capacities, where="post", color=COLORS["red"], label="capacity")
    ax.set_xlabel("Appends")
    ax.set_ylabel("Slots")
    ax.set_title("DynamicArray: capacity doubles when the buffer is full",
                 fontsize=11, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="array-demo",
        description="Walk through the custom arrays and time them against list",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log DynamicArray growth events at DEBUG level",
    )
    parser.add_argument(
        "--size", type=int, default=TEST_SIZE,
        help=f"Elements in the performance comparison (default: {TEST_SIZE:,})",
    )
    parser.add_argument(
        "--no-plot", dest="plot", action="store_false",
        help="Skip the capacity growth chart",
    )
    parser.add_argument(
        "--out", type=Path, default=VIZ_DIR,
        help=f"Directory for the chart (default: ./{VIZ_DIR})",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        # basicConfig is a no-op when the root logger already has handlers
        logging.getLogger(dynamic_array.__name__).setLevel(logging.DEBUG)

    print("Array Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Benchmark size: {args.size:,}")

    demonstrate_builtin_list()
    demonstrate_custom_arrays()
    performance_comparison(args.size)

    if args.plot:
        path = plot_capacity_growth(out_dir=args.out)
        print(f"\nVisualization: {path}")

    print("\n" + "=" * 60)
    print("All sections completed successfully.")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> None:
    run(build_parser().parse_args(argv))


if __name__ == "__main__":
    main()
