"""
Performance benchmarks for CustomArray.

Each operation is run against random integer inputs of exponentially
growing size; average/std-dev of wall time and of estimated memory are
written to a CSV file.

Usage:
    python -m customarray.cli bench --path custom_array_performance.csv
"""

import csv
import logging
import random
import statistics
import sys
import time

from .datastructures import CustomArray

log = logging.getLogger(__name__)

# Defaults used by run_benchmarks() and the `bench` CLI subcommand.
DEFAULT_OUTPUT_CSV = "custom_array_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_DOUBLINGS = 6
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_true_space(arr: CustomArray) -> int:
    """Estimate total memory usage of a CustomArray including its store."""
    total = sys.getsizeof(arr)
    total += sys.getsizeof(arr._data)
    for i in range(len(arr)):
        total += sys.getsizeof(arr._data[i])
    return total


def measure_operation_time(operation, input_size: int, iterations: int = DEFAULT_ITERATIONS):
    """Run the operation multiple times and return average + std deviation.

    Returns ``(avg_ms, std_ms, avg_bytes, std_bytes)``.
    """
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        arr = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        space_used.append(measure_true_space(arr))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data):
    arr = CustomArray()
    for item in data:
        arr.push(item)
    return arr


def bench_pop(data):
    arr = CustomArray(data)
    while arr.pop() is not None:
        pass
    return arr


def bench_shift(data):
    arr = CustomArray(data)
    while arr.shift() is not None:
        pass
    return arr


def bench_unshift(data):
    arr = CustomArray()
    for item in data:
        arr.unshift(item)
    return arr


def bench_includes(data):
    arr = CustomArray(data)
    # Values above the generated range force full scans.
    for missing in range(1000001, 1000004):
        arr.includes(missing)
    return arr


def bench_find(data):
    arr = CustomArray(data)
    arr.find(lambda v: v < 0)
    return arr


def bench_sort(data):
    arr = CustomArray(data)
    arr.sort(lambda a, b: a - b)
    return arr


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "shift": bench_shift,
    "unshift": bench_unshift,
    "includes": bench_includes,
    "find": bench_find,
    "sort": bench_sort,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str = DEFAULT_OUTPUT_CSV,
    base_input: int = DEFAULT_BASE_INPUT,
    doublings: int = DEFAULT_DOUBLINGS,
    iterations: int = DEFAULT_ITERATIONS,
) -> int:
    """Run exponential performance tests for CustomArray operations.

    Writes one CSV row per (operation, input size) and returns the number
    of rows written.
    """
    input_sizes = [base_input * (2 ** i) for i in range(doublings)]
    log.debug("benchmark sizes=%s iterations=%d output=%s", input_sizes, iterations, output_file)

    rows = 0
    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation_time(op_func, size, iterations)
                writer.writerow([
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}",
                ])
                rows += 1
                log.debug("%s size=%d avg=%.3fms", op_name, size, avg_time)
                print(
                    f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                    f"Std Time: {std_time:.3f} ms | Avg Space: {avg_space:.0f} B | Std Space: {std_space:.0f} B"
                )

    return rows
