"""
CustomArray Command-Line Interface (CLI)

Subcommands:
- demo:  walk through the basic array operations step by step
- sort:  sort the given values with CustomArray's exchange sort
- bench: time every operation over growing inputs and write a CSV

Usage examples:
    python -m customarray.cli demo
    python -m customarray.cli sort 5 3 9 1 --numeric --desc
    python -m customarray.cli bench --path results.csv --base-input 50
"""

import argparse
import logging
import sys

from .datastructures import CustomArray, natural_order
from . import benchmark

log = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Argument helpers
# -------------------------------------------------------------------
def positive_int(text):
    """argparse type: an integer >= 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def parse_number(text):
    """Parse `text` as an int when possible, otherwise as a float."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Run the step-by-step demonstration of the array operations."""
    arr = CustomArray()
    arr.push(1, 2, 3)
    arr.unshift(0)
    print(arr.data)
    print(arr.pop())
    print(arr.shift())
    print(arr.includes(2))
    arr.for_each(lambda el, i, a: print(el))

    arr.push(4, 5, 6)
    print("Before sorting:", arr.to_string())
    arr.sort(lambda a, b: a - b)
    print("After sorting:", arr.to_string())


def cmd_sort(args):
    """Sort the given values and print them comma-separated."""
    arr = CustomArray(args.values)
    if args.desc:
        arr.sort(lambda a, b: natural_order(b, a))
    else:
        arr.sort()
    log.debug("sorted %d values", len(arr))
    print(arr.to_string())


def cmd_bench(args):
    """Run the benchmark harness and write the CSV report."""
    rows = benchmark.run_benchmarks(
        args.path,
        base_input=args.base_input,
        doublings=args.doublings,
        iterations=args.iterations,
    )
    print(f"\nBenchmark completed. {rows} rows saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="customarray", description="CustomArray demo and benchmarks")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Walk through the array operations")
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("sort", help="Sort values with the exchange sort")
    s.add_argument("values", nargs="+")
    s.add_argument("--desc", action="store_true", help="Sort in descending order")
    s.add_argument("--numeric", action="store_true", help="Compare values as numbers")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("bench", help="Benchmark the array operations")
    s.add_argument("--path", default=benchmark.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=positive_int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--doublings", type=positive_int, default=benchmark.DEFAULT_DOUBLINGS)
    s.add_argument("--iterations", type=positive_int, default=benchmark.DEFAULT_ITERATIONS)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point (`customarray` script or `python -m customarray.cli`)."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "sort" and args.numeric:
        try:
            args.values = [parse_number(v) for v in args.values]
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))

    args.func(args)


if __name__ == "__main__":
    main()
