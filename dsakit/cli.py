"""Command line front end for the array algorithms."""

from __future__ import annotations

import argparse
import sys

from dsakit.searching import binary_search, linear_search, maximum
from dsakit.sequences import factorial_iterative, fibonacci_iterative, fibonacci_series
from dsakit.sorting import bubble_sort, insertion_sort, selection_sort

_SORTS = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
}

MAX_ARRAY_SIZE = 100


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit", description="Array algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort integers")
    sort.add_argument("--algorithm", choices=sorted(_SORTS), default="bubble")
    sort.add_argument("values", nargs="*", type=int)

    for name, help_text in (
        ("binary-search", "search a sorted array by halving"),
        ("linear-search", "search an array front to back"),
    ):
        search = commands.add_parser(name, help=help_text)
        search.add_argument("--key", type=int, required=True)
        search.add_argument("values", nargs="*", type=int)

    maxi = commands.add_parser("maximum", help="largest value of an array")
    maxi.add_argument("values", nargs="*", type=int)

    fact = commands.add_parser("factorial", help="factorial of a number")
    fact.add_argument("n", type=int)

    fib = commands.add_parser("fibonacci", help="first terms of the Fibonacci series")
    fib.add_argument("count", type=int)

    fib_at = commands.add_parser("fibonacci-at", help="Fibonacci number at a position")
    fib_at.add_argument("n", type=int)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "sort":
        ordered = _SORTS[args.algorithm](args.values)
        print("Sorted array: " + "".join(f"{v} " for v in ordered))
    elif args.command == "binary-search":
        result = binary_search(args.values, args.key)
        print(result.index if result.found else "Not found")
        print(result.steps)
    elif args.command == "linear-search":
        result = linear_search(args.values, args.key)
        if result.found:
            print(result.index)
        else:
            print(f"Element {args.key} is not present in the array")
        print(result.steps)
    elif args.command == "maximum":
        if not 1 <= len(args.values) <= MAX_ARRAY_SIZE:
            print(
                f"Invalid array size. Please enter a value between 1 and {MAX_ARRAY_SIZE}.",
                file=sys.stderr,
            )
            return 1
        print(f"The maximum value in the array is: {maximum(args.values)}")
    elif args.command == "factorial":
        try:
            value = factorial_iterative(args.n)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"The factorial of {args.n} is {value}")
    elif args.command == "fibonacci":
        terms = "".join(f"{v} " for v in fibonacci_series(args.count))
        print(f"Fibonacci series up to {args.count} terms: {terms}")
    elif args.command == "fibonacci-at":
        try:
            value = fibonacci_iterative(args.n)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"The {args.n}th Fibonacci number is {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())