"""Factorials and Fibonacci numbers, each computed iteratively and recursively."""

from __future__ import annotations


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")


def factorial_iterative(n: int) -> int:
    """Return n! computed with a loop."""
    _check_non_negative(n)
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed by recursion."""
    _check_non_negative(n)
    if n in (0, 1):
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci_iterative(n: int) -> int:
    """Return the Fibonacci number at position *n* (F(0) = 0, F(1) = 1)."""
    _check_non_negative(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_recursive(n: int) -> int:
    """Return the Fibonacci number at position *n* by naive recursion."""
    _check_non_negative(n)
    if n < 2:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_series(count: int) -> list[int]:
    """Return the first *count* Fibonacci numbers; empty if count <= 0."""
    series = []
    a, b = 0, 1
    for _ in range(count):
        series.append(a)
        a, b = b, a + b
    return series


def fibonacci_series_recursive(count: int) -> list[int]:
    """Return the first *count* Fibonacci numbers, each found by recursion."""
    return [fibonacci_recursive(i) for i in range(max(count, 0))]