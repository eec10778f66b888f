"""Searching an array: binary search, linear search and the maximum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SearchResult:
    """Where a key was found (``None`` if absent) and how many probes it took."""

    index: int | None
    steps: int

    @property
    def found(self) -> bool:
        return self.index is not None


def binary_search(values: Sequence[Any], key: Any) -> SearchResult:
    """Search the ascending sequence *values* for *key*, counting the probes."""
    low, high = 0, len(values) - 1
    steps = 0
    while low <= high:
        steps += 1
        mid = (low + high) // 2
        if values[mid] == key:
            return SearchResult(mid, steps)
        if values[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return SearchResult(None, steps)


def linear_search(values: Iterable[Any], key: Any) -> SearchResult:
    """Scan *values* front to back for *key*, counting the comparisons."""
    steps = 0
    for index, value in enumerate(values):
        steps += 1
        if value == key:
            return SearchResult(index, steps)
    return SearchResult(None, steps)


_MISSING = object()


def maximum(values: Iterable[Any]) -> Any:
    """Return the largest item of *values*; raise ValueError when it is empty."""
    result = max(values, default=_MISSING)
    if result is _MISSING:
        raise ValueError("maximum() of an empty sequence")
    return result