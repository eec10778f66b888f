"""Classic comparison sorts: bubble, insertion and selection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the items of *values* sorted by bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for i in range(n - done - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the items of *values* sorted by insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the items of *values* sorted by selection sort."""
    items = list(values)
    n = len(items)
    for start in range(n - 1):
        # min() keeps the first of equal minima, as a strict "<" scan would.
        smallest = min(range(start, n), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items