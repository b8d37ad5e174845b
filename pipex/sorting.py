"""In-place sorting of mutable sequences."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import MutableSequence
from typing import Any


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place in ascending order with insertion sort.

    The sort is stable and suits short sequences.
    """
    for index in range(1, len(items)):
        current = items[index]
        position = bisect_right(items, current, 0, index)
        if position != index:
            items[position + 1:index + 1] = items[position:index]
            items[position] = current


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its last element and return the pivot's index."""
    pivot = items[high]
    store = low
    for current in range(low, high):
        if items[current] < pivot:
            items[store], items[current] = items[current], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quicksort(items: MutableSequence[Any], low: int = 0, high: int | None = None) -> None:
    """Sort ``items[low:high + 1]`` in place with quicksort.

    ``high`` defaults to the last index; elements outside the range are untouched.
    """
    if high is None:
        high = len(items) - 1
    if low < high:
        pivot_index = _partition(items, low, high)
        quicksort(items, low, pivot_index - 1)
        quicksort(items, pivot_index + 1, high)