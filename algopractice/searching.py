"""Searching exercises on sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def first_occurrence(values: Sequence[Any], target: Any) -> int:
    """Return the lowest index of ``target`` in sorted ``values``, or -1."""
    start, end = 0, len(values) - 1
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            answer = mid
            end = mid - 1
        elif values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return answer


def find_missing(values: Sequence[int]) -> int:
    """Return the index where a sorted run 1, 2, 3, ... first skips a number, or -1."""
    start, end = 0, len(values) - 1
    answer = -1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] - mid == 1:
            start = mid + 1
        else:
            answer = mid
            end = mid - 1
    return answer


def find_peak(values: Sequence[Any]) -> int:
    """Return the index of an element not smaller than its neighbours."""
    if not values:
        raise ValueError("find_peak() of an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def closest_elements(values: Sequence[int], k: int, x: int) -> list[int]:
    """Return the ``k`` elements of sorted ``values`` closest to ``x``, in order.

    Ties favour the smaller element.
    """
    left, right = 0, len(values) - 1
    while right - left + 1 > k:
        if abs(values[left] - x) <= abs(values[right] - x):
            right -= 1
        else:
            left += 1
    return list(values[left : right + 1])


def count_k_diff_pairs(values: Sequence[int], k: int) -> int:
    """Return the number of distinct pairs whose difference is exactly ``k``."""
    items = sorted(values)
    pairs: set[tuple[int, int]] = set()
    i, j = 0, 1
    while j < len(items):
        diff = items[j] - items[i]
        if diff == k:
            pairs.add((items[i], items[j]))
            i += 1
            j += 1
        elif diff > k:
            i += 1
        else:
            j += 1
        if i == j:
            j += 1
    return len(pairs)


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def binary_search_recursive(values: Sequence[Any], target: Any) -> int:
    """Recursive binary search; return an index of ``target`` or -1."""

    def _search(start: int, end: int) -> int:
        if start > end:
            return -1
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            return _search(mid + 1, end)
        return _search(start, mid - 1)

    return _search(0, len(values) - 1)


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first ``target`` in ``values``, or -1."""
    return next((index for index, value in enumerate(values) if value == target), -1)