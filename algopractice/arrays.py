"""Basic one-dimensional array exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from functools import reduce
from itertools import combinations_with_replacement
from operator import xor
from typing import Any


def count_zeros_and_ones(values: Sequence[int]) -> tuple[int, int]:
    """Return how many zeros and how many ones ``values`` holds."""
    zeros = sum(1 for value in values if value == 0)
    ones = sum(1 for value in values if value == 1)
    return zeros, ones


def extreme_order(values: Sequence[Any]) -> list[Any]:
    """Interleave ``values`` from both ends: first, last, second, second-to-last, and so on."""
    remaining = deque(values)
    result: list[Any] = []
    while remaining:
        result.append(remaining.popleft())
        if remaining:
            result.append(remaining.pop())
    return result


def three_way_partition(values: Sequence[int]) -> list[int]:
    """Single-pass partition of zeros, ones and twos around a moving middle pointer.

    An element swapped in from the end is not examined again, so a two
    followed by further twos near the end may be left unordered.
    """
    items = list(values)
    start, mid, end = 0, 0, len(items) - 1
    while mid <= end:
        value = items[mid]
        if value == 0:
            items[mid], items[start] = items[start], items[mid]
            start += 1
            mid += 1
        elif value == 2:
            items[mid], items[end] = items[end], items[mid]
            mid += 1
            end -= 1
        elif value == 1:
            mid += 1
        else:
            raise ValueError(f"only 0, 1 and 2 can be partitioned, got {value!r}")
    return items


def find_unique(values: Sequence[int]) -> int:
    """Return the element that appears once when every other one appears twice."""
    return reduce(xor, values, 0)


def min_max(values: Sequence[Any]) -> tuple[Any, Any]:
    """Return the smallest and the largest of ``values``."""
    if not values:
        raise ValueError("min_max() of an empty sequence")
    return min(values), max(values)


def all_pairs(values: Sequence[Any]) -> list[tuple[Any, Any]]:
    """Return every pair taken forwards, then every pair taken backwards.

    Forwards each element is paired with itself and every later element;
    backwards each element is paired with itself and every earlier one.
    """
    forwards = list(combinations_with_replacement(values, 2))
    backwards = list(combinations_with_replacement(list(reversed(values)), 2))
    return forwards + backwards


def reverse(values: Sequence[Any]) -> list[Any]:
    """Return ``values`` in reverse order."""
    return list(reversed(values))


def rotate_by_one(values: Sequence[Any]) -> list[Any]:
    """Rotate right by one place: the last element moves to the front."""
    if not values:
        return []
    return [values[-1], *values[:-1]]


def partition_negatives(values: Sequence[int]) -> list[int]:
    """Move every negative number before every non-negative one."""
    items = list(values)
    start, end = 0, len(items) - 1
    while start <= end:
        if items[start] < 0:
            start += 1
        elif items[end] >= 0:
            end -= 1
        else:
            items[start], items[end] = items[end], items[start]
            start += 1
            end -= 1
    return items


def sort_zero_one(values: Sequence[int]) -> list[int]:
    """Sort a sequence of zeros and ones with two converging pointers."""
    items = list(values)
    start, end = 0, len(items) - 1
    while start < end:
        if items[start] == 0:
            start += 1
        elif items[end] == 1:
            end -= 1
        else:
            items[start], items[end] = items[end], items[start]
            start += 1
            end -= 1
    return items


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of ``values``."""
    return sum(values)