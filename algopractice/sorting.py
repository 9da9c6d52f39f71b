"""Sorting algorithms returning new lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def sort_colors(values: Sequence[int]) -> list[int]:
    """Dutch national flag sort of zeros, ones and twos."""
    items = list(values)
    start, index, end = 0, 0, len(items) - 1
    while index <= end:
        if items[index] == 0:
            items[index], items[start] = items[start], items[index]
            index += 1
            start += 1
        elif items[index] == 1:
            index += 1
        else:
            items[end], items[index] = items[index], items[end]
            end -= 1
    return items


def _partition(items: list[Any], start: int, end: int) -> int:
    mid = start + (end - start) // 2
    if items[mid] < items[start]:
        items[start], items[mid] = items[mid], items[start]
    if items[end] < items[start]:
        items[start], items[end] = items[end], items[start]
    if items[mid] < items[end]:
        items[mid], items[end] = items[end], items[mid]
    pivot = items[end]
    boundary = start
    for j in range(start, end):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[end] = items[end], items[boundary]
    return boundary


def quick_sort(values: Sequence[Any]) -> list[Any]:
    """Quicksort with a median-of-three pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        split = _partition(items, start, end)
        pending.append((start, split - 1))
        pending.append((split + 1, end))
    return items


def bubble_sort(values: Sequence[Any]) -> list[Any]:
    """Bubble sort: repeatedly swap adjacent elements that are out of order."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items