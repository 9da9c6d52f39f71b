"""Recursive exercises: Fibonacci, array printing and searching, house robbing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import pairwise


@lru_cache(maxsize=None)
def _fib_pair(n: int) -> tuple[int, int]:
    if n == 0:
        return 0, 1
    a, b = _fib_pair(n // 2)
    c = a * (2 * b - a)
    d = a * a + b * b
    return (d, c + d) if n % 2 else (c, d)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    return _fib_pair(n)[0]


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    if count < 0:
        raise ValueError("Invalid input. Please enter a non-negative integer.")
    terms: list[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def join_values(values: Iterable[object], separator: str = " ") -> str:
    """Render each value followed by ``separator``."""
    return "".join(f"{value}{separator}" for value in values)


def search(values: Sequence[object], target: object) -> int:
    """Return the index of the first ``target`` in ``values``, or -1."""
    return next((index for index, value in enumerate(values) if value == target), -1)


def is_sorted(values: Sequence[object]) -> bool:
    """Return True when ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def rob(houses: Sequence[int]) -> int:
    """Return the largest sum of values taken from no two adjacent houses."""
    take_next, skip_next = 0, 0
    # Walk backwards: best(i) = max(houses[i] + best(i + 2), best(i + 1)).
    best_after_next, best_next = 0, 0
    for value in reversed(houses):
        best_here = max(value + best_after_next, best_next)
        best_after_next, best_next = best_next, best_here
    del take_next, skip_next
    return best_next