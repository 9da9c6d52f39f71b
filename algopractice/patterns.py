"""Hollow star patterns rendered as lists of text rows."""

from __future__ import annotations


def _row(width: int, stars: set[int]) -> str:
    return "".join("*" if column in stars else " " for column in range(width))


def _pyramid_row(n: int, level: int) -> str:
    return _row(2 * n - 1, {n - level - 1, n + level - 1})


def hollow_pyramid(n: int) -> list[str]:
    """Return the rows of a hollow pyramid of height ``n``."""
    return [_pyramid_row(n, level) for level in range(n)]


def hollow_diamond(n: int) -> list[str]:
    """Return the rows of a hollow diamond whose upper half is ``n`` rows tall."""
    upper = hollow_pyramid(n)
    return upper + upper[-2::-1] if upper else []


def hollow_inverted_square(n: int) -> list[str]:
    """Return an ``n`` by ``n`` square outlined by its top row, left column and anti-diagonal."""
    rows = []
    for i in range(n):
        if i == 0:
            rows.append("*" * n)
        else:
            rows.append(_row(n, {0, n - i - 1}))
    return rows


def hollow_square(n: int) -> list[str]:
    """Return the rows of an ``n`` by ``n`` hollow square."""
    rows = []
    for i in range(n):
        if i in (0, n - 1):
            rows.append("*" * n)
        else:
            rows.append(_row(n, {0, n - 1}))
    return rows