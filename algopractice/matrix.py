"""Two-dimensional array exercises on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = Sequence[Sequence[Any]]


def diagonal(matrix: Matrix) -> list[Any]:
    """Return the main-diagonal elements of a square matrix."""
    return [row[index] for index, row in enumerate(matrix)]


def diagonal_sum(matrix: Matrix) -> Any:
    """Return the sum of the main diagonal."""
    return sum(diagonal(matrix))


def rows(matrix: Matrix) -> list[list[Any]]:
    """Return the matrix read row by row."""
    return [list(row) for row in matrix]


def columns(matrix: Matrix) -> list[list[Any]]:
    """Return the matrix read column by column."""
    return [list(column) for column in zip(*matrix)]


def row_sums(matrix: Matrix) -> list[Any]:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def transpose(matrix: Matrix) -> list[list[Any]]:
    """Return the transpose: rows become columns."""
    return columns(matrix)