import pytest

from algopractice.patterns import (
    hollow_diamond,
    hollow_inverted_square,
    hollow_pyramid,
    hollow_square,
)


def test_hollow_square_small():
    assert hollow_square(3) == ["***", "* *", "***"]


@pytest.mark.parametrize("n", [2, 5, 8])
def test_hollow_square_border(n):
    rows = hollow_square(n)
    assert len(rows) == n
    assert all(len(row) == n for row in rows)
    assert rows[0] == "*" * n
    assert rows[-1] == "*" * n
    for row in rows[1:-1]:
        assert row[0] == "*" and row[-1] == "*"
        assert set(row[1:-1]) <= {" "}


@pytest.mark.parametrize("n", [1, 3, 5])
def test_hollow_diamond_shape(n):
    rows = hollow_diamond(n)
    assert len(rows) == 2 * n - 1
    assert rows == rows[::-1]
    assert all(len(row) == 2 * n - 1 for row in rows)
    assert rows[0].count("*") == 1
    assert rows[n - 1] == "*" + " " * (2 * n - 3) + "*" if n > 1 else rows[0] == "*"


def test_hollow_diamond_middle_row_has_two_stars():
    rows = hollow_diamond(5)
    assert rows[4].count("*") == 2
    assert rows[4][0] == "*" and rows[4][-1] == "*"


@pytest.mark.parametrize("n", [1, 4, 5])
def test_pyramid_is_upper_half_of_diamond(n):
    assert hollow_pyramid(n) == hollow_diamond(n)[:n]


def test_pyramid_apex_centred():
    rows = hollow_pyramid(5)
    assert rows[0].index("*") == 4
    assert rows[-1].count("*") == 2


@pytest.mark.parametrize("n", [3, 10])
def test_hollow_inverted_square(n):
    rows = hollow_inverted_square(n)
    assert len(rows) == n
    assert rows[0] == "*" * n
    assert all(row[0] == "*" for row in rows)
    assert all(rows[i][n - i - 1] == "*" for i in range(n))
    assert all(len(row) == n for row in rows)


@pytest.mark.parametrize(
    "func", [hollow_square, hollow_diamond, hollow_pyramid, hollow_inverted_square]
)
def test_zero_size_is_empty(func):
    assert func(0) == []