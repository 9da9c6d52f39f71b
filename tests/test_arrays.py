import pytest

from algopractice.arrays import (
    all_pairs,
    array_sum,
    count_zeros_and_ones,
    extreme_order,
    find_unique,
    min_max,
    partition_negatives,
    reverse,
    rotate_by_one,
    sort_zero_one,
    three_way_partition,
)

COUNT_SAMPLE = [0, 1, 0, 1, 0, 1, 2, 56, 41, 154, 5, 1, 0, 1, 0, 1, 0, 1]


def test_count_zeros_and_ones_matches_counts():
    assert count_zeros_and_ones(COUNT_SAMPLE) == (
        COUNT_SAMPLE.count(0),
        COUNT_SAMPLE.count(1),
    )


def test_count_zeros_and_ones_empty():
    assert count_zeros_and_ones([]) == (0, 0)


def test_extreme_order_source_example():
    assert extreme_order(list(range(1, 11))) == [1, 10, 2, 9, 3, 8, 4, 7, 5, 6]


def test_extreme_order_odd_keeps_every_element():
    values = [1, 2, 3, 4, 5]
    result = extreme_order(values)
    assert sorted(result) == values
    assert result[:2] == [1, 5]
    assert values == [1, 2, 3, 4, 5]


def test_three_way_partition_all_zero():
    assert three_way_partition([0, 0, 0, 0]) == [0, 0, 0, 0]


@pytest.mark.parametrize("values", [[2, 0, 1], [1, 0, 2, 1, 0], [1, 1, 0]])
def test_three_way_partition_is_permutation(values):
    result = three_way_partition(values)
    assert sorted(result) == sorted(values)
    assert result[0] == min(values)


def test_three_way_partition_rejects_other_values():
    with pytest.raises(ValueError):
        three_way_partition([0, 5, 1])


def test_find_unique():
    assert find_unique([7, 3, 9, 3, 7]) == 9


def test_find_unique_empty_is_zero():
    assert find_unique([]) == 0


def test_min_max_matches_builtins():
    values = [12, -655, 12, 54, 354, 14, 2415, 21, 412, 314364]
    assert min_max(values) == (min(values), max(values))


def test_min_max_increasing_sequence():
    values = [1, 2, 3]
    assert min_max(values) == (1, 3)


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])


def test_all_pairs_structure():
    values = [1, 2, 3, 4]
    pairs = all_pairs(values)
    n = len(values)
    half = n * (n + 1) // 2
    assert len(pairs) == 2 * half
    assert pairs[0] == (1, 1)
    assert all(a <= b for a, b in pairs[:half])
    assert all(a >= b for a, b in pairs[half:])
    assert pairs[half] == (4, 4)


def test_reverse_round_trip():
    values = [10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    assert reverse(values) == values[::-1]
    assert reverse(reverse(values)) == values


def test_rotate_by_one():
    assert rotate_by_one([1, 2, 3, 4, 5, 6]) == [6, 1, 2, 3, 4, 5]


def test_rotate_by_one_empty():
    assert rotate_by_one([]) == []


def test_partition_negatives_invariant():
    values = [-1, 0, -1, 0, 3, -4, 0, 4, 6, -1, 3, -1, -4, -3, 1, -1]
    result = partition_negatives(values)
    negatives = sum(1 for v in values if v < 0)
    assert sorted(result) == sorted(values)
    assert all(v < 0 for v in result[:negatives])
    assert all(v >= 0 for v in result[negatives:])


def test_sort_zero_one():
    values = [0, 0, 1, 1, 0, 1, 0, 1, 0, 1, 0]
    assert sort_zero_one(values) == sorted(values)


def test_array_sum():
    values = [1, 5, 6, 7, 9, 40, 41, 20]
    assert array_sum(values) == sum(values)