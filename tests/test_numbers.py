import math
from itertools import permutations

import pytest

from algonotes.numbers import (
    binomial_coefficient,
    count_odd_even_splits,
    is_power_of_four,
    nth_ugly_number,
    pascal_triangle,
    permutation_sequence,
)


def test_first_ugly_numbers_from_definition():
    expected = [1, 2, 3, 4, 5, 6, 8, 9, 10, 12, 15]
    assert [nth_ugly_number(i) for i in range(1, 12)] == expected


def _only_small_factors(value):
    for p in (2, 3, 5):
        while value % p == 0:
            value //= p
    return value == 1


def test_ugly_numbers_are_increasing_and_smooth():
    seq = [nth_ugly_number(i) for i in range(1, 80)]
    assert all(a < b for a, b in zip(seq, seq[1:]))
    assert all(_only_small_factors(v) for v in seq)


def test_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


@pytest.mark.parametrize("n,k", [(0, 0), (5, 2), (10, 3), (20, 10), (30, 29)])
def test_binomial_matches_math_comb(n, k):
    assert binomial_coefficient(n, k) == math.comb(n, k)


def test_binomial_rejects_invalid():
    with pytest.raises(ValueError):
        binomial_coefficient(3, 4)
    with pytest.raises(ValueError):
        binomial_coefficient(3, -1)


def test_pascal_triangle_rows():
    rows = pascal_triangle(7)
    assert len(rows) == 7
    for index, row in enumerate(rows):
        assert len(row) == index + 1
        assert row == row[::-1]
        assert sum(row) == 2 ** index


def test_pascal_triangle_empty():
    assert pascal_triangle(0) == []


def test_permutation_sequence_matches_itertools():
    ordered = ["".join(map(str, p)) for p in permutations(range(1, 5))]
    assert [permutation_sequence(4, k) for k in range(1, 25)] == ordered


def test_permutation_sequence_extremes():
    assert permutation_sequence(1, 1) == "1"
    assert permutation_sequence(6, 1) == "123456"
    assert permutation_sequence(6, math.factorial(6)) == "654321"


def test_permutation_sequence_rejects_out_of_range():
    with pytest.raises(ValueError):
        permutation_sequence(3, 7)
    with pytest.raises(ValueError):
        permutation_sequence(3, 0)


def test_count_odd_even_splits_samples():
    assert count_odd_even_splits(1) == 0
    assert count_odd_even_splits(11) == 5


def test_count_odd_even_splits_bounded():
    for ts in range(1, 200):
        result = count_odd_even_splits(ts)
        assert 0 <= result < ts


def test_count_odd_even_splits_power_of_two_has_none():
    for exponent in range(0, 12):
        assert count_odd_even_splits(2 ** exponent) == 0


def test_count_odd_even_splits_rejects_zero():
    with pytest.raises(ValueError):
        count_odd_even_splits(0)


@pytest.mark.parametrize("n", [1, 4, 16, 64, 4 ** 10])
def test_is_power_of_four_true(n):
    assert is_power_of_four(n) is True


@pytest.mark.parametrize("n", [0, 2, 8, 12, 32, -4])
def test_is_power_of_four_false(n):
    assert is_power_of_four(n) is False