import random

import pytest

from dsakit.sorting import (
    QuickSortResult,
    counting_sort_by_digit,
    heap_sort,
    insertion_sort,
    radix_sort,
    randomized_quick_sort,
)

SAMPLES = [
    [],
    [7],
    [12, 11, 13, 5, 6, 7],
    [12, 11, 13, 5, 6],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [3, 3, 1, 1, 2, 2],
    [0, 0, 0],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("values", SAMPLES)
def test_heap_sort_orders(values):
    assert heap_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_insertion_sort_orders(values):
    assert insertion_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_radix_sort_orders(values):
    assert radix_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_orders(values):
    result = randomized_quick_sort(values, random.Random(1))
    assert result.values == sorted(values)


def test_sorts_handle_negatives_except_radix():
    values = [4, -2, 9, -7, 0]
    assert heap_sort(values) == sorted(values)
    assert insertion_sort(values) == sorted(values)
    with pytest.raises(ValueError):
        radix_sort(values)


def test_sorts_leave_input_untouched():
    values = [5, 3, 9, 1]
    original = list(values)
    heap_sort(values)
    insertion_sort(values)
    radix_sort(values)
    randomized_quick_sort(values, random.Random(0))
    assert values == original


def test_counting_sort_is_stable_by_digit():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    result = counting_sort_by_digit(values, 1)
    digits = [value % 10 for value in result]
    assert digits == sorted(digits)
    for digit in set(digits):
        same = [value for value in values if value % 10 == digit]
        assert [value for value in result if value % 10 == digit] == same


def test_counting_sort_rejects_bad_input():
    with pytest.raises(ValueError):
        counting_sort_by_digit([1, 2], 0)
    with pytest.raises(ValueError):
        counting_sort_by_digit([-1, 2], 1)


def test_quick_sort_is_reproducible_with_seed():
    values = [random.Random(3).randint(0, 100) for _ in range(50)]
    first = randomized_quick_sort(values, random.Random(42))
    second = randomized_quick_sort(values, random.Random(42))
    assert first == second
    assert isinstance(first, QuickSortResult)


def test_quick_sort_equal_values_make_no_comparisons():
    result = randomized_quick_sort([4, 4, 4, 4], random.Random(5))
    assert result.values == [4, 4, 4, 4]
    assert result.comparisons == 0


def test_quick_sort_comparisons_bounded():
    values = list(range(30))
    random.Random(9).shuffle(values)
    result = randomized_quick_sort(values, random.Random(9))
    n = len(values)
    assert 0 < result.comparisons <= n * (n - 1) // 2