"""Searching and selection over arrays and sorted matrices."""

from __future__ import annotations

from typing import Sequence


def binary_search(values: Sequence, target) -> int:
    """Return an index of ``target`` in ascending ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def search_sorted_matrix(matrix: Sequence[Sequence], target) -> bool:
    """Tell whether ``target`` is in a matrix whose rows and columns ascend."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    current = best = values[0]
    for value in values[1:]:
        current = value if current < 0 else current + value
        best = max(best, current)
    return best


def second_largest_and_smallest(values: Sequence[int]) -> tuple:
    """Return the second entry from the top and from the bottom of the ordered values."""
    if len(values) < 2:
        raise ValueError("at least two values are needed")
    descending = sorted(values, reverse=True)
    return descending[1], descending[-2]


def satisfy_equation(values: Sequence[int]) -> list[int]:
    """Find indices a, b, c, d with values[a] + values[b] == values[c] + values[d].

    The lexicographically smallest such index list is returned, or
    ``[-1, -1, -1, -1]`` when no two disjoint pairs share a sum.
    """
    first_pair: dict = {}
    best: list[int] | None = None
    count = len(values)
    for i in range(count - 1):
        for j in range(i + 1, count):
            total = values[i] + values[j]
            if total not in first_pair:
                first_pair[total] = (i, j)
                continue
            a, b = first_pair[total]
            if {a, b} & {i, j}:
                continue
            candidate = [a, b, i, j]
            if best is None or candidate < best:
                best = candidate
    return best if best is not None else [-1, -1, -1, -1]


def maximum_toys(costs: Sequence[int], budget: int) -> int:
    """Return how many toys can be bought with ``budget``, cheapest first."""
    spent = 0
    count = 0
    for cost in sorted(costs):
        if spent + cost <= budget:
            spent += cost
            count += 1
    return count