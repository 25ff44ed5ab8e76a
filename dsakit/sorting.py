"""Comparison and distribution sorts over integer sequences."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, MutableSequence, Optional


@dataclass(frozen=True)
class QuickSortResult:
    """Sorted values and how many times an element was moved below the pivot."""

    values: list
    comparisons: int


def _sift_down(heap: MutableSequence, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Return the values in ascending order using a binary max-heap."""
    heap = list(values)
    size = len(heap)
    for root in reversed(range(size // 2)):
        _sift_down(heap, size, root)
    for end in reversed(range(1, size)):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def insertion_sort(values: Iterable) -> list:
    """Return the values in ascending order, inserting each into a sorted prefix."""
    result: list = []
    for value in values:
        position = len(result)
        while position > 0 and result[position - 1] > value:
            position -= 1
        result.insert(position, value)
    return result


def _require_non_negative(items: list) -> None:
    if any(item < 0 for item in items):
        raise ValueError("radix sorting needs non-negative integers")


def counting_sort_by_digit(values: Iterable[int], place: int) -> list[int]:
    """Stable sort of non-negative integers by the decimal digit at ``place``.

    ``place`` is a power of ten: 1 for units, 10 for tens and so on.
    """
    if place <= 0:
        raise ValueError("place must be a positive power of ten")
    items = list(values)
    _require_non_negative(items)
    buckets: list[list[int]] = [[] for _ in range(10)]
    for item in items:
        buckets[(item // place) % 10].append(item)
    return [item for bucket in buckets for item in bucket]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order, least significant digit first."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    largest = max(items)
    place = 1
    while largest // place > 0:
        items = counting_sort_by_digit(items, place)
        place *= 10
    return items


def randomized_quick_sort(
    values: Iterable, rng: Optional[random.Random] = None
) -> QuickSortResult:
    """Quick sort with a uniformly random pivot in every partition.

    The comparison count grows each time an element smaller than the pivot
    is swapped into the lower part.
    """
    rng = rng if rng is not None else random.Random()
    items = list(values)
    comparisons = 0
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_at = rng.randrange(low, high + 1)
        items[high], items[pivot_at] = items[pivot_at], items[high]
        pivot = items[high]
        index = low
        for current in range(low, high):
            if items[current] < pivot:
                items[current], items[index] = items[index], items[current]
                index += 1
                comparisons += 1
        items[high], items[index] = items[index], items[high]
        pending.append((index + 1, high))
        pending.append((low, index - 1))
    return QuickSortResult(values=items, comparisons=comparisons)