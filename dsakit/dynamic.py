"""Dynamic-programming solutions over strings and integer sequences."""

from __future__ import annotations

from itertools import takewhile
from typing import Sequence


def _lcs_table(x: Sequence, y: Sequence) -> list[list[int]]:
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, left in enumerate(x, 1):
        row, above = table[i], table[i - 1]
        for j, right in enumerate(y, 1):
            if left == right:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def lcs_length(x: Sequence, y: Sequence) -> int:
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    return _lcs_table(x, y)[len(x)][len(y)]


def lcs(x: str, y: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(x, y)
    i, j = len(x), len(y)
    picked: list[str] = []
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            picked.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_palindromic_subsequence_length(text: str) -> int:
    """Return the length of the longest subsequence of ``text`` that is a palindrome."""
    return lcs_length(text, text[::-1])


def common_suffix_length(x: Sequence, y: Sequence) -> int:
    """Return the length of the longest common substring ending at the end of both inputs."""
    pairs = zip(reversed(x), reversed(y))
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], pairs))


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items, each taken at most once, within ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def coin_change_ways(coins: Sequence[int], total: int) -> int:
    """Return how many multisets of ``coins`` (each usable without limit) sum to ``total``."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * total
    for coin in coins:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def subset_sum(values: Sequence[int], total: int) -> bool:
    """Tell whether some subset of ``values`` adds up to ``total``."""
    if total < 0:
        raise ValueError("total must not be negative")
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    reachable = [True] + [False] * total
    for value in values:
        for amount in range(total, value - 1, -1):
            if reachable[amount - value]:
                reachable[amount] = True
    return reachable[total]