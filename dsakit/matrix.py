"""Matrix helpers: sorted spiral layout, addition and text formatting."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence


def _spiral_positions(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, left, bottom, right = 0, 0, rows, cols
    while top < bottom and left < right:
        for col in range(left, right):
            yield top, col
        top += 1
        for row in range(top, bottom):
            yield row, right - 1
        right -= 1
        if top < bottom:
            for col in range(right - 1, left - 1, -1):
                yield bottom - 1, col
            bottom -= 1
        if left < right:
            for row in range(bottom - 1, top - 1, -1):
                yield row, left
            left += 1


def _shape(matrix: Sequence[Sequence]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def spiral_fill(values: Iterable, rows: int, cols: int) -> list[list]:
    """Lay ``values`` out clockwise from the top-left corner of a rows x cols grid."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    items = list(values)
    if len(items) != rows * cols:
        raise ValueError(f"expected {rows * cols} values, got {len(items)}")
    grid: list[list] = [[None] * cols for _ in range(rows)]
    for (row, col), value in zip(_spiral_positions(rows, cols), items):
        grid[row][col] = value
    return grid


def sorted_spiral(matrix: Sequence[Sequence]) -> list[list]:
    """Return a matrix of the same shape holding the sorted entries in spiral order."""
    rows, cols = _shape(matrix)
    return spiral_fill(sorted(value for row in matrix for value in row), rows, cols)


def add_matrices(first: Sequence[Sequence], second: Sequence[Sequence]) -> list[list]:
    """Return the element-wise sum of two matrices of equal shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(left, right)] for left, right in zip(first, second)]


def format_matrix(matrix: Iterable[Iterable]) -> str:
    """Render a matrix one row per line, each entry followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)