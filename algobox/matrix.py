"""Helpers for rectangular matrices stored as lists of rows."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from typing import Any, Optional

Matrix = Sequence[Sequence[Any]]


def _check_rectangular(matrix: Matrix) -> int:
    """Return the column count, raising ValueError for jagged input."""
    if not matrix:
        return 0
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return width


def filled(rows: int, cols: int, value: Any) -> list[list[Any]]:
    """Build a rows x cols matrix in which every cell holds ``value``."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[value] * cols for _ in range(rows)]


def flatten(matrix: Matrix) -> list[Any]:
    """Return the elements in row-major order; rows may differ in length."""
    return [item for row in matrix for item in row]


def transpose(matrix: Matrix) -> list[list[Any]]:
    """Return the transpose of a rectangular matrix."""
    _check_rectangular(matrix)
    return [list(column) for column in zip(*matrix)]


def rotate_clockwise(matrix: Matrix) -> list[list[Any]]:
    """Return the matrix turned a quarter turn clockwise."""
    _check_rectangular(matrix)
    return [list(row) for row in zip(*reversed(matrix))]


def rotate_anticlockwise(matrix: Matrix) -> list[list[Any]]:
    """Return the matrix turned a quarter turn anticlockwise.

    The last column becomes the first row.
    """
    _check_rectangular(matrix)
    return [list(column) for column in zip(*matrix)][::-1]


def snake_order(matrix: Matrix) -> list[Any]:
    """Read even rows left to right and odd rows right to left."""
    result: list[Any] = []
    for index, row in enumerate(matrix):
        result.extend(row if index % 2 == 0 else reversed(row))
    return result


def boundary_elements(matrix: Matrix) -> list[Any]:
    """Return the outer ring of the matrix, clockwise from the top-left."""
    cols = _check_rectangular(matrix)
    if not matrix or cols == 0:
        return []
    if len(matrix) == 1:
        return list(matrix[0])
    if cols == 1:
        return [row[0] for row in matrix]
    top = list(matrix[0])
    right = [row[-1] for row in matrix[1:]]
    bottom = list(reversed(matrix[-1][:-1]))
    left = [row[0] for row in reversed(matrix[1:-1])]
    return top + right + bottom + left


def spiral_order(matrix: Matrix) -> list[Any]:
    """Return the elements in clockwise spiral order."""
    cols = _check_rectangular(matrix)
    top, left, bottom, right = 0, 0, len(matrix) - 1, cols - 1
    result: list[Any] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def search_sorted(matrix: Matrix, x: Any) -> Optional[tuple[int, int]]:
    """Find ``x`` in a matrix sorted along rows and columns.

    Starts in the top-right corner and walks left or down. Returns the
    ``(row, column)`` of a match, or None when ``x`` is absent.
    """
    cols = _check_rectangular(matrix)
    row, col = 0, cols - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == x:
            return row, col
        if value > x:
            col -= 1
        else:
            row += 1
    return None


def median(matrix: Matrix) -> int:
    """Median of an integer matrix whose rows are each sorted.

    Uses a binary search over the value range. For an even number of
    elements this yields the lower median.
    """
    cols = _check_rectangular(matrix)
    if not matrix or cols == 0:
        raise ValueError("median of an empty matrix")
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    wanted = (len(matrix) * cols + 1) // 2
    while low < high:
        mid = low + (high - low) // 2
        at_most_mid = sum(bisect_right(row, mid) for row in matrix)
        if at_most_mid < wanted:
            low = mid + 1
        else:
            high = mid
    return low