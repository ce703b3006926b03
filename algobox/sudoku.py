"""Backtracking solver for 9x9 sudoku grids, with 0 marking an empty cell."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

SIZE = 9
BOX = 3

PUZZLE: tuple[tuple[int, ...], ...] = (
    (3, 0, 6, 5, 0, 8, 4, 0, 0),
    (5, 2, 0, 0, 0, 0, 0, 0, 0),
    (0, 8, 7, 0, 0, 0, 0, 3, 1),
    (0, 0, 3, 0, 1, 0, 0, 8, 0),
    (9, 0, 0, 8, 6, 3, 0, 0, 5),
    (0, 5, 0, 0, 9, 0, 6, 0, 0),
    (1, 3, 0, 0, 0, 0, 2, 5, 0),
    (0, 0, 0, 0, 0, 0, 0, 7, 4),
    (0, 0, 5, 2, 0, 6, 3, 0, 0),
)

Grid = Sequence[Sequence[int]]


def _validate(grid: Grid) -> None:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a sudoku grid must be 9 rows of 9 cells")
    if any(not 0 <= cell <= SIZE for row in grid for cell in row):
        raise ValueError("cells must hold 0 (empty) or a digit 1-9")


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """True if ``num`` is not yet in the row, column or box of the cell."""
    if num in grid[row]:
        return False
    if any(line[col] == num for line in grid):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(num not in grid[r][left:left + BOX] for r in range(top, top + BOX))


def _first_empty(board: list[list[int]]) -> Optional[tuple[int, int]]:
    for r, line in enumerate(board):
        for c, cell in enumerate(line):
            if cell == 0:
                return r, c
    return None


def _backtrack(board: list[list[int]]) -> bool:
    empty = _first_empty(board)
    if empty is None:
        return True
    row, col = empty
    for num in range(1, SIZE + 1):
        if is_valid_placement(board, row, col, num):
            board[row][col] = num
            if _backtrack(board):
                return True
            board[row][col] = 0
    return False


def solve(grid: Grid) -> Optional[list[list[int]]]:
    """Return a solved copy of ``grid``, or None if no solution exists.

    Empty cells are filled in row-major order, trying digits 1 to 9.
    The given clues are not checked against each other.
    """
    _validate(grid)
    board = [list(row) for row in grid]
    return board if _backtrack(board) else None


def format_grid(grid: Grid) -> str:
    """Render the grid with bars between boxes and rules under rows 3 and 6."""
    lines = []
    for r, row in enumerate(grid):
        text = ""
        for c, cell in enumerate(row):
            if c in (3, 6):
                text += " | "
            text += f"{cell} "
        lines.append(text)
        if r in (2, 5):
            lines.append("---" * SIZE)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the built-in puzzle and print the result."""
    parser = argparse.ArgumentParser(description="Solve a sudoku puzzle by backtracking.")
    parser.parse_args(argv)
    solution = solve(PUZZLE)
    if solution is None:
        print("No solution exists", end="")
        return 1
    print(format_grid(solution), end="")
    return 0