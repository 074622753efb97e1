"""Grid model and placement rules for variable-size Sudoku boards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

Grid = List[List[int]]
Cell = Tuple[int, int]

SUPPORTED_SIZES = (4, 6, 9, 12, 16)

_KNOWN_BOXES = {
    4: (2, 2),
    6: (2, 3),
    9: (3, 3),
    12: (3, 4),
    16: (4, 4),
}


@dataclass(frozen=True)
class BoxSize:
    """Shape of a single box: ``rows`` tall and ``cols`` wide."""

    rows: int
    cols: int

    def to_list(self) -> List[int]:
        return [self.rows, self.cols]


def box_size_for(size: int) -> BoxSize:
    """Return the box shape used for an ``size`` x ``size`` grid.

    Sizes outside the known table fall back to the tallest divisor of
    ``size`` that does not exceed its square root, so the boxes always tile
    the grid exactly. Sizes with no such divisor other than 1 (primes) have
    no box decomposition and are rejected.
    """

    if size in _KNOWN_BOXES:
        rows, cols = _KNOWN_BOXES[size]
        return BoxSize(rows, cols)
    if size < 2:
        raise ValueError(f"grid size must be at least 2, got {size}")
    rows = next(r for r in range(math.isqrt(size), 0, -1) if size % r == 0)
    if rows == 1:
        raise ValueError(f"grid size {size} has no box decomposition")
    return BoxSize(rows, size // rows)


def create_blank_grid(size: int = 9) -> Grid:
    if size <= 0:
        raise ValueError("size must be positive")
    return [[0] * size for _ in range(size)]


def clone_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]


def is_valid(grid: Sequence[Sequence[int]], row: int, col: int, digit: int, size: int, box: BoxSize) -> bool:
    """Whether ``digit`` may go at (row, col) without repeating in its row, column or box."""

    for i in range(size):
        if grid[row][i] == digit or grid[i][col] == digit:
            return False
    start_row = row - row % box.rows
    start_col = col - col % box.cols
    for r in range(start_row, start_row + box.rows):
        for c in range(start_col, start_col + box.cols):
            if grid[r][c] == digit:
                return False
    return True


def find_empty(grid: Sequence[Sequence[int]], size: int) -> Optional[Cell]:
    for row in range(size):
        for col in range(size):
            if grid[row][col] == 0:
                return row, col
    return None


def givens_of(puzzle: Sequence[Sequence[int]]) -> Set[Cell]:
    """Coordinates of every pre-filled cell of ``puzzle``."""
    return {(r, c) for r, row in enumerate(puzzle) for c, value in enumerate(row) if value != 0}


def count_blanks(grid: Sequence[Sequence[int]]) -> int:
    return sum(value == 0 for row in grid for value in row)


def has_shape(grid: Sequence[Sequence[int]], size: int) -> bool:
    return len(grid) == size and all(len(row) == size for row in grid)


def is_complete_solution(grid: Sequence[Sequence[int]], box: Optional[BoxSize] = None) -> bool:
    """Check that every row, column and box is a permutation of ``1..N``."""

    size = len(grid)
    if size == 0 or not has_shape(grid, size):
        return False
    if box is None:
        try:
            box = box_size_for(size)
        except ValueError:
            return False
    digits = set(range(1, size + 1))
    for row in grid:
        if set(row) != digits:
            return False
    for col in range(size):
        if {grid[row][col] for row in range(size)} != digits:
            return False
    for start_row in range(0, size, box.rows):
        for start_col in range(0, size, box.cols):
            values = {
                grid[r][c]
                for r in range(start_row, start_row + box.rows)
                for c in range(start_col, start_col + box.cols)
            }
            if values != digits:
                return False
    return True


__all__ = [
    "BoxSize",
    "Cell",
    "Grid",
    "SUPPORTED_SIZES",
    "box_size_for",
    "clone_grid",
    "count_blanks",
    "create_blank_grid",
    "find_empty",
    "givens_of",
    "has_shape",
    "is_complete_solution",
    "is_valid",
]
