"""Randomized backtracking solver and bounded solution counter."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .grid import BoxSize, Grid, create_blank_grid, find_empty, is_valid

logger = logging.getLogger(__name__)

SOLUTION_LIMIT = 2


def solve_grid(grid: Grid, size: int, box: BoxSize, rng: Optional[random.Random] = None) -> bool:
    """Fill ``grid`` in place, trying digits in a shuffled order at every cell.

    Returns True once every cell holds a digit. On failure every cell this
    call filled has been reset to 0.
    """

    shuffle = (rng or random).shuffle
    digits: List[int] = list(range(1, size + 1))

    def fill() -> bool:
        cell = find_empty(grid, size)
        if cell is None:
            return True
        row, col = cell
        candidates = digits[:]
        shuffle(candidates)
        for digit in candidates:
            if is_valid(grid, row, col, digit, size, box):
                grid[row][col] = digit
                if fill():
                    return True
                grid[row][col] = 0
        return False

    return fill()


def count_solutions(grid: Grid, size: int, box: BoxSize, limit: int = SOLUTION_LIMIT) -> int:
    """Count completions of ``grid``, stopping as soon as ``limit`` are found.

    The grid is mutated during the search and restored before returning.
    """

    def count() -> int:
        cell = find_empty(grid, size)
        if cell is None:
            return 1
        row, col = cell
        solutions = 0
        for digit in range(1, size + 1):
            if is_valid(grid, row, col, digit, size, box):
                grid[row][col] = digit
                solutions += count()
                grid[row][col] = 0
                if solutions >= limit:
                    break
        return solutions

    return count()


def has_unique_solution(grid: Grid, size: int, box: BoxSize) -> bool:
    scratch = [row[:] for row in grid]
    return count_solutions(scratch, size, box, limit=SOLUTION_LIMIT) == 1


def generate_full_grid(size: int, box: BoxSize, rng: Optional[random.Random] = None) -> Grid:
    grid = create_blank_grid(size)
    if not solve_grid(grid, size, box, rng):
        raise RuntimeError(f"box {box.rows}x{box.cols} cannot tile a {size}x{size} grid")
    logger.debug("Filled a %dx%d grid", size, size)
    return grid


__all__ = [
    "SOLUTION_LIMIT",
    "count_solutions",
    "generate_full_grid",
    "has_unique_solution",
    "solve_grid",
]
