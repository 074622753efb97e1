import random

import pytest

from sudoku_lab.puzzle.sudoku.grid import (
    BoxSize,
    box_size_for,
    clone_grid,
    create_blank_grid,
    is_complete_solution,
)
from sudoku_lab.puzzle.sudoku.solver import (
    count_solutions,
    generate_full_grid,
    has_unique_solution,
    solve_grid,
)

SOLVED_4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]


@pytest.mark.parametrize("size", [4, 6, 9])
def test_solve_blank_grid_produces_valid_solution(size):
    box = box_size_for(size)
    grid = create_blank_grid(size)
    assert solve_grid(grid, size, box, random.Random(size))
    assert is_complete_solution(grid, box)


def test_solve_without_rng_uses_process_random():
    grid = create_blank_grid(4)
    assert solve_grid(grid, 4, BoxSize(2, 2))
    assert is_complete_solution(grid)


def test_solve_completes_partial_grid_to_its_only_solution():
    grid = clone_grid(SOLVED_4)
    for row, col in [(0, 0), (1, 2), (2, 1), (3, 3), (0, 3)]:
        grid[row][col] = 0
    assert solve_grid(grid, 4, BoxSize(2, 2), random.Random(0))
    assert grid == SOLVED_4


def test_seeds_give_reproducible_and_varied_grids():
    box = BoxSize(3, 3)
    first = generate_full_grid(9, box, random.Random(1))
    again = generate_full_grid(9, box, random.Random(1))
    other = generate_full_grid(9, box, random.Random(2))
    assert first == again
    assert first != other


def test_generate_full_grid_rejects_box_that_cannot_tile():
    with pytest.raises(RuntimeError):
        generate_full_grid(4, BoxSize(2, 4), random.Random(0))


def test_count_solutions_on_full_grid():
    assert count_solutions(clone_grid(SOLVED_4), 4, BoxSize(2, 2)) == 1


def test_count_solutions_stops_at_limit_and_restores_grid():
    grid = create_blank_grid(4)
    assert count_solutions(grid, 4, BoxSize(2, 2), limit=2) == 2
    assert count_solutions(grid, 4, BoxSize(2, 2), limit=5) == 5
    assert grid == create_blank_grid(4)


def test_count_solutions_dead_end():
    grid = [
        [0, 2, 3, 4],
        [3, 4, 0, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    assert count_solutions(grid, 4, BoxSize(2, 2)) == 0


def test_has_unique_solution_leaves_grid_untouched():
    unique = clone_grid(SOLVED_4)
    unique[0][0] = 0
    unique[3][3] = 0
    before = clone_grid(unique)
    assert has_unique_solution(unique, 4, BoxSize(2, 2))
    assert unique == before

    # Rows 0-1 and columns 0, 2 form a swappable rectangle.
    ambiguous = clone_grid(SOLVED_4)
    for row, col in [(0, 0), (0, 2), (1, 0), (1, 2)]:
        ambiguous[row][col] = 0
    assert not has_unique_solution(ambiguous, 4, BoxSize(2, 2))
