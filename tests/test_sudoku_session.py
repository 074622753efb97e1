import threading

import pytest

from sudoku_lab.puzzle.sudoku import worker as worker_module
from sudoku_lab.puzzle.sudoku.grid import givens_of, is_complete_solution
from sudoku_lab.puzzle.sudoku.session import (
    MAX_MISTAKES,
    SessionStatus,
    SudokuSession,
    describe_level,
)
from sudoku_lab.puzzle.sudoku.worker import PuzzleWorker

SOLUTION = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]
PUZZLE = [
    [0, 2, 3, 4],
    [3, 0, 1, 2],
    [2, 1, 0, 3],
    [4, 3, 2, 0],
]


@pytest.fixture
def session():
    return SudokuSession(PUZZLE, SOLUTION, level=4)


def test_givens_cannot_be_edited(session):
    assert not session.enter(0, 1, 1)
    assert session.board[0][1] == 2
    assert session.mistakes == 0


def test_correct_and_wrong_entries(session):
    assert session.enter(0, 0, 1)
    assert session.mistakes == 0
    assert session.enter(1, 1, 2)
    assert session.mistakes == 1
    assert session.conflicts() == {(1, 1)}
    assert session.enter(1, 1, 0)
    assert session.conflicts() == set()
    assert session.status is SessionStatus.PLAYING


def test_out_of_range_moves_are_refused(session):
    assert not session.enter(4, 0, 1)
    assert not session.enter(0, 0, 5)
    assert not session.enter(0, 0, -1)


def test_too_many_mistakes_ends_the_game(session):
    for _ in range(MAX_MISTAKES):
        assert session.enter(0, 0, 2)
    assert session.status is SessionStatus.LOST
    assert not session.enter(1, 1, 4)

    session.reset()
    assert session.mistakes == 0
    assert session.board == PUZZLE
    assert session.status is SessionStatus.PLAYING


def test_full_board_with_errors():
    puzzle = [row[:] for row in SOLUTION]
    puzzle[0][0] = 0
    puzzle[1][1] = 0
    session = SudokuSession(puzzle, SOLUTION)
    session.enter(0, 0, 2)
    session.enter(1, 1, 4)
    assert session.status is SessionStatus.FULL_WITH_ERRORS


def test_hints_solve_the_board(session):
    cells = []
    while True:
        cell = session.apply_hint()
        if cell is None:
            break
        cells.append(cell)
    assert cells == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert session.hints_used == 4
    assert session.status is SessionStatus.SOLVED


def test_hint_corrects_wrong_entry(session):
    session.enter(0, 0, 4)
    assert session.apply_hint() == (0, 0)
    assert session.board[0][0] == 1


def test_board_is_a_copy_of_the_puzzle(session):
    session.enter(0, 0, 1)
    assert PUZZLE[0][0] == 0
    assert session.puzzle[0][0] == 0


def test_start_generates_a_game():
    session = SudokuSession.start(2, 4, seed=3)
    assert session.size == 4
    assert session.board == session.puzzle
    assert session.board is not session.puzzle
    assert session.givens == givens_of(session.puzzle)
    assert is_complete_solution(session.solution)


def test_describe_level():
    assert describe_level(1) == "Very relaxed"
    assert describe_level(5) == "Classic"
    assert describe_level(0) == "Very relaxed"
    assert describe_level(12) == "Hardcore"


def test_worker_generates_in_background():
    with PuzzleWorker(seed=4) as worker:
        puzzle, solution = worker.request(3, 4).result(timeout=30)
    assert is_complete_solution(solution)
    assert any(0 in row for row in puzzle)


def test_worker_suppresses_duplicate_requests(monkeypatch):
    release = threading.Event()

    def slow_generate(level, size, *, rng=None):
        release.wait(timeout=10)
        return [[level]], [[size]]

    monkeypatch.setattr(worker_module, "generate_puzzle", slow_generate)
    worker = PuzzleWorker()
    try:
        first = worker.request(1, 4)
        second = worker.request(9, 9)
        assert first is second
        assert worker.busy
        release.set()
        assert first.result(timeout=10) == ([[1]], [[4]])
        assert not worker.busy
        third = worker.request(2, 4)
        assert third is not first
        assert third.result(timeout=10) == ([[2]], [[4]])
    finally:
        release.set()
        worker.shutdown()
