"""Play-state bookkeeping for a single Sudoku game."""

from __future__ import annotations

import enum
import logging
import random
from typing import Dict, Optional, Set

from .evaluator import find_conflicts, is_solved, pick_hint_cell
from .generator import clamp_level, generate_puzzle
from .grid import BoxSize, Cell, Grid, box_size_for, clone_grid, givens_of

logger = logging.getLogger(__name__)

MAX_MISTAKES = 3

LEVEL_LABELS: Dict[int, str] = {
    1: "Very relaxed",
    2: "Easy ride",
    3: "No rush",
    4: "Balanced",
    5: "Classic",
    6: "Advanced",
    7: "Challenging",
    8: "Expert",
    9: "Flawless",
    10: "Hardcore",
}


def describe_level(level: int) -> str:
    return LEVEL_LABELS[clamp_level(level)]


class SessionStatus(enum.Enum):
    PLAYING = "playing"
    SOLVED = "solved"
    FULL_WITH_ERRORS = "full_with_errors"
    LOST = "lost"


class SudokuSession:
    """A puzzle, its solution and the player's board.

    Givens are fixed when the session is created and can never be edited.
    """

    def __init__(
        self,
        puzzle: Grid,
        solution: Grid,
        *,
        level: int = 5,
        max_mistakes: int = MAX_MISTAKES,
    ) -> None:
        self.level = clamp_level(level)
        self.size = len(solution)
        self.box: BoxSize = box_size_for(self.size)
        self.puzzle = clone_grid(puzzle)
        self.solution = clone_grid(solution)
        self.board = clone_grid(puzzle)
        self.givens: Set[Cell] = givens_of(puzzle)
        self.max_mistakes = max_mistakes
        self.mistakes = 0
        self.hints_used = 0

    @classmethod
    def start(cls, level: int, size: int, *, seed: Optional[int] = None) -> "SudokuSession":
        puzzle, solution = generate_puzzle(level, size, rng=random.Random(seed))
        return cls(puzzle, solution, level=level)

    @property
    def game_over(self) -> bool:
        return self.mistakes >= self.max_mistakes

    @property
    def status(self) -> SessionStatus:
        if self.game_over:
            return SessionStatus.LOST
        if is_solved(self.board, self.solution):
            return SessionStatus.SOLVED
        if all(value != 0 for row in self.board for value in row):
            return SessionStatus.FULL_WITH_ERRORS
        return SessionStatus.PLAYING

    def enter(self, row: int, col: int, value: int) -> bool:
        """Write ``value`` at (row, col); 0 clears the cell.

        Returns False when the move is refused: the cell is a given or out of
        range, the value is outside ``0..size``, or the game is over.
        """

        if self.game_over or (row, col) in self.givens:
            return False
        if not (0 <= row < self.size and 0 <= col < self.size and 0 <= value <= self.size):
            return False
        self.board[row][col] = value
        if value != 0 and value != self.solution[row][col]:
            self.mistakes += 1
            logger.debug("Mistake %d/%d at (%d, %d)", self.mistakes, self.max_mistakes, row, col)
        return True

    def apply_hint(self) -> Optional[Cell]:
        cell = pick_hint_cell(self.board, self.solution)
        if cell is None or cell in self.givens:
            return None
        row, col = cell
        self.board[row][col] = self.solution[row][col]
        self.hints_used += 1
        return cell

    def reset(self) -> None:
        self.board = clone_grid(self.puzzle)
        self.mistakes = 0

    def conflicts(self) -> Set[Cell]:
        return find_conflicts(self.board, self.solution)


__all__ = [
    "LEVEL_LABELS",
    "MAX_MISTAKES",
    "SessionStatus",
    "SudokuSession",
    "describe_level",
]
