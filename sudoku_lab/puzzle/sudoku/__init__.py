"""Sudoku puzzle toolkit."""

__all__ = [
    "BoxSize",
    "box_size_for",
    "clone_grid",
    "create_blank_grid",
    "is_valid",
    "solve_grid",
    "count_solutions",
    "generate_puzzle",
    "target_removals",
    "is_solved",
    "pick_hint_cell",
    "render_board",
    "SudokuGenerator",
    "SudokuEvaluator",
    "SudokuPuzzleRecord",
    "SudokuEvaluationResult",
    "CellEvaluation",
    "SudokuSession",
    "SessionStatus",
    "PuzzleWorker",
]

from .grid import BoxSize, box_size_for, clone_grid, create_blank_grid, is_valid
from .solver import count_solutions, solve_grid
from .generator import SudokuGenerator, SudokuPuzzleRecord, generate_puzzle, target_removals
from .evaluator import SudokuEvaluator, SudokuEvaluationResult, CellEvaluation, is_solved, pick_hint_cell
from .render import render_board
from .session import SessionStatus, SudokuSession
from .worker import PuzzleWorker
