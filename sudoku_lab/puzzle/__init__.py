"""Puzzle generation and evaluation toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
    "SudokuGenerator",
    "SudokuEvaluator",
    "SudokuPuzzleRecord",
    "SudokuEvaluationResult",
    "CellEvaluation",
    "SudokuSession",
    "PuzzleWorker",
]

from .base import AbstractPuzzleEvaluator, AbstractPuzzleGenerator
from .sudoku import (
    SudokuGenerator,
    SudokuEvaluator,
    SudokuPuzzleRecord,
    SudokuEvaluationResult,
    CellEvaluation,
    SudokuSession,
    PuzzleWorker,
)
