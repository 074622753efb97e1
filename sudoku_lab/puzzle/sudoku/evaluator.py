"""Hint selection and validation of player grids against a stored solution."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set

from ..base import AbstractPuzzleEvaluator
from .grid import Cell, Grid, has_shape, is_complete_solution

logger = logging.getLogger(__name__)


def _same_shape(board: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> bool:
    return len(board) == len(solution) and all(
        len(row) == len(expected) for row, expected in zip(board, solution)
    )


def is_solved(board: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> bool:
    """True iff ``board`` has the shape of ``solution`` and matches it cell for cell."""

    if not _same_shape(board, solution):
        return False
    return all(list(row) == list(expected) for row, expected in zip(board, solution))


def pick_hint_cell(board: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> Optional[Cell]:
    """First cell, in row-major order, where ``board`` differs from ``solution``.

    Blank and wrongly filled cells both count. Returns None when the grids
    match or cannot be compared.
    """

    if not _same_shape(board, solution):
        return None
    for row, (values, expected) in enumerate(zip(board, solution)):
        for col, (value, want) in enumerate(zip(values, expected)):
            if value != want:
                return row, col
    return None


def find_conflicts(board: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> Set[Cell]:
    """Filled cells whose digit disagrees with the solution."""

    if not _same_shape(board, solution):
        return set()
    return {
        (row, col)
        for row, (values, expected) in enumerate(zip(board, solution))
        for col, (value, want) in enumerate(zip(values, expected))
        if value != 0 and value != want
    }


@dataclass
class CellEvaluation:
    """Per-cell comparison result."""

    row: int
    col: int
    expected: int
    predicted: Optional[int]
    is_correct: bool
    is_clue: bool

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "expected": self.expected,
            "predicted": self.predicted,
            "is_correct": self.is_correct,
            "is_clue": self.is_clue,
        }


@dataclass
class SudokuEvaluationResult:
    """Aggregate evaluation for a Sudoku puzzle."""

    puzzle_id: str
    correct_cells: int
    total_cells: int
    accuracy: float
    is_solved: bool
    is_valid_solution: bool
    hint_cell: Optional[Cell]
    cell_breakdown: List[CellEvaluation]

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "correct_cells": self.correct_cells,
            "total_cells": self.total_cells,
            "accuracy": self.accuracy,
            "is_solved": self.is_solved,
            "is_valid_solution": self.is_valid_solution,
            "hint_cell": list(self.hint_cell) if self.hint_cell is not None else None,
            "cell_breakdown": [cell.to_dict() for cell in self.cell_breakdown],
        }


class SudokuEvaluator(AbstractPuzzleEvaluator):
    """Score player grids against generated puzzle records."""

    def evaluate(self, puzzle_id: str, board: Sequence[Sequence[int]]) -> SudokuEvaluationResult:
        record = self.get_record(puzzle_id)
        if "solution_grid" not in record or "puzzle_grid" not in record:
            raise ValueError(f"Record '{puzzle_id}' must include 'puzzle_grid' and 'solution_grid'")

        solution_grid = [[int(value) for value in row] for row in record["solution_grid"]]
        puzzle_grid = [[int(value) for value in row] for row in record["puzzle_grid"]]
        grid_size = len(solution_grid)
        total_cells = grid_size * grid_size

        if not has_shape(board, grid_size):
            logger.warning("Board for '%s' is not %dx%d", puzzle_id, grid_size, grid_size)
            return SudokuEvaluationResult(
                puzzle_id=puzzle_id,
                correct_cells=0,
                total_cells=total_cells,
                accuracy=0.0,
                is_solved=False,
                is_valid_solution=False,
                hint_cell=None,
                cell_breakdown=[],
            )

        breakdown: List[CellEvaluation] = []
        correct = 0
        for row_idx, row in enumerate(solution_grid):
            for col_idx, expected in enumerate(row):
                value = int(board[row_idx][col_idx])
                is_correct = value == expected
                if is_correct:
                    correct += 1
                breakdown.append(
                    CellEvaluation(
                        row=row_idx,
                        col=col_idx,
                        expected=expected,
                        predicted=value or None,
                        is_correct=is_correct,
                        is_clue=puzzle_grid[row_idx][col_idx] != 0,
                    )
                )

        return SudokuEvaluationResult(
            puzzle_id=puzzle_id,
            correct_cells=correct,
            total_cells=total_cells,
            accuracy=correct / total_cells if total_cells else 0.0,
            is_solved=is_solved(board, solution_grid),
            is_valid_solution=is_complete_solution(board),
            hint_cell=pick_hint_cell(board, solution_grid),
            cell_breakdown=breakdown,
        )


__all__ = [
    "CellEvaluation",
    "SudokuEvaluationResult",
    "SudokuEvaluator",
    "find_conflicts",
    "is_solved",
    "pick_hint_cell",
]


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check a filled Sudoku grid against its puzzle record")
    parser.add_argument("record", type=Path, help="JSON file holding a generated puzzle record")
    parser.add_argument("board", type=Path, help="JSON file holding the player's grid (list of rows)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")
    record: Dict[str, Any] = _load_json(args.record)
    board: Grid = _load_json(args.board)
    evaluator = SudokuEvaluator([record])
    result = evaluator.evaluate(str(record["id"]), board)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
