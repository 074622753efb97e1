"""Sudoku puzzle generator: full-board construction and difficulty-driven carving."""

from __future__ import annotations

import argparse
import json
import logging
import math
import random
import sys
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from ..base import AbstractPuzzleGenerator
from .grid import BoxSize, Grid, box_size_for, clone_grid, count_blanks
from .solver import SOLUTION_LIMIT, count_solutions, generate_full_grid

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 10
BASE_DENSITY = 0.35
DENSITY_STEP = 0.03
MIN_DENSITY = 0.25
UNIQUENESS_SIZE_LIMIT = 9


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


def density_for_level(level: int) -> float:
    """Fraction of cells to blank: 0.35 at level 1 rising by 0.03 per level."""
    return BASE_DENSITY + (level - 1) * DENSITY_STEP


def target_removals(level: int, size: int) -> int:
    cells = size * size
    remove = min(math.floor(cells * density_for_level(clamp_level(level))), cells - size)
    return max(remove, math.floor(cells * MIN_DENSITY))


def requires_uniqueness(size: int) -> bool:
    return size <= UNIQUENESS_SIZE_LIMIT


def carve_puzzle(
    solution: Grid,
    target_empty: int,
    box: BoxSize,
    *,
    rng: Optional[random.Random] = None,
    ensure_unique: bool = True,
) -> Grid:
    """Blank up to ``target_empty`` cells of a copy of ``solution``.

    Cells are visited in a random order. With ``ensure_unique`` a removal is
    kept only while the puzzle still has exactly one completion.
    """

    size = len(solution)
    puzzle = clone_grid(solution)
    positions = list(range(size * size))
    (rng or random).shuffle(positions)

    removed = 0
    rejected = 0
    for idx in positions:
        if removed >= target_empty:
            break
        row, col = divmod(idx, size)
        backup = puzzle[row][col]
        puzzle[row][col] = 0
        if ensure_unique:
            scratch = clone_grid(puzzle)
            if count_solutions(scratch, size, box, limit=SOLUTION_LIMIT) != 1:
                puzzle[row][col] = backup
                rejected += 1
                continue
        removed += 1

    logger.debug(
        "Carved %dx%d puzzle: target=%d removed=%d rejected=%d unique=%s",
        size, size, target_empty, removed, rejected, ensure_unique,
    )
    return puzzle


def generate_puzzle(
    level: int,
    size: int,
    *,
    rng: Optional[random.Random] = None,
    ensure_unique: Optional[bool] = None,
) -> Tuple[Grid, Grid]:
    """Return ``(puzzle, solution)`` for a difficulty ``level`` and grid ``size``.

    Uniqueness of the puzzle is enforced for grids up to 9x9 unless
    ``ensure_unique`` overrides the policy.
    """

    box = box_size_for(size)
    if ensure_unique is None:
        ensure_unique = requires_uniqueness(size)
    started = time.perf_counter()
    solution = generate_full_grid(size, box, rng)
    puzzle = carve_puzzle(
        solution,
        target_removals(level, size),
        box,
        rng=rng,
        ensure_unique=ensure_unique,
    )
    logger.info(
        "Generated %dx%d puzzle at level %d in %.3fs",
        size, size, clamp_level(level), time.perf_counter() - started,
    )
    return puzzle, solution


@dataclass
class SudokuPuzzleRecord:
    """Generated Sudoku puzzle together with its solution."""

    id: str
    level: int
    size: int
    box: BoxSize
    puzzle_grid: Grid
    solution_grid: Grid
    clue_count: int
    blank_count: int
    target_blanks: int
    unique: bool

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "level": self.level,
            "size": self.size,
            "box": self.box.to_list(),
            "puzzle_grid": self.puzzle_grid,
            "solution_grid": self.solution_grid,
            "clue_count": self.clue_count,
            "blank_count": self.blank_count,
            "target_blanks": self.target_blanks,
            "unique": self.unique,
        }


class SudokuGenerator(AbstractPuzzleGenerator[SudokuPuzzleRecord]):
    """Generate Sudoku puzzles of one size and difficulty level."""

    def __init__(
        self,
        level: int = 5,
        size: int = 9,
        *,
        seed: Optional[int] = None,
        ensure_unique: Optional[bool] = None,
    ) -> None:
        super().__init__(seed=seed)
        self.level = clamp_level(level)
        self.size = size
        self.box = box_size_for(size)
        self.ensure_unique = requires_uniqueness(size) if ensure_unique is None else ensure_unique

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> SudokuPuzzleRecord:
        puzzle, solution = generate_puzzle(
            self.level,
            self.size,
            rng=self._rng,
            ensure_unique=self.ensure_unique,
        )
        blanks = count_blanks(puzzle)
        return SudokuPuzzleRecord(
            id=puzzle_id or str(uuid.uuid4()),
            level=self.level,
            size=self.size,
            box=self.box,
            puzzle_grid=puzzle,
            solution_grid=solution,
            clue_count=self.size * self.size - blanks,
            blank_count=blanks,
            target_blanks=target_removals(self.level, self.size),
            unique=self.ensure_unique,
        )


__all__ = [
    "MAX_LEVEL",
    "MIN_LEVEL",
    "SudokuGenerator",
    "SudokuPuzzleRecord",
    "carve_puzzle",
    "clamp_level",
    "density_for_level",
    "generate_puzzle",
    "requires_uniqueness",
    "target_removals",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate Sudoku puzzles as JSON lines")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument("--level", type=int, default=5, help="Difficulty level from 1 (easiest) to 10")
    parser.add_argument("--size", type=int, default=9, help="Grid size, e.g. 4, 9 or 16")
    parser.add_argument("--no-unique", action="store_true", help="Skip uniqueness enforcement for faster generation")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--image-dir", type=Path, default=None, help="Optional directory to write puzzle/solution PNGs")
    parser.add_argument("--verbose", action="store_true", help="Log carving details")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    generator = SudokuGenerator(
        level=args.level,
        size=args.size,
        seed=args.seed,
        ensure_unique=False if args.no_unique else None,
    )
    if args.image_dir is not None:
        from .render import render_board

        args.image_dir.mkdir(parents=True, exist_ok=True)

    for _ in tqdm(range(args.count), desc="Sudoku", disable=args.count <= 1, file=sys.stderr):
        record = generator.create_random_puzzle()
        if args.image_dir is not None:
            render_board(record.puzzle_grid, record.box).save(args.image_dir / f"{record.id}_puzzle.png")
            render_board(
                record.solution_grid,
                record.box,
                puzzle_grid=record.puzzle_grid,
            ).save(args.image_dir / f"{record.id}_solution.png")
        print(json.dumps(record.to_dict()))


if __name__ == "__main__":
    main()
