"""Abstract interfaces for puzzle generation and evaluation."""

from __future__ import annotations

import dataclasses
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

RecordT = TypeVar("RecordT")


class AbstractPuzzleGenerator(ABC, Generic[RecordT]):
    """Base class for builders that emit puzzle records.

    Records are kept in memory; callers decide what, if anything, to store.
    """

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    @abstractmethod
    def create_puzzle(self, *args, **kwargs) -> RecordT:
        """Create a puzzle from the provided resources."""

    def create_random_puzzle(self) -> RecordT:
        """Create a single randomized puzzle instance."""
        return self.create_puzzle()

    def generate_dataset(self, count: int) -> List[RecordT]:
        """Generate a batch of puzzles."""
        return [self.create_random_puzzle() for _ in range(count)]

    def record_to_dict(self, record: RecordT) -> Dict[str, Any]:
        """Dictionary serialization hook for puzzle records."""

        if hasattr(record, "to_dict"):
            return getattr(record, "to_dict")()
        return dataclasses.asdict(record)


class AbstractPuzzleEvaluator(ABC):
    """Base class scaffolding for puzzle evaluators."""

    def __init__(self, records: Iterable[Mapping[str, Any]]) -> None:
        self._records = self._index_records(records)

    @property
    def records(self) -> Dict[str, Dict[str, Any]]:
        """Return the loaded records keyed by puzzle id."""

        return self._records

    @staticmethod
    def _index_records(raw: Iterable[Mapping[str, Any]]) -> Dict[str, Dict[str, Any]]:
        records: Dict[str, Dict[str, Any]] = {}
        for record in raw:
            puzzle_id = record.get("id")
            if not puzzle_id:
                raise ValueError("Each puzzle record must include an 'id'")
            records[str(puzzle_id)] = dict(record)
        return records

    def add_record(self, record: Mapping[str, Any]) -> None:
        self._records.update(self._index_records([record]))

    def get_record(self, puzzle_id: str) -> Dict[str, Any]:
        try:
            return self._records[puzzle_id]
        except KeyError as exc:
            raise KeyError(f"Puzzle id '{puzzle_id}' not found in records") from exc

    @abstractmethod
    def evaluate(self, puzzle_id: str, *args, **kwargs):
        """Evaluate a candidate solution for the given puzzle."""


__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
]
