"""Run puzzle generation off the caller's thread."""

from __future__ import annotations

import logging
import random
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Tuple

from .generator import generate_puzzle
from .grid import Grid

logger = logging.getLogger(__name__)


class PuzzleWorker:
    """Generate one puzzle at a time on a background thread.

    A request made while another is still running gets the pending future
    back instead of starting a second generation.
    """

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sudoku-gen")
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        self._pending: Optional[Future] = None

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._pending is not None and not self._pending.done()

    def request(self, level: int, size: int) -> "Future[Tuple[Grid, Grid]]":
        with self._lock:
            if self._pending is not None and not self._pending.done():
                logger.debug("Generation already in progress; reusing pending request")
                return self._pending
            self._pending = self._executor.submit(generate_puzzle, level, size, rng=self._rng)
            return self._pending

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "PuzzleWorker":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()


__all__ = ["PuzzleWorker"]
