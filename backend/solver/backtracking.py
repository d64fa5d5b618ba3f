"""Binairo solver using depth-first search with chronological backtracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .board import Board, Position
from .puzzle import Puzzle

_LOGGER = logging.getLogger(__name__)

DEFAULT_PROGRESS_INTERVAL = 10_000_000

ProgressCallback = Callable[[int, Position, Board], None]


class SearchStatus(str, Enum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    """Outcome of one search over a board."""

    status: SearchStatus
    steps: int
    board: Board

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED


def log_progress(steps: int, position: Position, board: Board) -> None:
    x, y = position
    _LOGGER.info("(%d), At [%d,%d]\n%s", steps, x, y, board.show())


class BinairoSolver:
    """Solves Binairo boards in place by backtracking."""

    def __init__(
        self,
        progress_interval: Optional[int] = DEFAULT_PROGRESS_INTERVAL,
        on_progress: Optional[ProgressCallback] = None,
    ):
        if progress_interval is not None and progress_interval <= 0:
            raise ValueError("progress_interval must be positive")
        self.progress_interval = progress_interval
        self.on_progress = on_progress or log_progress

    def solve(self, board: Board) -> SearchResult:
        """
        Search for a solution, filling the board in place.

        Args:
            board: Board to solve; free cells must be unset

        Returns:
            SearchResult with status SOLVED (board holds the solution) or
            EXHAUSTED (no assignment satisfies every rule), and the number
            of trial steps taken
        """
        _LOGGER.debug("Starting search on %dx%d board", board.cols, board.rows)
        status = SearchStatus.RUNNING
        steps = 0
        x, y = 0, 0

        while status is SearchStatus.RUNNING:
            if self.progress_interval and steps % self.progress_interval == 0:
                self.on_progress(steps, (x, y), board)
            steps += 1

            has_candidate = board.next_value(x, y)
            if has_candidate and board.is_still_valid(x, y):
                position = board.next_position(x, y)
                if position is None:
                    status = SearchStatus.SOLVED
                else:
                    x, y = position
                continue

            if has_candidate and not board.is_fixed(x, y):
                continue

            position = board.previous_position(x, y)
            if position is None:
                status = SearchStatus.EXHAUSTED
            else:
                x, y = position

        _LOGGER.debug("Search finished: status=%s steps=%d", status.value, steps)
        return SearchResult(status=status, steps=steps, board=board)


def solve(board: Board) -> SearchResult:
    """Convenience function to solve a board."""
    solver = BinairoSolver()
    return solver.solve(board)


def solve_puzzle(puzzle: Puzzle, **solver_kwargs) -> SearchResult:
    """Build a board from a puzzle and solve it."""
    solver = BinairoSolver(**solver_kwargs)
    return solver.solve(Board.from_puzzle(puzzle))
