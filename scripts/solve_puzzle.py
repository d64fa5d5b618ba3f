"""Solve a Binairo puzzle from a file or from the predefined set."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from backend.solver.backtracking import DEFAULT_PROGRESS_INTERVAL, BinairoSolver
from backend.solver.board import Board
from backend.solver.errors import BinairoError
from backend.solver.examples import load_predefined_puzzles
from backend.solver.puzzle import Puzzle, format_puzzle, read_puzzle_file
from scripts._paths import resolve_puzzle_path

LOGGER = logging.getLogger("solve_puzzle")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a Binairo puzzle by backtracking",
        usage="%(prog)s puzzle-filename, or\n       %(prog)s -p puzzle-number",
    )
    parser.add_argument("puzzle_file", nargs="?", help="Puzzle file (0, 1, X, # comments)")
    parser.add_argument(
        "-p",
        dest="puzzle_index",
        type=int,
        help="Zero-based index of a predefined puzzle",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=DEFAULT_PROGRESS_INTERVAL,
        help="Log the board every N search steps (0 disables)",
    )
    parser.add_argument("--debug", action="store_true")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if (args.puzzle_file is None) == (args.puzzle_index is None):
        parser.error("give either a puzzle file or -p <index>")
    return args


def _load_puzzle(args: argparse.Namespace) -> Puzzle | None:
    if args.puzzle_file is not None:
        print(f"Reading puzzle from file '{args.puzzle_file}'")
        return read_puzzle_file(resolve_puzzle_path(args.puzzle_file))

    print(f"Reading predefined puzzle nmbr '{args.puzzle_index}'")
    puzzles = load_predefined_puzzles()
    if not 0 <= args.puzzle_index < len(puzzles):
        print(f"The predefined puzzles are numbered 0 to {len(puzzles) - 1}")
        _build_parser().print_usage()
        return None
    return puzzles[args.puzzle_index].puzzle


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    try:
        puzzle = _load_puzzle(args)
        if puzzle is None:
            return 1

        print("Puzzle to solve:")
        print(format_puzzle(puzzle))
        board = Board.from_puzzle(puzzle)
    except (FileNotFoundError, BinairoError) as e:
        LOGGER.debug("Failed to load puzzle", exc_info=True)
        print(e)
        return 1

    print(f"Dimensions: {board.cols} by {board.rows}")

    interval = args.progress_interval if args.progress_interval > 0 else None
    solver = BinairoSolver(progress_interval=interval)

    time_start = datetime.now()
    print(f"Started at: {time_start}")
    result = solver.solve(board)
    time_stop = datetime.now()
    print(f"Stopped at: {time_stop}")
    print(f"Duration: {time_stop - time_start}")

    print("Solved!" if result.solved else "No solution found")
    print(f"counter={result.steps}, solved={result.solved}")
    if result.solved:
        print("Solution:")
        print(board.show(), end="")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
