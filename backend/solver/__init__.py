"""Binairo solver exports."""

from .backtracking import BinairoSolver, SearchResult, SearchStatus, solve_puzzle
from .board import Board, Cell, CellValue
from .errors import (
    BinairoError,
    BoardDimensionError,
    InvalidCellError,
    PuzzleFormatError,
    SearchInvariantError,
)
from .puzzle import PuzzleSymbol, parse_puzzle, puzzle_from_rows, read_puzzle_file
from .verify import find_violations, is_valid_solution

__all__ = [
    "BinairoSolver",
    "SearchResult",
    "SearchStatus",
    "solve_puzzle",
    "Board",
    "Cell",
    "CellValue",
    "BinairoError",
    "BoardDimensionError",
    "InvalidCellError",
    "PuzzleFormatError",
    "SearchInvariantError",
    "PuzzleSymbol",
    "parse_puzzle",
    "puzzle_from_rows",
    "read_puzzle_file",
    "find_violations",
    "is_valid_solution",
]
