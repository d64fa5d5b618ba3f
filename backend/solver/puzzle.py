"""Binairo puzzle input: text format, files and JSON-style rows."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, List, Sequence

from .errors import InvalidCellError, PuzzleFormatError


class PuzzleSymbol(Enum):
    """A cell as written in a puzzle, before any search state exists."""

    ZERO = "0"
    ONE = "1"
    UNKNOWN = "X"

    def __str__(self) -> str:
        return self.value


Puzzle = List[List[PuzzleSymbol]]

_TEXT_SYMBOLS = {symbol.value: symbol for symbol in PuzzleSymbol}


def parse_puzzle(text: str) -> Puzzle:
    """
    Parse a puzzle written with ``0``, ``1`` and ``X``.

    ``#`` starts a comment running to the end of the line, a newline ends a
    row, rows with fewer than two cells are dropped and any other character
    is ignored.

    Args:
        text: Puzzle source

    Returns:
        Rows of puzzle symbols

    Raises:
        PuzzleFormatError: If no rows were found or row lengths differ
    """
    puzzle: Puzzle = []
    row: list[PuzzleSymbol] = []
    in_comment = False

    for char in text:
        if in_comment:
            if char != "\n":
                continue
            in_comment = False

        if char in _TEXT_SYMBOLS:
            row.append(_TEXT_SYMBOLS[char])
        elif char == "#":
            in_comment = True
        elif char == "\n":
            if len(row) > 1:
                puzzle.append(row)
            row = []

    if len(row) > 1:
        puzzle.append(row)

    _check_rectangular(puzzle)
    return puzzle


def read_puzzle_file(path: str | Path) -> Puzzle:
    """Read and parse a puzzle file; undecodable bytes are ignored like any other character."""
    return parse_puzzle(Path(path).read_text(encoding="utf-8", errors="replace"))


def puzzle_from_rows(rows: Sequence[Sequence[Any]]) -> Puzzle:
    """
    Convert JSON-style rows into a puzzle.

    Cells may be ``0``/``1`` (int or str), ``"X"``/``"x"`` or ``None`` for
    unknown cells.

    Raises:
        InvalidCellError: If a cell is anything else
        PuzzleFormatError: If no rows were given or row lengths differ
    """
    puzzle: Puzzle = []
    for y, row in enumerate(rows):
        symbols = []
        for x, raw in enumerate(row):
            symbols.append(_symbol_from_raw(raw, y, x))
        puzzle.append(symbols)

    _check_rectangular(puzzle)
    return puzzle


def _symbol_from_raw(raw: Any, y: int, x: int) -> PuzzleSymbol:
    if raw is None:
        return PuzzleSymbol.UNKNOWN
    # bool is an int subclass; True/False are not valid cells.
    if isinstance(raw, bool):
        raise InvalidCellError(f"Cell [{y},{x}] is not 0, 1 or X")
    if isinstance(raw, int):
        raw = str(raw)
    if isinstance(raw, str):
        symbol = _TEXT_SYMBOLS.get(raw.strip().upper())
        if symbol is not None:
            return symbol
    raise InvalidCellError(f"Cell [{y},{x}] is not 0, 1 or X")


def _check_rectangular(puzzle: Puzzle) -> None:
    if not puzzle:
        raise PuzzleFormatError("Puzzle contains no rows")
    width = len(puzzle[0])
    for y, row in enumerate(puzzle):
        if len(row) != width:
            raise PuzzleFormatError(
                f"Row {y} has {len(row)} cells, expected {width}"
            )


def format_puzzle(puzzle: Puzzle) -> str:
    """Render a puzzle one row per line, symbols padded to three columns."""
    return "".join(
        "".join(f"{symbol}  " for symbol in row) + "\n" for row in puzzle
    )


def puzzle_to_rows(puzzle: Puzzle) -> list[list[str]]:
    return [[symbol.value for symbol in row] for row in puzzle]
