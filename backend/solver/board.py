"""Binairo board: cell state machine, legality predicate and cursor movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from .errors import BoardDimensionError, InvalidCellError, SearchInvariantError
from .puzzle import Puzzle, PuzzleSymbol

Position = Tuple[int, int]


class CellValue(Enum):
    """Runtime state of a board cell."""

    UNSET = -1
    ZERO = 0
    ONE = 1


_DISPLAY = {CellValue.UNSET: "X", CellValue.ZERO: "0", CellValue.ONE: "1"}
_FROM_DISPLAY = {symbol: value for value, symbol in _DISPLAY.items()}
_GIVEN = {PuzzleSymbol.ZERO: CellValue.ZERO, PuzzleSymbol.ONE: CellValue.ONE}


@dataclass
class Cell:
    """A single grid position."""

    fixed: bool
    value: CellValue = CellValue.UNSET


class Board:
    """An even-by-even Binairo grid mutated in place by the search."""

    def __init__(self, cells: Sequence[Sequence[Cell]]):
        rows = len(cells)
        cols = len(cells[0]) if rows else 0
        if rows == 0 or cols == 0 or rows % 2 != 0 or cols % 2 != 0:
            raise BoardDimensionError(
                f"rows[{rows}] or cols[{cols}] not a multiple of 2"
            )
        for y, row in enumerate(cells):
            if len(row) != cols:
                raise BoardDimensionError(
                    f"Row {y} has {len(row)} cells, expected {cols}"
                )

        self.rows = rows
        self.cols = cols
        self._cells = [list(row) for row in cells]

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "Board":
        """
        Build a board from a parsed puzzle.

        Args:
            puzzle: Rows of ``PuzzleSymbol``

        Returns:
            Board with given cells fixed and unknown cells free and unset

        Raises:
            BoardDimensionError: If either dimension is odd or zero
            InvalidCellError: If an entry is not a ``PuzzleSymbol``
        """
        cells = []
        for y, row in enumerate(puzzle):
            cell_row = []
            for x, symbol in enumerate(row):
                if symbol is PuzzleSymbol.UNKNOWN:
                    cell_row.append(Cell(fixed=False))
                elif symbol in _GIVEN:
                    cell_row.append(Cell(fixed=True, value=_GIVEN[symbol]))
                else:
                    raise InvalidCellError(f"Cell [{y},{x}] is not 0, 1 or X")
            cells.append(cell_row)
        return cls(cells)

    @classmethod
    def from_dump(cls, text: str) -> "Board":
        """Rebuild a board from the output of :meth:`show`."""
        cells = []
        for line in text.splitlines():
            tokens = line.split()
            if not tokens:
                continue
            y = len(cells)
            cell_row = []
            for x, token in enumerate(tokens):
                symbol, marker = token[0], token[1:]
                if symbol not in _FROM_DISPLAY or marker not in ("", "*"):
                    raise InvalidCellError(f"Cell [{y},{x}] is not 0, 1 or X")
                value = _FROM_DISPLAY[symbol]
                fixed = marker == "*"
                if fixed and value is CellValue.UNSET:
                    raise InvalidCellError(f"Cell [{y},{x}] is fixed but unset")
                cell_row.append(Cell(fixed=fixed, value=value))
            cells.append(cell_row)
        if not cells:
            raise BoardDimensionError("rows[0] or cols[0] not a multiple of 2")
        return cls(cells)

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def is_fixed(self, x: int, y: int) -> bool:
        return self._cells[y][x].fixed

    def value_grid(self) -> list[list[Optional[int]]]:
        """Cell values as ints, ``None`` for unset cells."""
        return [
            [None if cell.value is CellValue.UNSET else cell.value.value for cell in row]
            for row in self._cells
        ]

    def fixed_mask(self) -> list[list[bool]]:
        return [[cell.fixed for cell in row] for row in self._cells]

    def next_value(self, x: int, y: int) -> bool:
        """
        Move cell (x, y) to its next candidate value.

        Args:
            x: Column index
            y: Row index

        Returns:
            True if the cell holds a candidate to check, False once both
            values have been tried and the cell was reset to unset
        """
        cell = self._cells[y][x]
        if cell.fixed:
            return True
        if cell.value is CellValue.UNSET:
            cell.value = CellValue.ZERO
            return True
        if cell.value is CellValue.ZERO:
            cell.value = CellValue.ONE
            return True
        cell.value = CellValue.UNSET
        return False

    def is_still_valid(self, x: int, y: int) -> bool:
        """
        Check the board filled in row-major order up to (x, y).

        Args:
            x: Column index of the cell just set
            y: Row index of the cell just set

        Returns:
            True if no Binairo rule is broken by the filled prefix

        Raises:
            SearchInvariantError: If a cell before (x, y) is still unset
        """
        row = self._cells[y]
        column = [r[x] for r in self._cells]
        if row[x].value is CellValue.UNSET:
            raise SearchInvariantError(f"Checking unset cell [{x},{y}]")

        if _has_triple(row, x) or _has_triple(column, y):
            return False

        if not _balance_ok(row, x, self.cols // 2, "row", y):
            return False
        if x == self.cols - 1:
            values = [cell.value for cell in row]
            for other in self._cells[:y]:
                if [cell.value for cell in other] == values:
                    return False

        if not _balance_ok(column, y, self.rows // 2, "column", x):
            return False
        if y == self.rows - 1:
            values = [cell.value for cell in column]
            for col in range(x):
                if [r[col].value for r in self._cells] == values:
                    return False

        return True

    def next_position(self, x: int, y: int) -> Optional[Position]:
        """Return the next cell in row-major order, or None past the last one."""
        x += 1
        if x >= self.cols:
            x = 0
            y += 1
        if y >= self.rows:
            return None
        return x, y

    def previous_position(self, x: int, y: int) -> Optional[Position]:
        """Return the previous free cell in row-major order, or None before the first."""
        while True:
            x -= 1
            if x < 0:
                x = self.cols - 1
                y -= 1
            if y < 0:
                return None
            if not self._cells[y][x].fixed:
                return x, y

    def show(self) -> str:
        """Render the board, fixed cells suffixed with ``*``."""
        lines = []
        for row in self._cells:
            parts = []
            for cell in row:
                parts.append(_DISPLAY.get(cell.value, "?"))
                parts.append("* " if cell.fixed else "  ")
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.show()


def _has_triple(line: Sequence[Cell], i: int) -> bool:
    """True if ``line[i]`` is part of three equal values in a row."""
    value = line[i].value
    n = len(line)
    # Unset never equals the concrete value at i, so unfilled cells never match.
    if i >= 2 and line[i - 2].value is value and line[i - 1].value is value:
        return True
    if 1 <= i < n - 1 and line[i - 1].value is value and line[i + 1].value is value:
        return True
    if i < n - 2 and line[i + 1].value is value and line[i + 2].value is value:
        return True
    return False


def _balance_ok(line: Iterable[Cell], end: int, half: int, kind: str, index: int) -> bool:
    zeros = ones = 0
    for i, cell in enumerate(line):
        if i > end:
            break
        if cell.value is CellValue.ZERO:
            zeros += 1
        elif cell.value is CellValue.ONE:
            ones += 1
        else:
            raise SearchInvariantError(
                f"Unset cell at position {i} of {kind} {index} while checking up to {end}"
            )
    return zeros <= half and ones <= half
