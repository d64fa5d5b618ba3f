"""Predefined Binairo puzzles, addressed by zero-based index."""

from __future__ import annotations

from dataclasses import dataclass

from .puzzle import Puzzle, parse_puzzle


@dataclass(frozen=True)
class PredefinedPuzzle:
    description: str
    puzzle: Puzzle

    @property
    def rows(self) -> int:
        return len(self.puzzle)

    @property
    def cols(self) -> int:
        return len(self.puzzle[0])


_EMPTY_6X6 = "\n".join(["XXXXXX"] * 6)

_EMPTY_14X12 = "\n".join(["XXXXXXXXXXXXXX"] * 12)

_PUZZLE_8X6 = """
1X10XXXX
1XX1X0X1
00XXXXXX
10XXXXXX
01XX1XX1
01XXXXXX
"""

# binairepuzzel.net daily puzzle 2970
_PUZZLE_12X12 = """
XXXX1XX00X0X
XXX0X1XXXXXX
X1XXXX1XXXXX
XX0XXXX1XXXX
XX01XXXXX11X
XXXXXXXXXXXX
XX1XXXX0XXXX
11XXXXXX1XX1
X11XX01X1XXX
XX1XXXXXXXXX
1XXXXXX1XX1X
X0X0XX0XXXXX
"""

# binairepuzzel.net size 14, level 4, number 80
_PUZZLE_14X14 = """
XXX1XXXX1XXXXX
1XXX0XX0XX1XXX
XXX1X1XX1XXXX0
XX1XXXXXXXXX1X
0X1XXXXXXXX0XX
0XX0XXX11XXXXX
XX0XXXXXXX1X1X
XXXX0X1XX0X01X
X0XXXXXXXXXXXX
00XXXXXX0XXXXX
XXXXXXXXXXXXXX
X0XXX1XX1X0XXX
1XXXXXXXXX11XX
XXXX11XXXXXXXX
"""

# Three ones on the last line; only an exhaustive search shows it has no solution.
_UNSOLVABLE_6X6 = """
XXXXXX
XXXXXX
XXXXXX
XXXXXX
XXXXXX
XXX111
"""


def load_predefined_puzzles() -> list[PredefinedPuzzle]:
    """Return the built-in puzzles in index order."""
    return [
        PredefinedPuzzle("6 x 6, all undefined", parse_puzzle(_EMPTY_6X6)),
        PredefinedPuzzle("14 x 12, all undefined", parse_puzzle(_EMPTY_14X12)),
        PredefinedPuzzle("8 x 6 puzzle", parse_puzzle(_PUZZLE_8X6)),
        PredefinedPuzzle("12 x 12 puzzle", parse_puzzle(_PUZZLE_12X12)),
        PredefinedPuzzle("14 x 14, very difficult", parse_puzzle(_PUZZLE_14X14)),
        PredefinedPuzzle(
            "6 x 6, unsolvable (three ones on the last line)",
            parse_puzzle(_UNSOLVABLE_6X6),
        ),
    ]
