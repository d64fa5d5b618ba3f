"""Exceptions raised by the Binairo solver."""


class BinairoError(ValueError):
    """Base class for malformed puzzle input."""


class BoardDimensionError(BinairoError):
    """Raised when a board does not have even, non-zero dimensions."""


class InvalidCellError(BinairoError):
    """Raised when a puzzle cell is not 0, 1 or X."""


class PuzzleFormatError(BinairoError):
    """Raised when puzzle text cannot be turned into a rectangular grid."""


class SearchInvariantError(RuntimeError):
    """Raised when the search meets a board state it can never legally reach."""
