"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

CellInput = Union[int, str, None]


class BinairoGrid(BaseModel):
    """A Binairo puzzle grid."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cells": [
                    ["1", "X", "1", "0", "X", "X", "X", "X"],
                    ["1", "X", "X", "1", "X", "0", "X", "1"],
                    ["0", "0", "X", "X", "X", "X", "X", "X"],
                    ["1", "0", "X", "X", "X", "X", "X", "X"],
                    ["0", "1", "X", "X", "1", "X", "X", "1"],
                    ["0", "1", "X", "X", "X", "X", "X", "X"],
                ]
            }
        }
    )

    cells: list[list[CellInput]] = Field(
        description="Even-by-even grid of 0, 1 and X (null is also unknown)"
    )


class SolveRequest(BaseModel):
    """Request to solve a Binairo grid."""

    grid: BinairoGrid = Field(description="The Binairo puzzle to solve")


class PredefinedSolveRequest(BaseModel):
    """Request to solve one of the built-in puzzles."""

    index: int = Field(ge=0, description="Zero-based predefined puzzle index")


class SolveResponse(BaseModel):
    """Response from solving a Binairo puzzle."""

    success: bool = Field(description="Whether the puzzle was solved")
    status: str = Field(description="solved, exhausted or invalid")
    original: list[list[CellInput]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    steps: int | None = Field(default=None, description="Search trial steps taken")
    elapsed_ms: float | None = Field(default=None, description="Search wall-clock time")
    message: str = Field(description="Status message")


class ParseRequest(BaseModel):
    """Puzzle in the text format (0, 1, X, # comments)."""

    text: str = Field(description="Puzzle text")


class ParseResponse(BaseModel):
    """Parsed puzzle."""

    rows: int = Field(description="Number of rows")
    cols: int = Field(description="Number of columns")
    cells: list[list[str]] = Field(description="Parsed cells (0, 1 or X)")


class VerifyRequest(BaseModel):
    """A completed grid to check against the Binairo rules."""

    cells: list[list[int]] = Field(description="Completed 0/1 grid")
    givens: list[list[CellInput]] | None = Field(
        default=None, description="Optional puzzle whose given cells must be kept"
    )


class VerifyResponse(BaseModel):
    """Result of a solution check."""

    valid: bool = Field(description="Whether the grid is a valid solution")
    violations: list[str] = Field(description="Broken rules, empty if valid")


class PuzzleInfo(BaseModel):
    """A predefined puzzle."""

    index: int = Field(description="Zero-based puzzle index")
    description: str = Field(description="Short description")
    rows: int = Field(description="Number of rows")
    cols: int = Field(description="Number of columns")
    cells: list[list[str]] = Field(description="Puzzle cells (0, 1 or X)")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(description="Error message")
    detail: str | None = Field(description="Detailed error information")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    predefined_puzzles: int = Field(description="Number of built-in puzzles")
