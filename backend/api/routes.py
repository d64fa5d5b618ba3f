"""API routes for the Binairo solver application."""

from __future__ import annotations

import logging
import os
import time
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from ..models.schemas import (
    ErrorResponse,
    HealthResponse,
    ParseRequest,
    ParseResponse,
    PredefinedSolveRequest,
    PuzzleInfo,
    SolveRequest,
    SolveResponse,
    VerifyRequest,
    VerifyResponse,
)
from ..solver.backtracking import DEFAULT_PROGRESS_INTERVAL, BinairoSolver
from ..solver.board import Board
from ..solver.errors import BinairoError
from ..solver.examples import PredefinedPuzzle, load_predefined_puzzles
from ..solver.puzzle import Puzzle, parse_puzzle, puzzle_from_rows, puzzle_to_rows
from ..solver.verify import find_violations

router = APIRouter()
_PREDEFINED: list[PredefinedPuzzle] | None = None
_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _get_predefined_puzzles() -> tuple[list[PredefinedPuzzle] | None, str | None]:
    """Load the built-in puzzles once, checking each builds a valid board."""
    global _PREDEFINED

    if _PREDEFINED is not None:
        return _PREDEFINED, None

    try:
        puzzles = load_predefined_puzzles()
        for puzzle in puzzles:
            Board.from_puzzle(puzzle.puzzle)
    except BinairoError as e:
        return None, str(e)

    _PREDEFINED = puzzles
    return _PREDEFINED, None


def _build_solver() -> BinairoSolver:
    interval = _env("BINAIRO_PROGRESS_INTERVAL", DEFAULT_PROGRESS_INTERVAL)
    return BinairoSolver(progress_interval=interval if interval > 0 else None)


def _solve(puzzle: Puzzle, original: list[list]) -> SolveResponse:
    board = Board.from_puzzle(puzzle)
    solver = _build_solver()

    start = time.perf_counter()
    result = solver.solve(board)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    _LOGGER.info(
        "Solved %dx%d puzzle: status=%s steps=%d elapsed_ms=%.1f",
        board.cols,
        board.rows,
        result.status.value,
        result.steps,
        elapsed_ms,
    )

    if not result.solved:
        return SolveResponse(
            success=False,
            status=result.status.value,
            original=original,
            solved=None,
            steps=result.steps,
            elapsed_ms=elapsed_ms,
            message="Puzzle has no solution",
        )

    return SolveResponse(
        success=True,
        status=result.status.value,
        original=original,
        solved=board.value_grid(),
        steps=result.steps,
        elapsed_ms=elapsed_ms,
        message="Puzzle solved successfully",
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    puzzles, _ = _get_predefined_puzzles()

    return HealthResponse(
        status="healthy",
        predefined_puzzles=len(puzzles) if puzzles else 0,
    )


@router.get(
    "/api/v1/binairo/puzzles",
    response_model=list[PuzzleInfo],
    tags=["Binairo"],
)
async def list_puzzles():
    """List the predefined puzzles."""
    puzzles, error = _get_predefined_puzzles()
    if puzzles is None:
        raise HTTPException(status_code=500, detail=error)

    return [
        PuzzleInfo(
            index=index,
            description=item.description,
            rows=item.rows,
            cols=item.cols,
            cells=puzzle_to_rows(item.puzzle),
        )
        for index, item in enumerate(puzzles)
    ]


@router.post("/api/v1/binairo:solve", response_model=SolveResponse, tags=["Binairo"])
def solve_binairo(request: SolveRequest):
    """
    Solve a Binairo puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each cell is 0, 1 or "X" (null for unknown is accepted too) and
    both dimensions are even.
    """
    original = request.grid.cells
    try:
        puzzle = puzzle_from_rows(original)
        return _solve(puzzle, original)

    except BinairoError as e:
        return SolveResponse(
            success=False,
            status="invalid",
            original=original,
            solved=None,
            message=f"Invalid Binairo grid: {e}",
        )
    except Exception as e:
        _LOGGER.exception("Search failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/binairo:solvePredefined",
    response_model=SolveResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Binairo"],
)
def solve_predefined(request: PredefinedSolveRequest):
    """Solve one of the built-in puzzles by index."""
    puzzles, error = _get_predefined_puzzles()
    if puzzles is None:
        raise HTTPException(status_code=500, detail=error)
    if request.index >= len(puzzles):
        raise HTTPException(
            status_code=404,
            detail=f"The predefined puzzles are numbered 0 to {len(puzzles) - 1}",
        )

    puzzle = puzzles[request.index].puzzle
    try:
        return _solve(puzzle, puzzle_to_rows(puzzle))
    except Exception as e:
        _LOGGER.exception("Search failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/binairo:parse",
    response_model=ParseResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["Binairo"],
)
async def parse_text(request: ParseRequest):
    """Parse a puzzle written in the text format and check its dimensions."""
    try:
        puzzle = parse_puzzle(request.text)
        board = Board.from_puzzle(puzzle)
    except BinairoError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ParseResponse(
        rows=board.rows,
        cols=board.cols,
        cells=puzzle_to_rows(puzzle),
    )


@router.post("/api/v1/binairo:verify", response_model=VerifyResponse, tags=["Binairo"])
async def verify_solution(request: VerifyRequest):
    """Check a completed grid against every Binairo rule."""
    violations = find_violations(request.cells, request.givens)
    return VerifyResponse(valid=not violations, violations=violations)
