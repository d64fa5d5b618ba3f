"""Tests for the backtracking search driver."""

import logging

import pytest

from backend.solver.backtracking import BinairoSolver, SearchStatus, solve, solve_puzzle
from backend.solver.board import Board
from backend.solver.examples import load_predefined_puzzles
from backend.solver.puzzle import parse_puzzle, puzzle_to_rows
from backend.solver.verify import find_violations

SOLVED_6X6 = """
001101
110010
010110
101001
101010
010101
"""

# SOLVED_6X6 with about half of the cells blanked out.
PARTIAL_6X6 = """
0XX10X
X1X0XX
01XXX0
XX1X0X
1XXX1X
X1X1XX
"""


def _quiet_solver(**kwargs) -> BinairoSolver:
    return BinairoSolver(progress_interval=None, **kwargs)


def _assert_valid_solution(board: Board, puzzle) -> None:
    grid = board.value_grid()
    assert find_violations(grid, puzzle_to_rows(puzzle)) == []


def test_solves_empty_6x6_board():
    puzzle = parse_puzzle("\n".join(["XXXXXX"] * 6))
    board = Board.from_puzzle(puzzle)

    result = _quiet_solver().solve(board)

    assert result.status is SearchStatus.SOLVED
    assert result.solved
    assert result.board is board
    _assert_valid_solution(board, puzzle)


def test_already_solved_board_needs_one_step_per_cell():
    puzzle = parse_puzzle(SOLVED_6X6)

    result = solve_puzzle(puzzle, progress_interval=None)

    assert result.status is SearchStatus.SOLVED
    assert result.steps == 36
    assert result.board.value_grid() == [
        [int(symbol.value) for symbol in row] for row in puzzle
    ]


def test_partial_puzzle_keeps_givens():
    puzzle = parse_puzzle(PARTIAL_6X6)

    result = solve_puzzle(puzzle, progress_interval=None)

    assert result.solved
    _assert_valid_solution(result.board, puzzle)


def test_solves_minimal_2x2_boards():
    fixed = solve_puzzle(parse_puzzle("10\n01\n"), progress_interval=None)
    assert fixed.solved
    assert fixed.steps == 4

    free = solve_puzzle(parse_puzzle("XX\nXX\n"), progress_interval=None)
    assert free.solved
    assert free.board.value_grid() == [[0, 1], [1, 0]]


def test_invalid_fixed_cell_retreats_immediately():
    result = solve_puzzle(parse_puzzle("11\nXX\n"), progress_interval=None)

    assert result.status is SearchStatus.EXHAUSTED
    assert result.steps == 2


def test_unsolvable_4x4_is_exhausted():
    puzzle = parse_puzzle("XXXX\nXXXX\nXXXX\nX111\n")

    result = solve_puzzle(puzzle, progress_interval=None)

    assert result.status is SearchStatus.EXHAUSTED
    assert not result.solved
    assert result.steps > 0


def test_unsolvable_6x6_exhausts_search_space():
    puzzles = load_predefined_puzzles()
    empty = solve_puzzle(puzzles[0].puzzle, progress_interval=None)
    unsolvable = solve_puzzle(puzzles[5].puzzle, progress_interval=None)

    assert empty.solved
    assert unsolvable.status is SearchStatus.EXHAUSTED
    assert unsolvable.steps > 10 * empty.steps


def test_exhausted_search_restores_free_cells():
    puzzle = parse_puzzle("XXXX\nXXXX\nXXXX\nX111\n")

    result = solve_puzzle(puzzle, progress_interval=None)

    assert result.board.value_grid() == [
        [None, None, None, None],
        [None, None, None, None],
        [None, None, None, None],
        [None, 1, 1, 1],
    ]


def test_progress_callback_runs_every_interval():
    calls = []
    solver = BinairoSolver(
        progress_interval=1,
        on_progress=lambda steps, position, board: calls.append((steps, position)),
    )

    result = solver.solve(Board.from_puzzle(parse_puzzle("10\n01\n")))

    assert result.steps == 4
    assert calls == [(0, (0, 0)), (1, (1, 0)), (2, (0, 1)), (3, (1, 1))]


def test_progress_disabled_never_calls_back():
    calls = []
    solver = BinairoSolver(progress_interval=None, on_progress=lambda *args: calls.append(args))

    solver.solve(Board.from_puzzle(parse_puzzle("XX\nXX\n")))

    assert calls == []


def test_default_progress_logs_board(caplog):
    solver = BinairoSolver(progress_interval=2)

    with caplog.at_level(logging.INFO, logger="backend.solver.backtracking"):
        solver.solve(Board.from_puzzle(parse_puzzle("10\n01\n")))

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 2
    assert messages[0].startswith("(0), At [0,0]")
    assert "1* 0* " in messages[0]


def test_rejects_non_positive_progress_interval():
    with pytest.raises(ValueError):
        BinairoSolver(progress_interval=0)


def test_module_level_solve():
    board = Board.from_puzzle(parse_puzzle("XXXX\nXXXX\nXXXX\nXXXX\n"))

    result = solve(board)

    assert result.solved
    assert find_violations(board.value_grid()) == []
