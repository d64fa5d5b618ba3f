"""Tests for whole-grid solution checks."""

from backend.solver.verify import find_violations, is_valid_solution

VALID_4X4 = [
    [0, 1, 0, 1],
    [1, 0, 1, 0],
    [0, 0, 1, 1],
    [1, 1, 0, 0],
]


def test_valid_grid_has_no_violations():
    assert find_violations(VALID_4X4) == []
    assert is_valid_solution(VALID_4X4)
    assert is_valid_solution([[1, 0], [0, 1]])


def test_reports_unbalanced_rows_and_runs():
    grid = [
        [0, 0, 0, 1],
        [1, 1, 0, 0],
        [0, 1, 1, 0],
        [1, 0, 1, 1],
    ]

    violations = find_violations(grid)

    assert "row 0 is not balanced" in violations
    assert "row 0 has three equal values in a row" in violations
    assert "row 3 is not balanced" in violations
    assert not is_valid_solution(grid)


def test_reports_repeated_rows_and_columns():
    grid = [
        [0, 1, 0, 1],
        [0, 1, 0, 1],
        [1, 0, 1, 0],
        [1, 0, 1, 0],
    ]

    violations = find_violations(grid)

    assert "row 0 is repeated" in violations
    assert "row 2 is repeated" in violations
    assert "column 0 is repeated" in violations
    assert "column 1 is repeated" in violations


def test_reports_vertical_runs():
    grid = [
        [1, 0, 0, 1],
        [1, 0, 1, 0],
        [1, 1, 0, 0],
        [0, 1, 1, 0],
    ]

    assert "column 0 has three equal values in a row" in find_violations(grid)


def test_rejects_bad_shapes_and_values():
    assert find_violations([[0, 1, 0], [1, 0, 1]]) == ["dimensions 3x2 are not even"]
    assert find_violations([[0, 1], [1]]) == ["grid is not rectangular"]
    assert find_violations([]) == ["grid is not rectangular"]
    assert find_violations([[0, 2], [1, 0]]) == ["cell [0,1] is not 0 or 1"]


def test_checks_given_cells_were_kept():
    givens = [
        ["0", "X", "X", "X"],
        ["X", "X", "X", "X"],
        ["X", "X", "X", "X"],
        ["X", "X", "X", 1],
    ]
    assert find_violations(VALID_4X4, givens) == ["given cell [3,3] was changed"]

    givens[3][3] = "0"
    assert find_violations(VALID_4X4, givens) == []
