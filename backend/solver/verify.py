"""Whole-grid checks for completed Binairo solutions."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np


def find_violations(
    grid: Sequence[Sequence[Any]],
    givens: Optional[Sequence[Sequence[Any]]] = None,
) -> list[str]:
    """
    List every Binairo rule a completed grid breaks.

    Args:
        grid: Rows of 0/1 values
        givens: Optional puzzle rows; cells holding 0 or 1 (int or str) must
            keep that value in ``grid``, anything else is ignored

    Returns:
        Human-readable violations, empty when the grid is a valid solution
    """
    try:
        board = np.array(grid, dtype=object)
    except ValueError:
        return ["grid is not rectangular"]
    if board.ndim != 2 or board.size == 0:
        return ["grid is not rectangular"]

    rows, cols = board.shape
    if rows % 2 or cols % 2:
        return [f"dimensions {cols}x{rows} are not even"]

    in_domain = np.vectorize(lambda v: type(v) is int and v in (0, 1), otypes=[bool])(board)
    if not in_domain.all():
        y, x = np.argwhere(~in_domain)[0]
        return [f"cell [{y},{x}] is not 0 or 1"]

    values = board.astype(np.int8)
    violations: list[str] = []

    for axis, name, length in ((1, "row", cols), (0, "column", rows)):
        lines = values if axis == 1 else values.T
        ones = lines.sum(axis=1)
        for index in np.flatnonzero(ones != length // 2):
            violations.append(f"{name} {index} is not balanced")
        runs = (lines[:, :-2] == lines[:, 1:-1]) & (lines[:, 1:-1] == lines[:, 2:])
        for index in np.flatnonzero(runs.any(axis=1)):
            violations.append(f"{name} {index} has three equal values in a row")
        _, first, counts = np.unique(lines, axis=0, return_index=True, return_counts=True)
        for index in sorted(first[counts > 1]):
            violations.append(f"{name} {index} is repeated")

    if givens is not None:
        violations.extend(_given_violations(values, givens))

    return violations


def _given_violations(values: np.ndarray, givens: Sequence[Sequence[Any]]) -> list[str]:
    violations = []
    for y, row in enumerate(givens):
        for x, given in enumerate(row):
            if str(given) not in ("0", "1"):
                continue
            if y >= values.shape[0] or x >= values.shape[1]:
                violations.append(f"given cell [{y},{x}] is outside the grid")
            elif values[y, x] != int(given):
                violations.append(f"given cell [{y},{x}] was changed")
    return violations


def is_valid_solution(
    grid: Sequence[Sequence[Any]],
    givens: Optional[Sequence[Sequence[Any]]] = None,
) -> bool:
    """True if ``grid`` satisfies every Binairo rule (and keeps ``givens``)."""
    return not find_violations(grid, givens)
