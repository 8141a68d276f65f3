"""Validation utilities for Sudoku grids and solutions."""

from __future__ import annotations
from typing import Iterator, Optional

import numpy as np

from .grid import givens
from .state import CandidateState
from .topology import get_topology

_ALL_DIGITS = np.arange(1, 10)


def _units(grid: np.ndarray) -> Iterator[np.ndarray]:
    """Every row, column and box of a 9x9 grid as a flat array."""
    for i in range(9):
        yield grid[i, :]
        yield grid[:, i]
    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            yield grid[box_row:box_row + 3, box_col:box_col + 3].flatten()


def _check_shape(grid: np.ndarray) -> np.ndarray:
    grid = np.asarray(grid)
    if grid.shape != (9, 9):
        raise ValueError(f"Grid shape must be (9, 9), got {grid.shape}")
    return grid


def is_valid_grid(grid: np.ndarray) -> bool:
    """
    Check that no row, column or box repeats a digit.

    Zeros are empty cells and are ignored.
    """
    grid = _check_shape(grid)
    for unit in _units(grid):
        filled = unit[unit != 0]
        if len(filled) != len(np.unique(filled)):
            return False
    return True


def is_solved_grid(grid: np.ndarray) -> bool:
    """Check that every row, column and box holds each digit 1-9 exactly once."""
    grid = _check_shape(grid)
    return all(np.array_equal(np.sort(unit), _ALL_DIGITS) for unit in _units(grid))


def validate_solution(puzzle: str, solution: Optional[CandidateState]) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original 81-character puzzle.
        solution: The state returned by the solver (None means no solution).

    Returns:
        True if the solution is complete, valid and keeps every given.
    """
    if solution is None or not solution.is_solved():
        return False

    topology = get_topology()
    grid = solution.to_array()
    for cell, digit in givens(puzzle).items():
        row, col = divmod(topology.resolve(cell), 9)
        if grid[row, col] != digit:
            return False

    return is_solved_grid(grid)
