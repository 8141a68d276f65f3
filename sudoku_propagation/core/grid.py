"""Validation of 81-character puzzle strings."""

from __future__ import annotations
from typing import Dict

from .. import config
from ..exceptions import PuzzleFormatError
from .topology import COLS, get_topology

ALLOWED_CHARS = frozenset(COLS + config.EMPTY_CHARS)


def grid_values(grid: str) -> Dict[str, str]:
    """
    Map each cell label to its character in a puzzle string.

    Args:
        grid: Exactly 81 characters in row-major order (A1..A9, B1..I9),
              '1'-'9' for givens, '0' or '.' for empty cells.

    Returns:
        Dict of label -> character.

    Raises:
        PuzzleFormatError: if the length or any character is wrong.
    """
    if not isinstance(grid, str):
        raise PuzzleFormatError(f"Puzzle must be a string, got {type(grid).__name__}")
    squares = get_topology().squares
    if len(grid) != len(squares):
        raise PuzzleFormatError(f"Puzzle must be {len(squares)} characters long, got {len(grid)}")
    for pos, char in enumerate(grid):
        if char not in ALLOWED_CHARS:
            raise PuzzleFormatError(
                f"Invalid character {char!r} at position {pos}; "
                f"expected 1-9, 0 or '.'"
            )
    return dict(zip(squares, grid))


def givens(grid: str) -> Dict[str, int]:
    """Only the filled cells of a puzzle string, as label -> digit."""
    return {s: int(c) for s, c in grid_values(grid).items() if c not in config.EMPTY_CHARS}
