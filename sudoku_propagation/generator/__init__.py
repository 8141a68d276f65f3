"""Generator module for creating Sudoku puzzles."""

from .generator import PuzzleGenerator

__all__ = ["PuzzleGenerator"]
