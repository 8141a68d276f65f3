"""Sudoku solving by constraint propagation and depth-first search."""

from .core import CandidateState, DigitSet, Topology, get_topology, display_grid, display_line
from .exceptions import InvalidAssignmentError, PuzzleFormatError, SudokuError
from .solvers import PropagationSolver, SolverStats, assign, eliminate, parse_grid, search, solve

__version__ = "1.0.0"

__all__ = [
    "CandidateState",
    "DigitSet",
    "Topology",
    "get_topology",
    "display_grid",
    "display_line",
    "InvalidAssignmentError",
    "PuzzleFormatError",
    "SudokuError",
    "PropagationSolver",
    "SolverStats",
    "assign",
    "eliminate",
    "parse_grid",
    "search",
    "solve",
]
