"""Solvers module: propagation engine, search and solver facade."""

from .base_solver import BaseSolver, SolverStats
from .propagation import assign, eliminate
from .search import parse_grid, search, solve
from .propagation_solver import PropagationSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "assign",
    "eliminate",
    "parse_grid",
    "search",
    "solve",
    "PropagationSolver",
]
