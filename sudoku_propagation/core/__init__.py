"""Core module: board topology, candidate state, parsing, rendering and validation."""

from .digits import DigitSet
from .topology import Topology, get_topology
from .state import CandidateState
from .grid import grid_values, givens
from .render import display_line, display_grid
from .validator import is_valid_grid, is_solved_grid, validate_solution

__all__ = [
    "DigitSet",
    "Topology",
    "get_topology",
    "CandidateState",
    "grid_values",
    "givens",
    "display_line",
    "display_grid",
    "is_valid_grid",
    "is_solved_grid",
    "validate_solution",
]
