"""Solver combining constraint propagation with depth-first search."""

from __future__ import annotations
from typing import Optional

from ..core.state import CandidateState
from .base_solver import BaseSolver
from .search import parse_grid, search


class PropagationSolver(BaseSolver):
    """
    Sudoku solver in the style of Norvig's constraint propagation.

    This solver uses:
    - Candidate sets: each cell keeps a bitset of possible digits.
    - Propagation: naked singles and hidden singles, applied recursively
      on every assignment and elimination.
    - Search: if propagation stalls, depth-first search on the open cell
      with the fewest candidates, cloning the state per branch.
    """

    name = "Constraint Propagation"

    def __init__(self, use_search: bool = True, track_memory: bool = True):
        """
        Args:
            use_search: If False, stop after propagating the givens and only
                        report puzzles that propagation alone solves.
            track_memory: Record peak memory with tracemalloc.
        """
        super().__init__(track_memory=track_memory)
        self.use_search = use_search

    def _solve(self, puzzle: str) -> Optional[CandidateState]:
        state = parse_grid(puzzle)
        if state is None:
            self.stats.extra["contradiction"] = "givens"
            return None

        self.stats.extra["solved_by_propagation"] = state.is_solved()
        if not self.use_search:
            return state if state.is_solved() else None

        return search(state, self.stats)
