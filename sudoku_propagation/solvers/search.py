"""Depth-first search over candidate states, driven by propagation."""

from __future__ import annotations
from typing import Optional

from .. import config
from ..core.digits import POPCOUNT
from ..core.grid import grid_values
from ..core.state import CandidateState
from ..logging_utils import get_logger
from .base_solver import SolverStats
from .propagation import assign

logger = get_logger(__name__)


def parse_grid(grid: str) -> Optional[CandidateState]:
    """
    Build the initial state of a puzzle by assigning each given.

    Args:
        grid: 81-character puzzle string.

    Returns:
        The propagated state, or None if the givens contradict each other.

    Raises:
        PuzzleFormatError: if ``grid`` is malformed.
    """
    values = grid_values(grid)
    state = CandidateState()

    for cell, char in values.items():
        if char in config.EMPTY_CHARS:
            continue
        digit = int(char)
        if digit not in state[cell]:
            logger.debug("Given %s=%d already ruled out by earlier givens", cell, digit)
            state.contradictory = True
            return None
        if assign(state, cell, digit) is None:
            logger.debug("Given %s=%d leads to a contradiction", cell, digit)
            return None

    return state


def search(
    state: Optional[CandidateState],
    stats: Optional[SolverStats] = None,
) -> Optional[CandidateState]:
    """
    Solve by trying each candidate of the most constrained open cell.

    Each alternative is tried on its own copy of ``state``, so a failed
    branch never affects its siblings. The first branch that reaches a
    fully solved board wins.

    Args:
        state: Propagated state, or None for an earlier contradiction.
        stats: Optional counters to update (iterations, nodes explored,
               backtracks).

    Returns:
        A solved state, or None if no assignment works.
    """
    if state is None or state.contradictory:
        return None
    if stats is not None:
        stats.iterations += 1

    # Minimum remaining values; ties go to the first cell in board order.
    best = None
    best_count = 10
    for i, mask in enumerate(state.masks):
        count = POPCOUNT[mask]
        if count == 0:
            return None
        if 1 < count < best_count:
            best, best_count = i, count
    if best is None:
        return state

    cell = state.topology.squares[best]
    if stats is not None:
        stats.nodes_explored += 1

    for digit in state[cell]:
        branch = state.copy()
        if assign(branch, cell, digit) is not None:
            result = search(branch, stats)
            if result is not None:
                return result
        if stats is not None:
            stats.backtracks += 1

    return None


def solve(grid: str, stats: Optional[SolverStats] = None) -> Optional[CandidateState]:
    """
    Parse a puzzle and search for its solution.

    Returns:
        A fully solved state, or None if the puzzle has no solution.

    Raises:
        PuzzleFormatError: if ``grid`` is malformed.
    """
    return search(parse_grid(grid), stats)
