"""Random puzzle generator built on the propagation engine."""

from __future__ import annotations
import random
from typing import List, Optional

from .. import config
from ..core.digits import MEMBERS, POPCOUNT
from ..core.state import CandidateState
from ..logging_utils import get_logger
from ..solvers.propagation import assign

logger = get_logger(__name__)


class PuzzleGenerator:
    """
    Generator for random Sudoku puzzles.

    Algorithm:
    1. Visit the cells in random order, assigning each a random candidate
       and propagating.
    2. Stop once enough cells are solved with enough distinct digits; the
       solved cells become the givens.
    3. On a contradiction, start again from an empty board.

    Puzzles are consistent with the rules but may have several solutions.
    """

    def __init__(self, seed: Optional[int] = None, max_attempts: int = 1000):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            max_attempts: Fresh boards to try before giving up.
        """
        self.rng = random.Random(seed)
        self.max_attempts = max_attempts

    def generate(self, min_givens: int = config.DEFAULT_MIN_GIVENS) -> str:
        """
        Generate one puzzle.

        Args:
            min_givens: Minimum number of filled cells (17-81).

        Returns:
            An 81-character puzzle string with '.' for empty cells.
        """
        if not 17 <= min_givens <= 81:
            raise ValueError(f"min_givens must be 17-81, got {min_givens}")

        for attempt in range(1, self.max_attempts + 1):
            puzzle = self._attempt(min_givens)
            if puzzle is not None:
                logger.debug("Generated puzzle after %d attempt(s)", attempt)
                return puzzle
        raise RuntimeError(f"No puzzle generated in {self.max_attempts} attempts")

    def generate_batch(self, count: int, min_givens: int = config.DEFAULT_MIN_GIVENS) -> List[str]:
        """Generate ``count`` puzzles."""
        return [self.generate(min_givens) for _ in range(count)]

    def _attempt(self, min_givens: int) -> Optional[str]:
        state = CandidateState()
        squares = list(state.topology.squares)
        self.rng.shuffle(squares)

        for cell in squares:
            digit = self.rng.choice(list(state[cell]))
            if assign(state, cell, digit) is None:
                return None
            solved = [MEMBERS[m][0] for m in state.masks if POPCOUNT[m] == 1]
            if len(solved) >= min_givens and len(set(solved)) >= config.MIN_DISTINCT_GIVENS:
                return "".join(
                    str(MEMBERS[m][0]) if POPCOUNT[m] == 1 else "." for m in state.masks
                )
        return None
