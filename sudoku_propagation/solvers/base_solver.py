"""Base solver interface and run statistics."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple
import time
import tracemalloc

from ..logging_utils import get_logger

if TYPE_CHECKING:
    from ..core.state import CandidateState

logger = get_logger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search counters
    iterations: int = 0
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        """
        Args:
            track_memory: Record peak memory with tracemalloc (slows the run).
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: str) -> Tuple[Optional[CandidateState], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        Args:
            puzzle: 81-character puzzle string.

        Returns:
            Tuple of (solved state or None, stats).

        Raises:
            PuzzleFormatError: if the puzzle string is malformed.
        """
        self.stats = SolverStats(algorithm=self.name)

        tracing = self.track_memory and not tracemalloc.is_tracing()
        if tracing:
            tracemalloc.start()

        start_time = time.perf_counter()
        try:
            solution = self._solve(puzzle)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if tracing:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        self.stats.solved = solution is not None and solution.is_solved()
        logger.debug(
            "%s: solved=%s in %.4fs (%d search calls, %d backtracks)",
            self.name, self.stats.solved, self.stats.time_seconds,
            self.stats.iterations, self.stats.backtracks,
        )
        return solution, self.stats

    @abstractmethod
    def _solve(self, puzzle: str) -> Optional[CandidateState]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            puzzle: The puzzle string.

        Returns:
            The solved state, or None if no solution found.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
