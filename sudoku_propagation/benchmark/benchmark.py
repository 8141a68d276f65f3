"""Batch solving of puzzles with timing and validity checks."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from ..core.validator import validate_solution
from ..logging_utils import get_logger
from ..solvers import BaseSolver, PropagationSolver

logger = get_logger(__name__)


@dataclass
class BenchmarkResult:
    """Results from solving a single puzzle."""
    puzzle_id: int
    puzzle: str
    algorithm: str
    solved: bool
    valid: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "valid": self.valid,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Solve a collection of puzzles and collect per-puzzle metrics.

    Every solution is checked against its puzzle with the validator, so a
    result is only ``valid`` if the board is complete, consistent and keeps
    the givens.
    """

    def __init__(self, puzzles: Sequence[str], solver: Optional[BaseSolver] = None):
        """
        Initialize the benchmark.

        Args:
            puzzles: 81-character puzzle strings.
            solver: Solver to run (default: PropagationSolver with memory
                    tracking off).
        """
        self.puzzles = list(puzzles)
        self.solver = solver or PropagationSolver(track_memory=False)
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Solve every puzzle.

        Returns:
            List of BenchmarkResult objects, one per puzzle.

        Raises:
            PuzzleFormatError: if any puzzle string is malformed.
        """
        self.results = []
        logger.info("Solving %d puzzles with %s", len(self.puzzles), self.solver.name)

        for puzzle_id, puzzle in enumerate(
            tqdm(self.puzzles, desc="Solving", disable=not show_progress)
        ):
            solution, stats = self.solver.solve(puzzle)
            self.results.append(BenchmarkResult(
                puzzle_id=puzzle_id,
                puzzle=puzzle,
                algorithm=stats.algorithm,
                solved=stats.solved,
                valid=validate_solution(puzzle, solution),
                time_seconds=stats.time_seconds,
                memory_bytes=stats.memory_bytes,
                iterations=stats.iterations,
                backtracks=stats.backtracks,
                nodes_explored=stats.nodes_explored,
                extra=dict(stats.extra),
            ))

        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        if not self.results:
            return {"total_puzzles": 0, "total_solved": 0, "total_valid": 0}

        times = np.array([r.time_seconds for r in self.results])
        backtracks = np.array([r.backtracks for r in self.results])
        total_time = float(times.sum())

        return {
            "algorithm": self.results[0].algorithm,
            "total_puzzles": len(self.results),
            "total_solved": sum(1 for r in self.results if r.solved),
            "total_valid": sum(1 for r in self.results if r.valid),
            "solved_by_propagation": sum(
                1 for r in self.results if r.extra.get("solved_by_propagation")
            ),
            "avg_time_seconds": float(times.mean()),
            "max_time_seconds": float(times.max()),
            "median_time_seconds": float(np.median(times)),
            "puzzles_per_second": len(self.results) / total_time if total_time > 0 else float("inf"),
            "avg_backtracks": float(backtracks.mean()),
        }
