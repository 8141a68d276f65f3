"""
Settings shared across the package.

Edit these values, or set the matching environment variables, to change
logging verbosity and the defaults used by the generator, the benchmark
and the command line.
"""

from __future__ import annotations

import os

# ==== Logging ==============================================================

LOG_LEVEL: str = os.environ.get("SUDOKU_LOG_LEVEL", "WARNING").upper()

# ==== Puzzle text ==========================================================

# Characters accepted as an empty cell in puzzle strings
EMPTY_CHARS: str = "0."

# ==== Generator ============================================================

# Stop once this many cells are solved...
DEFAULT_MIN_GIVENS: int = 17

# ...and at least this many different digits appear among them
MIN_DISTINCT_GIVENS: int = 8

# ==== Benchmark ============================================================

DEFAULT_BENCHMARK_PUZZLES: int = 10

# Example from http://norvig.com/top95.txt, solved when the CLI runs bare
EXAMPLE_PUZZLE: str = (
    "1.....7.9.4...72..8.........7..1..6.3.......5.6..4..2.........8..53...7.7.2....46"
)
