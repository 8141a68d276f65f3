"""Command-line interface for the Sudoku solver."""

import argparse
import sys
from typing import List, Optional

from . import config
from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .core.render import display_grid, display_line
from .exceptions import PuzzleFormatError
from .generator import PuzzleGenerator
from .solvers import PropagationSolver, parse_grid


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using constraint propagation and search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle and print the solved grid
  python -m sudoku_propagation.cli solve "4.....8.5.3..." --grid

  # Generate 5 puzzles with at least 20 givens
  python -m sudoku_propagation.cli generate --count 5 --min-givens 20

  # Solve 50 random puzzles and chart the timings
  python -m sudoku_propagation.cli benchmark --puzzles 50 --charts results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "puzzle", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--grid", "-g", action="store_true",
        help="Print the solution as a grid instead of a single line"
    )
    solve_parser.add_argument(
        "--no-search", action="store_true",
        help="Only propagate the givens; fail if that does not finish the puzzle"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate random puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--min-givens", "-m", type=int, default=config.DEFAULT_MIN_GIVENS,
        help=f"Minimum number of givens (default: {config.DEFAULT_MIN_GIVENS})"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Solve many puzzles and report timings")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=config.DEFAULT_BENCHMARK_PUZZLES,
        help=f"Random puzzles to generate (default: {config.DEFAULT_BENCHMARK_PUZZLES})"
    )
    bench_parser.add_argument(
        "--file", "-f", type=str, default=None,
        help="Read puzzles from a file, one per line, instead of generating them"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for generated puzzles (default: 42)"
    )
    bench_parser.add_argument(
        "--charts", "-c", type=str, default=None,
        help="Write charts to this directory"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        cmd_example()
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "generate":
        cmd_generate(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_example():
    """Solve the built-in example puzzle."""
    print(f"Example from http://norvig.com/top95.txt:  {config.EXAMPLE_PUZZLE}")
    solution, _ = PropagationSolver(track_memory=False).solve(config.EXAMPLE_PUZZLE)
    if solution is None:
        print("No solution")
        sys.exit(1)
    print(f"Solution: {display_line(solution)}")


def cmd_solve(args):
    """Handle the solve command."""
    puzzle = args.puzzle.strip()

    try:
        initial = parse_grid(puzzle)
    except PuzzleFormatError as e:
        print(f"Error parsing puzzle: {e}", file=sys.stderr)
        sys.exit(1)

    if initial is not None:
        print("After propagating the givens:")
        print(display_grid(initial))

    solver = PropagationSolver(use_search=not args.no_search)
    solution, stats = solver.solve(puzzle)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Search calls: {stats.iterations:,}")
            print(f"  Branch points: {stats.nodes_explored:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(display_grid(solution) if args.grid else display_line(solution))
    else:
        print("✗ No solution")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Search calls: {stats.iterations:,}")
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = PuzzleGenerator(seed=args.seed)
    try:
        puzzles = generator.generate_batch(args.count, args.min_givens)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for puzzle in puzzles:
        print(puzzle)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    if args.file:
        with open(args.file) as f:
            puzzles = [line.strip() for line in f if line.strip()]
    else:
        puzzles = PuzzleGenerator(seed=args.seed).generate_batch(args.puzzles)

    if not puzzles:
        print("No puzzles to solve", file=sys.stderr)
        sys.exit(1)

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")

    benchmark = Benchmark(puzzles)
    try:
        results = benchmark.run()
    except PuzzleFormatError as e:
        print(f"Error parsing puzzle: {e}", file=sys.stderr)
        sys.exit(1)

    summary = benchmark.get_summary()
    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"  Solved: {summary['total_solved']}/{summary['total_puzzles']}")
    print(f"  Valid: {summary['total_valid']}/{summary['total_puzzles']}")
    print(f"  Solved by propagation alone: {summary['solved_by_propagation']}")
    print(f"  Avg Time: {summary['avg_time_seconds']:.4f}s")
    print(f"  Max Time: {summary['max_time_seconds']:.4f}s")
    print(f"  Rate: {summary['puzzles_per_second']:.1f} puzzles/s")

    if args.charts and results:
        visualizer = Visualizer(results, args.charts)
        charts = visualizer.generate_all()
        print(f"\nCharts saved to {args.charts}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")


if __name__ == "__main__":
    main()
