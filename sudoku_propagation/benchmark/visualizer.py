"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for benchmark results.

    Shows how solve times are spread and how much search each puzzle
    needed on top of propagation.
    """

    SOLVED_COLOR = "#2ecc71"    # Green
    FAILED_COLOR = "#e74c3c"    # Red

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        if not results:
            raise ValueError("No benchmark results to plot")
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_distribution(),
            self.plot_search_effort(),
        ]

    def plot_time_distribution(self) -> str:
        """Histogram of solve times in milliseconds."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times_ms = np.array([r.time_seconds for r in self.results]) * 1000
        sns.histplot(times_ms, bins=min(30, max(5, len(times_ms))), ax=ax,
                     color=self.SOLVED_COLOR, edgecolor="black", linewidth=0.5)

        ax.axvline(np.median(times_ms), color="gray", linestyle="--", alpha=0.7,
                   label=f"median {np.median(times_ms):.2f} ms")
        ax.set_xlabel("Solve Time (ms)", fontsize=12)
        ax.set_ylabel("Puzzles", fontsize=12)
        ax.set_title("Solve Time Distribution", fontsize=14, fontweight="bold")
        ax.legend()

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches="tight")
        plt.close(fig)

        return path

    def plot_search_effort(self) -> str:
        """Scatter of branch points explored against solve time."""
        fig, ax = plt.subplots(figsize=(10, 6))

        nodes = [r.nodes_explored for r in self.results]
        times_ms = [r.time_seconds * 1000 for r in self.results]
        colors = [self.SOLVED_COLOR if r.solved else self.FAILED_COLOR for r in self.results]

        ax.scatter(nodes, times_ms, c=colors, edgecolor="black", linewidth=0.5, alpha=0.8)

        ax.set_xlabel("Branch Points Explored", fontsize=12)
        ax.set_ylabel("Solve Time (ms)", fontsize=12)
        ax.set_title("Search Effort vs Solve Time", fontsize=14, fontweight="bold")
        ax.set_xlim(left=-0.5)
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "search_effort.png")
        plt.savefig(path, dpi=150, bbox_inches="tight")
        plt.close(fig)

        return path
