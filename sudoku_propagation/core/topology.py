"""Cells, units and peers of the 9x9 board."""

from __future__ import annotations
from functools import lru_cache
from typing import Dict, FrozenSet, List, Tuple, Union

ROWS = "ABCDEFGHI"
COLS = "123456789"
BOX_ROWS = ("ABC", "DEF", "GHI")
BOX_COLS = ("123", "456", "789")

Cell = Union[str, Tuple[int, int]]
Unit = Tuple[str, ...]


def cross(rows: str, cols: str) -> List[str]:
    """Cross product of row letters and column digits, e.g. ``['A1', 'A2']``."""
    return [r + c for r in rows for c in cols]


class Topology:
    """
    Static structure of the board.

    Cells are labelled ``A1`` to ``I9`` (row letter, column digit) and
    enumerated in row-major order. The 27 units are listed as the nine
    columns, then the nine rows, then the nine boxes; a cell's own units
    keep that order (column, row, box). Nothing here changes after
    construction; use :func:`get_topology` for the shared instance.
    """

    def __init__(self):
        self.squares: Tuple[str, ...] = tuple(cross(ROWS, COLS))
        self.index: Dict[str, int] = {s: i for i, s in enumerate(self.squares)}

        self.unitlist: Tuple[Unit, ...] = tuple(
            [tuple(cross(ROWS, c)) for c in COLS]
            + [tuple(cross(r, COLS)) for r in ROWS]
            + [tuple(cross(rs, cs)) for rs in BOX_ROWS for cs in BOX_COLS]
        )
        self.units: Dict[str, Tuple[Unit, ...]] = {
            s: tuple(u for u in self.unitlist if s in u) for s in self.squares
        }

        # Peers keep first-seen order across the cell's units so that the
        # engine visits them deterministically.
        ordered_peers: Dict[str, Tuple[str, ...]] = {}
        for s in self.squares:
            seen: Dict[str, None] = {}
            for u in self.units[s]:
                for p in u:
                    if p != s:
                        seen[p] = None
            ordered_peers[s] = tuple(seen)
        self.ordered_peers = ordered_peers
        self.peers: Dict[str, FrozenSet[str]] = {
            s: frozenset(p) for s, p in ordered_peers.items()
        }

        # Integer mirrors of the tables above, indexed by cell position.
        self.unit_indices: Tuple[Tuple[Tuple[int, ...], ...], ...] = tuple(
            tuple(tuple(self.index[p] for p in u) for u in self.units[s])
            for s in self.squares
        )
        self.peer_indices: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(self.index[p] for p in ordered_peers[s]) for s in self.squares
        )

    def resolve(self, cell: Cell) -> int:
        """
        Position (0-80) of a cell given as a label or a ``(row, col)`` pair.

        Raises:
            KeyError: if the cell is not on the board.
        """
        if isinstance(cell, str):
            return self.index[cell]
        if isinstance(cell, tuple) and len(cell) == 2:
            row, col = cell
            if isinstance(row, int) and isinstance(col, int) and 0 <= row < 9 and 0 <= col < 9:
                return row * 9 + col
        raise KeyError(cell)

    def label(self, cell: Cell) -> str:
        """Label (``'C2'``) of a cell."""
        return self.squares[self.resolve(cell)]

    def units_of(self, cell: Cell) -> Tuple[Unit, ...]:
        """The column, row and box containing ``cell``."""
        return self.units[self.label(cell)]

    def peers_of(self, cell: Cell) -> FrozenSet[str]:
        """The 20 cells sharing a unit with ``cell``."""
        return self.peers[self.label(cell)]

    def __repr__(self) -> str:
        return f"Topology(cells={len(self.squares)}, units={len(self.unitlist)})"


@lru_cache(maxsize=None)
def get_topology() -> Topology:
    """Process-wide topology, built on first use."""
    return Topology()
