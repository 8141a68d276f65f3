"""Per-cell candidate digits, the structure propagation works on."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from .digits import FULL_MASK, MEMBERS, POPCOUNT, DigitSet
from .topology import Cell, Topology, get_topology


class CandidateState(Mapping):
    """
    Mapping of every cell label to the digits it may still hold.

    The masks are mutated in place by the propagation engine. Every search
    branch must work on its own :meth:`copy`; a state that the engine has
    flagged ``contradictory`` must be discarded.
    """

    __slots__ = ("topology", "masks", "contradictory")

    def __init__(
        self,
        masks: Optional[Sequence[int]] = None,
        topology: Optional[Topology] = None,
    ):
        """
        Create a state.

        Args:
            masks: Optional 81 candidate masks in row-major order. If None,
                every cell starts with all nine digits.
            topology: Board topology (default: the shared instance).
        """
        self.topology = topology or get_topology()
        if masks is None:
            self.masks: List[int] = [FULL_MASK] * len(self.topology.squares)
        else:
            if len(masks) != len(self.topology.squares):
                raise ValueError(f"Expected 81 masks, got {len(masks)}")
            self.masks = list(masks)
        self.contradictory = False

    def copy(self) -> CandidateState:
        """Independent clone; changes to either side never reach the other."""
        clone = CandidateState.__new__(CandidateState)
        clone.topology = self.topology
        clone.masks = self.masks[:]
        clone.contradictory = self.contradictory
        return clone

    def __getitem__(self, cell: Cell) -> DigitSet:
        return DigitSet.from_mask(self.masks[self.topology.resolve(cell)])

    def __iter__(self) -> Iterator[str]:
        return iter(self.topology.squares)

    def __len__(self) -> int:
        return len(self.masks)

    def candidates(self, cell: Cell) -> DigitSet:
        """Remaining digits of ``cell``."""
        return self[cell]

    def is_solved(self) -> bool:
        """True when every cell has exactly one candidate."""
        return not self.contradictory and all(POPCOUNT[m] == 1 for m in self.masks)

    def unsolved_cells(self) -> List[str]:
        """Labels of cells with more than one candidate, in board order."""
        return [
            s for s, m in zip(self.topology.squares, self.masks) if POPCOUNT[m] > 1
        ]

    def count_solved(self) -> int:
        """Number of cells down to a single candidate."""
        return sum(1 for m in self.masks if POPCOUNT[m] == 1)

    def to_dict(self) -> Dict[str, str]:
        """Candidate digits of each cell as a string, e.g. ``{'A1': '4'}``."""
        return {
            s: "".join(str(d) for d in MEMBERS[m])
            for s, m in zip(self.topology.squares, self.masks)
        }

    def to_array(self) -> np.ndarray:
        """9x9 grid of solved digits, 0 where a cell is still open."""
        values = [MEMBERS[m][0] if POPCOUNT[m] == 1 else 0 for m in self.masks]
        return np.array(values, dtype=np.int32).reshape(9, 9)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CandidateState):
            return self.masks == other.masks and self.contradictory == other.contradictory
        return super().__eq__(other)

    def __repr__(self) -> str:
        if self.contradictory:
            return "CandidateState(contradictory)"
        return f"CandidateState(solved={self.count_solved()}, unsolved={len(self.unsolved_cells())})"
