"""
Constraint propagation: assignment and elimination of candidate digits.

Eliminating a digit from a cell triggers two rules:

1. If the cell is left with a single digit, that digit is eliminated from
   all of the cell's peers.
2. If a unit containing the cell is left with a single place for the
   eliminated digit, the digit is assigned there.

``assign`` and ``eliminate`` call each other until the board reaches a
fixed point or some cell or unit runs out of options. A contradiction is
reported by returning None (and flagging the state), never by raising.
"""

from __future__ import annotations
from typing import List, Optional

from ..core.digits import MEMBER_BITS, POPCOUNT, bit, check_digit
from ..core.state import CandidateState
from ..core.topology import Cell, Topology
from ..exceptions import InvalidAssignmentError


def assign(state: CandidateState, cell: Cell, digit: int) -> Optional[CandidateState]:
    """
    Eliminate every digit except ``digit`` from ``cell`` and propagate.

    Args:
        state: State to narrow in place.
        cell: Cell label (``'A1'``) or ``(row, col)`` pair.
        digit: Digit to place; must still be a candidate of ``cell``.

    Returns:
        ``state`` on success, or None if the assignment leads to a
        contradiction. After a contradiction the state is partially
        updated and must be discarded.

    Raises:
        InvalidAssignmentError: if ``digit`` is not a candidate of ``cell``.
    """
    check_digit(digit)
    i = state.topology.resolve(cell)
    if state.contradictory:
        return None
    if not state.masks[i] & bit(digit):
        raise InvalidAssignmentError(
            f"Cannot assign {digit} to {state.topology.squares[i]}: "
            f"candidates are {state[i // 9, i % 9]}"
        )
    if _assign(state.masks, state.topology, i, bit(digit)):
        return state
    state.contradictory = True
    return None


def eliminate(state: CandidateState, cell: Cell, digit: int) -> Optional[CandidateState]:
    """
    Remove ``digit`` from the candidates of ``cell`` and propagate.

    Eliminating a digit that is already gone is a no-op.

    Returns:
        ``state`` on success, or None on contradiction (state must then be
        discarded).
    """
    check_digit(digit)
    i = state.topology.resolve(cell)
    if state.contradictory:
        return None
    if _eliminate(state.masks, state.topology, i, bit(digit)):
        return state
    state.contradictory = True
    return None


def _assign(masks: List[int], topology: Topology, i: int, b: int) -> bool:
    for other in MEMBER_BITS[masks[i] & ~b]:
        if not _eliminate(masks, topology, i, other):
            return False
    # Usually a no-op: rule 1 cleared the peers when the cell became single.
    for p in topology.peer_indices[i]:
        if not _eliminate(masks, topology, p, b):
            return False
    return True


def _eliminate(masks: List[int], topology: Topology, i: int, b: int) -> bool:
    mask = masks[i]
    if not mask & b:
        return True
    mask &= ~b
    masks[i] = mask

    # (1) Naked single
    remaining = POPCOUNT[mask]
    if remaining == 0:
        return False
    if remaining == 1:
        for p in topology.peer_indices[i]:
            if not _eliminate(masks, topology, p, mask):
                return False

    # (2) Hidden single
    for unit in topology.unit_indices[i]:
        places = [j for j in unit if masks[j] & b]
        if not places:
            return False
        if len(places) == 1 and not _assign(masks, topology, places[0], b):
            return False

    return True
