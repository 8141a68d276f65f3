"""Unit tests for assignment and elimination."""

import pytest
from sudoku_propagation.core.state import CandidateState
from sudoku_propagation.core.topology import get_topology
from sudoku_propagation.exceptions import InvalidAssignmentError
from sudoku_propagation.solvers import assign, eliminate


class TestEliminate:
    """Tests for eliminate()."""

    def test_removes_digit(self):
        """Test that the digit leaves the cell and the state is returned."""
        state = CandidateState()
        assert eliminate(state, "A1", 5) is state
        assert state["A1"] == {1, 2, 3, 4, 6, 7, 8, 9}

    def test_idempotent(self):
        """Test that eliminating twice equals eliminating once."""
        state = CandidateState()
        eliminate(state, "D4", 3)
        once = state.copy()
        assert eliminate(state, "D4", 3) is state
        assert state == once

    def test_naked_single_clears_peers(self):
        """Test that a cell left with one digit removes it from its peers."""
        state = CandidateState()
        for d in range(2, 10):
            assert eliminate(state, "A1", d) is not None

        assert state["A1"] == {1}
        for p in get_topology().peers_of("A1"):
            assert 1 not in state[p]

    def test_hidden_single_assigns(self):
        """Test that the last place for a digit in a unit receives it."""
        state = CandidateState()
        for col in "12345678":
            assert eliminate(state, "A" + col, 1) is not None

        assert state["A9"] == {1}
        for p in get_topology().peers_of("A9"):
            assert 1 not in state[p]

    def test_empty_cell_is_contradiction(self):
        """Test that removing the last candidate signals a contradiction."""
        state = CandidateState()
        for d in range(1, 9):
            assert eliminate(state, "E5", d) is not None

        assert eliminate(state, "E5", 9) is None
        assert state.contradictory
        assert eliminate(state, "A1", 1) is None

    def test_addressing_by_row_col(self):
        """Test that cells can be given as (row, col)."""
        state = CandidateState()
        eliminate(state, (2, 1), 4)
        assert 4 not in state["C2"]

    def test_bad_arguments(self):
        """Test that bad digits and cells raise."""
        state = CandidateState()
        with pytest.raises(ValueError):
            eliminate(state, "A1", 0)
        with pytest.raises(KeyError):
            eliminate(state, "J1", 1)


class TestAssign:
    """Tests for assign()."""

    def test_sets_cell_and_clears_peers(self):
        """Test that an assigned digit is the cell's only candidate and no peer keeps it."""
        state = CandidateState()
        assert assign(state, "C2", 7) is state

        assert state["C2"] == {7}
        for p in get_topology().peers_of("C2"):
            assert 7 not in state[p]

    def test_several_assignments(self):
        """Test monotonicity across consecutive assignments."""
        state = CandidateState()
        placements = {"A1": 1, "B4": 2, "E5": 3, "I9": 4, "G2": 5}
        for cell, digit in placements.items():
            assert assign(state, cell, digit) is not None

        topology = get_topology()
        for cell, digit in placements.items():
            assert state[cell] == {digit}
            assert all(digit not in state[p] for p in topology.peers_of(cell))

    def test_assign_already_solved_cell(self):
        """Test that repeating an assignment changes nothing."""
        state = CandidateState()
        assign(state, "A1", 3)
        before = state.copy()
        assert assign(state, "A1", 3) is state
        assert state == before

    def test_non_candidate_raises(self):
        """Test that assigning an eliminated digit is a caller error."""
        state = CandidateState()
        eliminate(state, "A1", 5)
        with pytest.raises(InvalidAssignmentError):
            assign(state, "A1", 5)

    def test_contradiction(self):
        """Test that an assignment that empties a peer fails."""
        state = CandidateState()
        # B1 and C1 share the pair {1, 2}; A1 = 1 would leave them one digit.
        for d in range(3, 10):
            eliminate(state, "B1", d)
            eliminate(state, "C1", d)
        assert state["B1"] == state["C1"] == {1, 2}
        assert 1 in state["A1"]

        assert assign(state, "A1", 1) is None
        assert state.contradictory

    def test_contradictory_state_is_not_reused(self):
        """Test that a flagged state keeps failing."""
        state = CandidateState()
        state.contradictory = True
        assert assign(state, "A1", 1) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
