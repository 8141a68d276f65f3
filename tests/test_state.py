"""Unit tests for candidate state and puzzle string parsing."""

import numpy as np
import pytest
from sudoku_propagation.core.state import CandidateState
from sudoku_propagation.core.grid import grid_values, givens
from sudoku_propagation.exceptions import PuzzleFormatError
from sudoku_propagation.solvers import eliminate


class TestCandidateState:
    """Tests for CandidateState."""

    def test_fresh_state(self):
        """Test that a new state allows every digit everywhere."""
        state = CandidateState()
        assert len(state) == 81
        assert all(state[s] == set(range(1, 10)) for s in state)
        assert not state.is_solved()
        assert not state.contradictory
        assert len(state.unsolved_cells()) == 81

    def test_copy_is_independent(self):
        """Test that a clone and its source never share changes."""
        state = CandidateState()
        clone = state.copy()
        eliminate(clone, "E5", 5)

        assert 5 in state["E5"]
        assert 5 not in clone["E5"]
        assert clone != state

    def test_mapping_access(self):
        """Test label and (row, col) lookup."""
        state = CandidateState()
        assert state["C2"] == state[(2, 1)]
        assert "C2" in state
        assert "Z9" not in state
        with pytest.raises(KeyError):
            state["Z9"]

    def test_to_dict_and_array(self):
        """Test exports of a partly narrowed state."""
        masks = [0b1] + [0b11] * 80
        state = CandidateState(masks)
        assert state.to_dict()["A1"] == "1"
        assert state.to_dict()["A2"] == "12"
        grid = state.to_array()
        assert grid.shape == (9, 9)
        assert grid[0, 0] == 1
        assert np.count_nonzero(grid) == 1
        assert state.count_solved() == 1

    def test_rejects_wrong_mask_count(self):
        """Test that states must have 81 cells."""
        with pytest.raises(ValueError):
            CandidateState([0b1] * 80)


class TestGridValues:
    """Tests for puzzle string validation."""

    def test_maps_cells_in_row_major_order(self):
        """Test the label mapping."""
        values = grid_values("1" + "." * 79 + "9")
        assert values["A1"] == "1"
        assert values["I9"] == "9"
        assert values["A2"] == "."

    def test_givens(self):
        """Test extraction of filled cells only."""
        assert givens("0" * 40 + "7" + "." * 40) == {"E5": 7}

    @pytest.mark.parametrize("grid", [
        "",
        "1" * 80,
        "1" * 82,
        "x" + "0" * 80,
        " " + "0" * 80,
        "0" * 40 + "-" + "0" * 40,
    ])
    def test_rejects_malformed(self, grid):
        """Test that wrong lengths and characters raise a format error."""
        with pytest.raises(PuzzleFormatError):
            grid_values(grid)

    def test_format_error_is_value_error(self):
        """Test that format errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            grid_values("123")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
