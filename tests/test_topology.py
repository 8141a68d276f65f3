"""Unit tests for the board topology."""

import pytest
from sudoku_propagation.core.topology import Topology, get_topology, cross


class TestTopology:
    """Tests for cells, units and peers."""

    def test_counts(self):
        """Test that the board has 81 cells and 27 units."""
        topology = Topology()
        assert len(topology.squares) == 81
        assert len(topology.unitlist) == 27
        assert all(len(u) == 9 for u in topology.unitlist)

    def test_every_cell_has_three_units_and_twenty_peers(self):
        """Test the per-cell invariants for all 81 cells."""
        topology = Topology()
        for s in topology.squares:
            assert len(topology.units_of(s)) == 3
            assert len(topology.peers_of(s)) == 20
            assert s not in topology.peers_of(s)
            assert all(s in u for u in topology.units_of(s))

    def test_units_partition(self):
        """Test that columns, rows and boxes each cover the board once."""
        topology = Topology()
        columns, rows, boxes = (topology.unitlist[i:i + 9] for i in (0, 9, 18))
        for group in (columns, rows, boxes):
            cells = [s for u in group for s in u]
            assert sorted(cells) == sorted(topology.squares)

    def test_c2_units(self):
        """Test the units of C2: column 2, row C, top-left box."""
        topology = Topology()
        assert topology.units_of("C2") == (
            ("A2", "B2", "C2", "D2", "E2", "F2", "G2", "H2", "I2"),
            ("C1", "C2", "C3", "C4", "C5", "C6", "C7", "C8", "C9"),
            ("A1", "A2", "A3", "B1", "B2", "B3", "C1", "C2", "C3"),
        )

    def test_c2_peers(self):
        """Test the peers of C2, including their visiting order."""
        topology = Topology()
        expected = (
            "A2", "B2", "D2", "E2", "F2", "G2", "H2", "I2",
            "C1", "C3", "C4", "C5", "C6", "C7", "C8", "C9",
            "A1", "A3", "B1", "B3",
        )
        assert topology.peers_of("C2") == frozenset(expected)
        assert topology.ordered_peers["C2"] == expected

    def test_index_tables_mirror_labels(self):
        """Test that the integer tables describe the same structure."""
        topology = Topology()
        i = topology.resolve("C2")
        assert sorted(topology.squares[p] for p in topology.peer_indices[i]) == sorted(topology.peers_of("C2"))
        assert [tuple(topology.squares[j] for j in u) for u in topology.unit_indices[i]] == list(topology.units_of("C2"))

    def test_resolve(self):
        """Test cell addressing by label and by (row, col)."""
        topology = Topology()
        assert topology.resolve("A1") == 0
        assert topology.resolve("I9") == 80
        assert topology.resolve((2, 1)) == topology.resolve("C2") == 19
        assert topology.label((8, 0)) == "I1"

    @pytest.mark.parametrize("cell", ["J1", "A0", "a1", (9, 0), (0, -1), (1,), 5])
    def test_resolve_rejects_unknown_cells(self, cell):
        """Test that cells off the board raise KeyError."""
        with pytest.raises(KeyError):
            Topology().resolve(cell)

    def test_shared_instance(self):
        """Test that the process-wide topology is built once."""
        assert get_topology() is get_topology()

    def test_cross(self):
        """Test the label cross product."""
        assert cross("AB", "12") == ["A1", "A2", "B1", "B2"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
