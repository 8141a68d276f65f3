"""Unit tests for the candidate digit bitset."""

import pytest
from sudoku_propagation.core.digits import DigitSet, FULL_MASK, POPCOUNT, MEMBERS, bit


class TestDigitSet:
    """Tests for DigitSet."""

    def test_full_and_empty(self):
        """Test the full and empty sets."""
        assert len(DigitSet.full()) == 9
        assert list(DigitSet.full()) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
        assert len(DigitSet()) == 0
        assert not DigitSet()

    def test_membership_and_order(self):
        """Test membership and ascending iteration."""
        digits = DigitSet([7, 2, 9])
        assert 2 in digits
        assert 3 not in digits
        assert 0 not in digits
        assert "2" not in digits
        assert list(digits) == [2, 7, 9]
        assert str(digits) == "279"

    def test_single(self):
        """Test singleton detection."""
        assert DigitSet([4]).single() == 4
        assert DigitSet([4, 5]).single() is None
        assert DigitSet().single() is None

    def test_without(self):
        """Test removal returns a new set."""
        digits = DigitSet([1, 2])
        smaller = digits.without(2)
        assert smaller == {1}
        assert digits == {1, 2}
        assert digits.without(5) == digits

    def test_equality_with_sets(self):
        """Test comparison with plain sets and hashing."""
        assert DigitSet([3, 1]) == {1, 3}
        assert DigitSet([3, 1]) == frozenset({1, 3})
        assert DigitSet([3, 1]) != {1}
        assert hash(DigitSet([3, 1])) == hash(frozenset({1, 3}))

    @pytest.mark.parametrize("digit", [0, 10, -1, True])
    def test_rejects_bad_digits(self, digit):
        """Test that digits outside 1-9 are rejected."""
        with pytest.raises(ValueError):
            DigitSet([digit])

    def test_from_mask(self):
        """Test wrapping raw masks."""
        assert DigitSet.from_mask(bit(1) | bit(9)) == {1, 9}
        with pytest.raises(ValueError):
            DigitSet.from_mask(FULL_MASK + 1)

    def test_lookup_tables(self):
        """Test the popcount and member tables."""
        assert POPCOUNT[0] == 0
        assert POPCOUNT[FULL_MASK] == 9
        assert MEMBERS[bit(5)] == (5,)
        assert MEMBERS[0b101] == (1, 3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
