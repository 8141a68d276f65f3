"""Compact bitset of candidate digits 1-9."""

from __future__ import annotations
from typing import Iterable, Iterator, Optional, Tuple

DIGITS: Tuple[int, ...] = tuple(range(1, 10))

EMPTY_MASK = 0
FULL_MASK = (1 << len(DIGITS)) - 1


def bit(digit: int) -> int:
    """Mask bit for a digit (1 -> 0b1, 9 -> 0b100000000)."""
    return 1 << (digit - 1)


def check_digit(digit: int) -> int:
    """Return ``digit`` if it is 1-9, raise ``ValueError`` otherwise."""
    if isinstance(digit, bool) or not isinstance(digit, int) or not 1 <= digit <= 9:
        raise ValueError(f"Digit must be 1-9, got {digit!r}")
    return digit


# Lookup tables indexed by mask (512 entries each), so that size and
# membership queries on a candidate set are single list reads.
POPCOUNT: Tuple[int, ...] = tuple(bin(m).count("1") for m in range(FULL_MASK + 1))
MEMBERS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(d for d in DIGITS if m & bit(d)) for m in range(FULL_MASK + 1)
)
MEMBER_BITS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(bit(d) for d in MEMBERS[m]) for m in range(FULL_MASK + 1)
)


class DigitSet:
    """
    Immutable set of digits backed by a 9-bit mask.

    Iteration is always in increasing digit order. Instances compare equal
    to other ``DigitSet``s with the same mask and to plain ``set`` or
    ``frozenset`` objects holding the same digits.
    """

    __slots__ = ("mask",)

    def __init__(self, digits: Iterable[int] = ()):
        mask = EMPTY_MASK
        for d in digits:
            mask |= bit(check_digit(d))
        self.mask = mask

    @classmethod
    def from_mask(cls, mask: int) -> DigitSet:
        """Wrap a raw mask."""
        if not 0 <= mask <= FULL_MASK:
            raise ValueError(f"Mask must be 0-{FULL_MASK}, got {mask}")
        digit_set = cls.__new__(cls)
        digit_set.mask = mask
        return digit_set

    @classmethod
    def full(cls) -> DigitSet:
        """All nine digits."""
        return cls.from_mask(FULL_MASK)

    def single(self) -> Optional[int]:
        """The only digit of a singleton set, else None."""
        if POPCOUNT[self.mask] == 1:
            return MEMBERS[self.mask][0]
        return None

    def without(self, digit: int) -> DigitSet:
        """Copy of this set with ``digit`` removed."""
        return DigitSet.from_mask(self.mask & ~bit(check_digit(digit)))

    def __contains__(self, digit: object) -> bool:
        if isinstance(digit, bool) or not isinstance(digit, int) or not 1 <= digit <= 9:
            return False
        return bool(self.mask & bit(digit))

    def __iter__(self) -> Iterator[int]:
        return iter(MEMBERS[self.mask])

    def __len__(self) -> int:
        return POPCOUNT[self.mask]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DigitSet):
            return self.mask == other.mask
        if isinstance(other, (set, frozenset)):
            return set(MEMBERS[self.mask]) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(MEMBERS[self.mask]))

    def __str__(self) -> str:
        return "".join(str(d) for d in MEMBERS[self.mask])

    def __repr__(self) -> str:
        return f"DigitSet({{{', '.join(str(d) for d in self)}}})"
