"""Text rendering of candidate states."""

from __future__ import annotations

from .digits import POPCOUNT, FULL_MASK
from .state import CandidateState
from .topology import COLS, ROWS


def center(text: str, width: int) -> str:
    """Pad ``text`` to ``width``, putting the odd space on the right."""
    lpad = (width - len(text)) // 2
    rpad = width - lpad - len(text)
    return " " * lpad + text + " " * rpad


def display_line(state: CandidateState) -> str:
    """
    Render the board as one 81-character line.

    Solved cells show their digit, untouched cells (all nine candidates)
    show '.', and partially narrowed cells show '?'.
    """
    chars = []
    for mask, digits in zip(state.masks, state.to_dict().values()):
        count = POPCOUNT[mask]
        if count == 1:
            chars.append(digits)
        elif mask == FULL_MASK:
            chars.append(".")
        else:
            chars.append("?")
    return "".join(chars)


def display_grid(state: CandidateState) -> str:
    """
    Render the board as a 2-D grid listing every cell's candidates.

    Each cell is centred in a field one character wider than the longest
    candidate list; boxes are separated by '|' and '-+-' lines.
    """
    values = state.to_dict()
    width = 1 + max(len(v) for v in values.values())
    separator = "+".join(["-" * (width * 3)] * 3)

    lines = []
    for i, r in enumerate(ROWS):
        if i > 0 and i % 3 == 0:
            lines.append(separator)
        row = ""
        for j, c in enumerate(COLS):
            if j > 0 and j % 3 == 0:
                row += "|"
            row += center(values[r + c], width)
        lines.append(row)
    return "\n".join(lines) + "\n"
