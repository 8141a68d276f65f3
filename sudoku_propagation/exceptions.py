"""Exception types raised by the solver."""


class SudokuError(Exception):
    """Base class for errors raised by this package."""


class PuzzleFormatError(SudokuError, ValueError):
    """The puzzle text is not 81 characters of digits and placeholders."""


class InvalidAssignmentError(SudokuError, ValueError):
    """A digit was assigned to a cell that no longer allows it."""
