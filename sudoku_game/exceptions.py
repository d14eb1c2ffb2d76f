"""Exceptions raised by the Sudoku engine."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class GenerationError(SudokuError):
    """A full solved grid could not be built from an empty board.

    This never happens with correct placement rules, so it is reported as an
    internal defect and is not retried.
    """


class PuzzleError(SudokuError, ValueError):
    """A player-supplied puzzle is malformed, contradictory or ambiguous."""
