"""Row/column/box duplicate detection, always derived from the live board."""

from typing import Set

from .grid import SIZE, Cell, Grid, in_bounds, peers


def conflicting_cells(board: Grid, row: int, col: int) -> Set[Cell]:
    """Identifies the cells that clash with the value at (row, col)."""
    if not in_bounds(row, col) or board[row][col] == 0:
        return set()
    num = board[row][col]
    return {(i, j) for i, j in peers(row, col) if board[i][j] == num}


def has_conflict(board: Grid, row: int, col: int) -> bool:
    """True if the filled cell at (row, col) repeats a value in its row, column or box."""
    return bool(conflicting_cells(board, row, col))


def find_conflicts(board: Grid) -> Set[Cell]:
    """Every filled cell on the board that takes part in a conflict."""
    conflicts = set()
    for i in range(SIZE):
        for j in range(SIZE):
            if (i, j) in conflicts:
                continue
            clashes = conflicting_cells(board, i, j)
            if clashes:
                conflicts.add((i, j))
                conflicts.update(clashes)
    return conflicts
