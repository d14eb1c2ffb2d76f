"""Pure helpers over a 9x9 grid of digits (0 = empty)."""

import random
from typing import List, Optional, Set, Tuple

Grid = List[List[int]]
Cell = Tuple[int, int]

SIZE = 9
BOX = 3
DIGITS = range(1, 10)


def empty_grid(value: int = 0) -> Grid:
    return [[value] * SIZE for _ in range(SIZE)]


def copy_grid(grid: Grid) -> Grid:
    """Returns an independent copy of the grid."""
    return [row[:] for row in grid]


def shuffle(items: list, rng: Optional[random.Random] = None) -> list:
    """Shuffles a list in place and returns it."""
    (rng or random).shuffle(items)
    return items


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < SIZE


def in_bounds(row, col) -> bool:
    """True if (row, col) are integer coordinates on the board."""
    return _is_index(row) and _is_index(col)


def is_digit(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 9


def box_index(row: int, col: int) -> int:
    return (row // BOX) * BOX + col // BOX


def box_cells(row: int, col: int) -> List[Cell]:
    """Coordinates of the 3x3 box containing (row, col)."""
    box_row, box_col = BOX * (row // BOX), BOX * (col // BOX)
    return [(i, j) for i in range(box_row, box_row + BOX) for j in range(box_col, box_col + BOX)]


def peers(row: int, col: int) -> Set[Cell]:
    """Every other cell sharing a row, column or box with (row, col)."""
    cells = {(row, j) for j in range(SIZE)}
    cells.update((i, col) for i in range(SIZE))
    cells.update(box_cells(row, col))
    cells.discard((row, col))
    return cells


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """Checks if placing 'num' at (row, col) breaks no row, column or box.

    The cell itself is not compared, so the check can be run on a filled
    cell to see whether its value clashes with the rest of the board.
    """
    for i in range(SIZE):
        # Check row and column
        if i != col and grid[row][i] == num:
            return False
        if i != row and grid[i][col] == num:
            return False

    # Check subgrid
    for i, j in box_cells(row, col):
        if (i, j) != (row, col) and grid[i][j] == num:
            return False

    return True


def is_consistent(grid: Grid) -> bool:
    """True if no filled cell clashes with another filled cell."""
    for i in range(SIZE):
        for j in range(SIZE):
            value = grid[i][j]
            if value and not is_valid_placement(grid, i, j, value):
                return False
    return True


def is_solved_grid(grid: Grid) -> bool:
    """True if every row, column and box is a permutation of 1..9."""
    full = set(DIGITS)
    for i in range(SIZE):
        if set(grid[i]) != full:
            return False
        if {grid[r][i] for r in range(SIZE)} != full:
            return False
    for box_row in range(0, SIZE, BOX):
        for box_col in range(0, SIZE, BOX):
            if {grid[i][j] for i, j in box_cells(box_row, box_col)} != full:
                return False
    return True


def count_clues(grid: Grid) -> int:
    return sum(1 for row in grid for value in row if value)


def is_well_formed(grid) -> bool:
    """True if `grid` is a 9x9 list of integer digits in 0..9."""
    if not isinstance(grid, list) or len(grid) != SIZE:
        return False
    for row in grid:
        if not isinstance(row, list) or len(row) != SIZE:
            return False
        for value in row:
            if not (value == 0 and type(value) is int) and not is_digit(value):
                return False
    return True
