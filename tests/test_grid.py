import random

from conftest import PATTERN_SOLUTION, PUZZLE, SOLUTION
from sudoku_game.grid import (
    box_index,
    copy_grid,
    count_clues,
    empty_grid,
    in_bounds,
    is_consistent,
    is_solved_grid,
    is_valid_placement,
    is_well_formed,
    peers,
    shuffle,
)


def test_placement_checks_row_column_and_box():
    grid = empty_grid()
    grid[0][4] = 7
    assert not is_valid_placement(grid, 0, 0, 7)  # row
    assert not is_valid_placement(grid, 8, 4, 7)  # column
    assert not is_valid_placement(grid, 1, 3, 7)  # box
    assert is_valid_placement(grid, 4, 0, 7)
    assert is_valid_placement(grid, 0, 0, 6)


def test_placement_ignores_the_cell_under_test():
    grid = copy_grid(SOLUTION)
    assert is_valid_placement(grid, 0, 0, grid[0][0])
    grid[0][1] = grid[0][0]
    assert not is_valid_placement(grid, 0, 0, grid[0][0])


def test_copy_grid_is_independent():
    grid = copy_grid(PUZZLE)
    grid[0][0] = 9
    assert PUZZLE[0][0] == 5


def test_shuffle_is_a_permutation():
    items = list(range(20))
    shuffled = shuffle(items[:], random.Random(7))
    assert sorted(shuffled) == items
    assert shuffled != items


def test_shuffle_is_reproducible_with_seed():
    assert shuffle(list(range(9)), random.Random(3)) == shuffle(list(range(9)), random.Random(3))


def test_box_index():
    assert box_index(0, 0) == 0
    assert box_index(4, 4) == 4
    assert box_index(8, 2) == 6
    assert box_index(2, 8) == 2


def test_peers_has_twenty_cells():
    cells = peers(4, 4)
    assert len(cells) == 20
    assert (4, 4) not in cells


def test_solved_grid_detection():
    assert is_solved_grid(SOLUTION)
    assert is_solved_grid(PATTERN_SOLUTION)
    assert not is_solved_grid(PUZZLE)
    swapped = copy_grid(SOLUTION)
    swapped[0][0], swapped[0][1] = swapped[0][1], swapped[0][0]
    assert not is_solved_grid(swapped)


def test_consistency():
    assert is_consistent(PUZZLE)
    grid = copy_grid(PUZZLE)
    grid[0][2] = 5
    assert not is_consistent(grid)


def test_count_clues():
    assert count_clues(PUZZLE) == 30
    assert count_clues(empty_grid()) == 0


def test_well_formed():
    assert is_well_formed(PUZZLE)
    assert not is_well_formed(PUZZLE[:8])
    bad = copy_grid(PUZZLE)
    bad[0][0] = 10
    assert not is_well_formed(bad)
    bad[0][0] = "5"
    assert not is_well_formed(bad)


def test_in_bounds_requires_integer_coordinates():
    assert in_bounds(0, 0)
    assert in_bounds(8, 8)
    assert not in_bounds(9, 0)
    assert not in_bounds(0, -1)
    assert not in_bounds(1.0, 2)
    assert not in_bounds("0", 2)
    assert not in_bounds(False, 2)
