from conftest import PUZZLE, SOLUTION
from sudoku_game.conflicts import conflicting_cells, find_conflicts, has_conflict
from sudoku_game.grid import copy_grid, empty_grid


def test_duplicate_in_row_marks_exactly_two_cells():
    board = empty_grid()
    board[3][1] = 4
    board[3][7] = 4
    assert find_conflicts(board) == {(3, 1), (3, 7)}
    assert has_conflict(board, 3, 1)
    assert has_conflict(board, 3, 7)
    assert not has_conflict(board, 3, 4)


def test_column_and_box_duplicates():
    board = empty_grid()
    board[0][0] = 2
    board[6][0] = 2
    board[1][1] = 2
    assert conflicting_cells(board, 0, 0) == {(6, 0), (1, 1)}
    assert find_conflicts(board) == {(0, 0), (6, 0), (1, 1)}


def test_empty_cell_never_conflicts():
    board = empty_grid()
    board[0][1] = 5
    assert not has_conflict(board, 0, 0)
    assert conflicting_cells(board, 0, 0) == set()


def test_out_of_bounds_is_not_a_conflict():
    assert not has_conflict(PUZZLE, 9, 0)
    assert not has_conflict(PUZZLE, -1, 0)


def test_clean_boards_have_no_conflicts():
    assert find_conflicts(PUZZLE) == set()
    assert find_conflicts(SOLUTION) == set()


def test_conflicts_follow_the_live_board():
    board = copy_grid(PUZZLE)
    board[0][2] = 5
    assert find_conflicts(board) == {(0, 0), (0, 2)}
    board[0][2] = 0
    assert find_conflicts(board) == set()
