"""Backtracking solver and bounded solution counter."""

from typing import List, Optional, Tuple

from .grid import DIGITS, SIZE, Grid, box_index, copy_grid, is_consistent, is_valid_placement, is_well_formed


class BacktrackingSolver:
    """Depth-first search over a grid that is modified in place.

    Every placement made during the search is undone when its branch fails,
    so a failed search leaves the grid exactly as it was given.
    """

    def __init__(self, board: Grid) -> None:
        self.board = board
        self.count = 0

    def solve(self) -> bool:
        """Fills the board with the first valid completion found.

        Empty cells are visited row-major and digits tried 1..9. Returns
        False, with the board untouched, if the clues already clash or no
        completion exists.
        """
        if not is_consistent(self.board):
            return False
        return self._solve_from(0)

    def _solve_from(self, pos: int) -> bool:
        # Skip over filled cells
        while pos < SIZE * SIZE and self.board[pos // SIZE][pos % SIZE] != 0:
            pos += 1
        if pos == SIZE * SIZE:
            return True

        row, col = divmod(pos, SIZE)
        for num in DIGITS:
            if is_valid_placement(self.board, row, col, num):
                self.board[row][col] = num
                if self._solve_from(pos + 1):
                    return True
                self.board[row][col] = 0

        return False

    def count_solutions(self, limit: int = 2) -> int:
        """Counts completions of the board, stopping as soon as `limit` is reached.

        Only used to tell "exactly one" apart from "more than one", so the
        search never enumerates past the limit. A contradictory board counts 0.
        """
        self.count = 0
        if limit <= 0 or not is_consistent(self.board):
            return 0
        self._count(limit)
        return self.count

    def _count(self, limit: int) -> bool:
        cell = self._most_constrained_cell()
        if cell is None:
            self.count += 1
            return self.count >= limit

        row, col, options = cell
        for num in options:
            self.board[row][col] = num
            stop = self._count(limit)
            self.board[row][col] = 0
            if stop:
                return True

        return False

    def _most_constrained_cell(self) -> Optional[Tuple[int, int, List[int]]]:
        """Empty cell with the fewest legal digits, or None on a full board."""
        rows = [set() for _ in range(SIZE)]
        cols = [set() for _ in range(SIZE)]
        boxes = [set() for _ in range(SIZE)]
        empties = []
        for i in range(SIZE):
            for j in range(SIZE):
                value = self.board[i][j]
                if value:
                    rows[i].add(value)
                    cols[j].add(value)
                    boxes[box_index(i, j)].add(value)
                else:
                    empties.append((i, j))

        if not empties:
            return None

        best = None
        for i, j in empties:
            used = rows[i] | cols[j] | boxes[box_index(i, j)]
            options = [num for num in DIGITS if num not in used]
            if best is None or len(options) < len(best[2]):
                best = (i, j, options)
                # Dead end or forced move, nothing can beat it
                if len(options) <= 1:
                    break
        return best


def solve(grid: Grid) -> bool:
    """Solves `grid` in place. Returns True on success."""
    return BacktrackingSolver(grid).solve()


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Counts solutions of `grid` up to `limit`. The grid is left unchanged."""
    return BacktrackingSolver(grid).count_solutions(limit)


def check_puzzle(grid) -> Tuple[bool, str]:
    """
    Validates a player-entered puzzle.
    Checks for:
    1. Shape and digit range.
    2. Immediate conflicts.
    3. Solvability and uniqueness.
    Returns (ok, message).
    """
    if not is_well_formed(grid):
        return False, "Puzzle must be a 9x9 grid of digits 0-9"

    if not is_consistent(grid):
        return False, "Conflict detected in puzzle"

    count = count_solutions(copy_grid(grid), limit=2)
    if count == 0:
        return False, "No solution exists"
    if count > 1:
        return False, "Multiple solutions exist"

    return True, "Valid puzzle with unique solution"
