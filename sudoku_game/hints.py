"""Hints for the player: naked singles first, then the most constrained cell."""

from typing import List, NamedTuple, Optional

from .grid import DIGITS, SIZE, Cell, Grid, is_valid_placement


class Hint(NamedTuple):
    row: int
    col: int
    value: int
    reason: str


def compute_candidates(board: Grid, row: int, col: int) -> List[int]:
    """Digits that can legally go in an empty cell."""
    if board[row][col] != 0:
        return []
    return [num for num in DIGITS if is_valid_placement(board, row, col, num)]


class HintSystem:
    def __init__(self, board: Grid, solution: Grid) -> None:
        self.board = board
        self.solution = solution

    def _empty_cells(self) -> List[Cell]:
        return [(i, j) for i in range(SIZE) for j in range(SIZE) if self.board[i][j] == 0]

    def get_single_candidate_hint(self) -> Optional[Hint]:
        """Finds a cell where only one value is possible."""
        for i, j in self._empty_cells():
            candidates = compute_candidates(self.board, i, j)
            if len(candidates) == 1 and candidates[0] == self.solution[i][j]:
                return Hint(i, j, candidates[0], "Single candidate: only one possible value")
        return None

    def get_mrv_hint(self) -> Optional[Hint]:
        """Reveals the cell with the fewest possibilities."""
        best = None
        best_count = SIZE + 1
        for i, j in self._empty_cells():
            count = len(compute_candidates(self.board, i, j))
            if count < best_count:
                best, best_count = (i, j), count
        if best is None:
            return None
        row, col = best
        return Hint(row, col, self.solution[row][col], "Most constrained cell")

    def get_hint(self) -> Optional[Hint]:
        """Prioritizes simple hints over complex ones."""
        return self.get_single_candidate_hint() or self.get_mrv_hint()
