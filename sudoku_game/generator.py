"""Puzzle generation: a random solved grid, then clue removal that keeps one solution."""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .config import CLUE_RANGES, Difficulty
from .exceptions import GenerationError
from .grid import DIGITS, SIZE, Grid, copy_grid, count_clues, empty_grid, is_valid_placement, shuffle
from .solver import count_solutions

logger = logging.getLogger(__name__)


@dataclass
class GeneratedPuzzle:
    puzzle: Grid
    solution: Grid
    difficulty: Difficulty
    target_clues: int

    @property
    def clues(self) -> int:
        return count_clues(self.puzzle)

    @property
    def given(self) -> List[List[bool]]:
        return [[value != 0 for value in row] for row in self.puzzle]


class PuzzleGenerator:
    def __init__(
        self,
        difficulty=Difficulty.MEDIUM,
        clue_ranges: Optional[Dict[object, Tuple[int, int]]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.difficulty = Difficulty.from_any(difficulty)
        self.clue_ranges = dict(CLUE_RANGES)
        if clue_ranges:
            self.clue_ranges.update(
                {Difficulty.from_any(key): tuple(value) for key, value in clue_ranges.items()}
            )
        self.rng = rng or random.Random()

    def generate_complete_board(self) -> Grid:
        """Generates a completely filled, valid Sudoku grid."""
        board = empty_grid()
        if not self.fill_board(board):
            raise GenerationError("Could not complete an empty 9x9 grid")
        return board

    def fill_board(self, board: Grid, pos: int = 0) -> bool:
        """Recursively fills the board, trying digits in a fresh random order per cell."""
        if pos == SIZE * SIZE:
            return True

        row, col = divmod(pos, SIZE)
        if board[row][col] != 0:
            return self.fill_board(board, pos + 1)

        for num in shuffle(list(DIGITS), self.rng):
            if is_valid_placement(board, row, col, num):
                board[row][col] = num
                if self.fill_board(board, pos + 1):
                    return True
                board[row][col] = 0

        return False

    def target_clues(self) -> int:
        min_clues, max_clues = self.clue_ranges[self.difficulty]
        return self.rng.randint(min_clues, max_clues)

    def create_puzzle(self, solution: Grid, target_clues: Optional[int] = None) -> Grid:
        """
        Removes numbers from a complete board to create the puzzle.
        A removal is only kept when the puzzle still has exactly one solution,
        so the result may keep more clues than the target but is always unique.
        """
        puzzle = copy_grid(solution)
        if target_clues is None:
            target_clues = self.target_clues()

        clues = count_clues(puzzle)
        cells = [(i, j) for i in range(SIZE) for j in range(SIZE)]
        shuffle(cells, self.rng)

        for row, col in cells:
            if clues <= target_clues:
                break
            if puzzle[row][col] == 0:
                continue

            backup = puzzle[row][col]
            puzzle[row][col] = 0

            if count_solutions(copy_grid(puzzle), limit=2) == 1:
                clues -= 1
            else:
                # Removal makes the puzzle ambiguous, put the number back
                puzzle[row][col] = backup

        return puzzle

    def generate(self) -> GeneratedPuzzle:
        """Main entry point to generate a puzzle and its solution."""
        solution = self.generate_complete_board()
        target = self.target_clues()
        puzzle = self.create_puzzle(solution, target)

        clues = count_clues(puzzle)
        if clues > target:
            logger.warning(
                "Uniqueness stopped removal at %d clues (target %d, %s)",
                clues, target, self.difficulty.value,
            )
        logger.debug("Generated %s puzzle with %d clues (target %d)", self.difficulty.value, clues, target)
        return GeneratedPuzzle(puzzle=puzzle, solution=solution, difficulty=self.difficulty, target_clues=target)


def generate(
    difficulty=Difficulty.MEDIUM,
    rng: Optional[random.Random] = None,
    clue_ranges: Optional[Dict[object, Tuple[int, int]]] = None,
) -> GeneratedPuzzle:
    """Generates a uniquely solvable puzzle for the given difficulty."""
    return PuzzleGenerator(difficulty, clue_ranges=clue_ranges, rng=rng).generate()
