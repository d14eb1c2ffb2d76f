"""Mutable play state for one Sudoku session, with a bounded undo history."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Callable, List, Optional, Set, Tuple

from .config import Difficulty, GameConfig
from .conflicts import find_conflicts, has_conflict
from .exceptions import PuzzleError
from .generator import PuzzleGenerator
from .grid import SIZE, Grid, box_cells, copy_grid, in_bounds, is_digit, is_solved_grid
from .hints import HintSystem
from .solver import check_puzzle, solve

logger = logging.getLogger(__name__)

Notes = List[List[Set[int]]]
Cell = Tuple[int, int]


def empty_notes() -> Notes:
    return [[set() for _ in range(SIZE)] for _ in range(SIZE)]


def copy_notes(notes: Notes) -> Notes:
    return [[set(cell) for cell in row] for row in notes]


@dataclass
class UndoSnapshot:
    board: Grid
    notes: Notes
    mistakes: int
    selected: Optional[Cell]
    hints_used: int = 0


class UndoHistory:
    """Most recent snapshots first out; the oldest is dropped past `limit`."""

    def __init__(self, limit: int = 100) -> None:
        self._stack: deque = deque(maxlen=max(1, limit))

    def push(self, snapshot: UndoSnapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Optional[UndoSnapshot]:
        if not self._stack:
            return None
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)


class SudokuGame:
    """
    One player's session: board, clue mask, notes, solution, selection,
    note mode, mistakes and elapsed time.

    Every command returns True when it changed the state. Commands that
    change the board or notes push an undo snapshot first; selection and
    note-mode changes do not.
    """

    def __init__(
        self,
        puzzle: Grid,
        solution: Grid,
        difficulty=Difficulty.MEDIUM,
        config: Optional[GameConfig] = None,
        given: Optional[List[List[bool]]] = None,
        autosave: Optional[Callable[["SudokuGame"], None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.autosave = autosave
        self.history = UndoHistory(self.config.undo_limit)
        self._load_puzzle(puzzle, solution, difficulty, given)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, difficulty=Difficulty.MEDIUM, config=None, rng=None, autosave=None) -> "SudokuGame":
        """Generates a fresh puzzle and starts a game on it."""
        config = config or GameConfig()
        rng = rng or random.Random()
        generated = PuzzleGenerator(difficulty, clue_ranges=config.clue_ranges, rng=rng).generate()
        return cls(
            generated.puzzle,
            generated.solution,
            difficulty=generated.difficulty,
            config=config,
            autosave=autosave,
            rng=rng,
        )

    @classmethod
    def from_puzzle(cls, puzzle: Grid, difficulty=Difficulty.MEDIUM, config=None, autosave=None) -> "SudokuGame":
        """Starts a game on a player-entered puzzle, which must have exactly one solution."""
        ok, message = check_puzzle(puzzle)
        if not ok:
            raise PuzzleError(message)
        solution = copy_grid(puzzle)
        if not solve(solution):
            raise PuzzleError("No solution exists")
        return cls(copy_grid(puzzle), solution, difficulty=difficulty, config=config, autosave=autosave)

    def _load_puzzle(self, puzzle, solution, difficulty, given=None) -> None:
        self.difficulty = Difficulty.from_any(difficulty)
        self.board = copy_grid(puzzle)
        self.solution = copy_grid(solution)
        if given is None:
            given = [[value != 0 for value in row] for row in puzzle]
        self.given = [[bool(flag) for flag in row] for row in given]
        self.notes = empty_notes()
        self.selected: Optional[Cell] = None
        self.note_mode = False
        self.mistakes = 0
        self.hints_used = 0
        self.elapsed_seconds = 0
        self.history.clear()
        self.solved = self._check_solved()

    def restart(self, difficulty=None) -> bool:
        """Discards the current game and generates a new puzzle."""
        difficulty = Difficulty.from_any(difficulty or self.difficulty)
        generated = PuzzleGenerator(difficulty, clue_ranges=self.config.clue_ranges, rng=self.rng).generate()
        self._load_puzzle(generated.puzzle, generated.solution, generated.difficulty)
        logger.debug("Restarted with a %s puzzle (%d clues)", difficulty.value, generated.clues)
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def select(self, row, col) -> bool:
        """Selects a cell; selecting the already-selected cell clears the selection."""
        if not in_bounds(row, col):
            return False
        if self.selected == (row, col):
            self.selected = None
        else:
            self.selected = (row, col)
        return True

    def toggle_note_mode(self) -> bool:
        self.note_mode = not self.note_mode
        self._changed()
        return True

    def set_value(self, row, col, num) -> bool:
        """Places a digit. In note mode the digit is toggled as a note instead."""
        if not in_bounds(row, col) or self.given[row][col]:
            return False
        if num == 0 and type(num) is int:
            return self.clear_cell(row, col)
        if not is_digit(num):
            return False
        if self.note_mode:
            return self.toggle_note(row, col, num)
        if self.board[row][col] == num:
            return False

        self._push_undo()
        self.board[row][col] = num
        self.notes[row][col].clear()
        # Mistake counting: compare with generated solution
        if num != self.solution[row][col]:
            self.mistakes += 1
        self._changed(check_solved=True)
        return True

    def toggle_note(self, row, col, num) -> bool:
        if not in_bounds(row, col) or not is_digit(num):
            return False
        if self.given[row][col] or self.board[row][col] != 0:
            return False

        self._push_undo()
        notes = self.notes[row][col]
        if num in notes:
            notes.remove(num)
        else:
            notes.add(num)
        self._changed()
        return True

    def clear_cell(self, row, col) -> bool:
        if not in_bounds(row, col) or self.given[row][col]:
            return False
        if self.board[row][col] == 0 and not self.notes[row][col]:
            return False

        self._push_undo()
        self.board[row][col] = 0
        self.notes[row][col].clear()
        self._changed(check_solved=True)
        return True

    def undo(self) -> bool:
        """Reverts the last board or notes change."""
        snapshot = self.history.pop()
        if snapshot is None:
            return False

        self.board = snapshot.board
        self.notes = snapshot.notes
        self.mistakes = snapshot.mistakes
        self.hints_used = snapshot.hints_used
        self.selected = snapshot.selected
        self._changed(check_solved=True)
        return True

    def solve_instantly(self) -> bool:
        """Copies the stored solution onto the board."""
        if self.board == self.solution and not any(cell for row in self.notes for cell in row):
            return False

        self._push_undo()
        self.board = copy_grid(self.solution)
        self.notes = empty_notes()
        self._changed(check_solved=True)
        return True

    def hint(self):
        """Fills one empty cell with its correct digit. Returns the Hint used, or None."""
        if self.solved:
            return None
        hint = HintSystem(self.board, self.solution).get_hint()
        if hint is None:
            return None

        self._push_undo()
        self.board[hint.row][hint.col] = hint.value
        self.notes[hint.row][hint.col].clear()
        self.selected = (hint.row, hint.col)
        self.hints_used += 1
        self._changed(check_solved=True)
        return hint

    def tick(self, seconds=1) -> bool:
        """Advances the game clock while the puzzle is unsolved."""
        if self.solved or seconds <= 0:
            return False
        self.elapsed_seconds += int(seconds)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    @property
    def is_solved(self) -> bool:
        return self.solved

    def board_snapshot(self) -> Grid:
        return copy_grid(self.board)

    def given_mask(self) -> List[List[bool]]:
        return [row[:] for row in self.given]

    def notes_snapshot(self) -> Notes:
        return copy_notes(self.notes)

    def is_given(self, row, col) -> bool:
        return in_bounds(row, col) and self.given[row][col]

    def has_conflict(self, row, col) -> bool:
        return has_conflict(self.board, row, col)

    def conflicts(self) -> Set[Cell]:
        return find_conflicts(self.board)

    def remaining_counts(self):
        """How many more times each digit 1..9 still has to be placed."""
        counts = {num: SIZE for num in range(1, 10)}
        for row in self.board:
            for value in row:
                if value:
                    counts[value] -= 1
        return counts

    def completed_units(self, row, col):
        """Names of the units through (row, col) that have no empty cell."""
        if not in_bounds(row, col):
            return set()
        units = set()
        if all(self.board[row][j] for j in range(SIZE)):
            units.add("row")
        if all(self.board[i][col] for i in range(SIZE)):
            units.add("col")
        if all(self.board[i][j] for i, j in box_cells(row, col)):
            units.add("box")
        return units

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _push_undo(self) -> None:
        self.history.push(UndoSnapshot(
            board=copy_grid(self.board),
            notes=copy_notes(self.notes),
            mistakes=self.mistakes,
            selected=self.selected,
            hints_used=self.hints_used,
        ))

    def _check_solved(self) -> bool:
        """A full board counts as solved if it satisfies every constraint."""
        if any(value == 0 for row in self.board for value in row):
            return False
        return solve(copy_grid(self.board)) and is_solved_grid(self.board)

    def _changed(self, check_solved=False) -> None:
        if check_solved:
            was_solved = self.solved
            self.solved = self._check_solved()
            if self.solved and not was_solved:
                logger.debug("Puzzle solved after %ds with %d mistakes", self.elapsed_seconds, self.mistakes)
        if self.autosave is not None:
            self.autosave(self)
