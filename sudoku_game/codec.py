"""Versioned JSON save format for a game in progress."""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .config import Difficulty
from .game import SudokuGame
from .grid import SIZE, is_solved_grid, is_well_formed

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _check_grid(value: List[List[int]]) -> List[List[int]]:
    if not is_well_formed(value):
        raise ValueError("grid must be 9x9 with digits 0-9")
    return value


class SavedGame(BaseModel):
    """Serialized play state. The undo history is never saved."""

    model_config = ConfigDict(extra="ignore")

    version: int = Field(..., description="Save format version")
    difficulty: Difficulty = Field(Difficulty.MEDIUM, description="Difficulty the puzzle was generated for")
    board: List[List[int]] = Field(..., description="Current board, 0 = empty")
    given: List[List[int]] = Field(..., description="1 where the cell is a clue")
    notes: List[List[List[int]]] = Field(..., description="Sorted candidate marks per cell")
    solution: List[List[int]] = Field(..., description="Full solution grid")
    selected: Optional[List[int]] = Field(None, description="Selected [row, col]")
    note_mode: bool = False
    mistakes: int = Field(0, ge=0)
    hints_used: int = Field(0, ge=0)
    elapsed_seconds: int = Field(0, ge=0)
    solved: bool = False

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != SCHEMA_VERSION:
            raise ValueError(f"unsupported save version {value}, expected {SCHEMA_VERSION}")
        return value

    @field_validator("board")
    @classmethod
    def validate_board(cls, value: List[List[int]]) -> List[List[int]]:
        return _check_grid(value)

    @field_validator("solution")
    @classmethod
    def validate_solution(cls, value: List[List[int]]) -> List[List[int]]:
        _check_grid(value)
        if not is_solved_grid(value):
            raise ValueError("solution must be a complete valid grid")
        return value

    @field_validator("given")
    @classmethod
    def validate_given(cls, value: List[List[int]]) -> List[List[int]]:
        if len(value) != SIZE or any(len(row) != SIZE for row in value):
            raise ValueError("given mask must be 9x9")
        if any(flag not in (0, 1) for row in value for flag in row):
            raise ValueError("given mask must hold 0 or 1")
        return value

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, value: List[List[List[int]]]) -> List[List[List[int]]]:
        if len(value) != SIZE or any(len(row) != SIZE for row in value):
            raise ValueError("notes must be 9x9")
        for row in value:
            for cell in row:
                if any(not 1 <= num <= 9 for num in cell):
                    raise ValueError("notes must hold digits 1-9")
        return value

    @field_validator("selected")
    @classmethod
    def validate_selected(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        if value is None:
            return value
        if len(value) != 2 or not all(0 <= v < SIZE for v in value):
            raise ValueError("selected must be [row, col] within the board")
        return value

    @model_validator(mode="after")
    def validate_consistency(self) -> "SavedGame":
        for i in range(SIZE):
            for j in range(SIZE):
                if self.given[i][j]:
                    if self.board[i][j] != self.solution[i][j]:
                        raise ValueError(f"clue at ({i}, {j}) does not match the solution")
                    if self.notes[i][j]:
                        raise ValueError(f"clue at ({i}, {j}) carries notes")
                elif self.board[i][j] and self.notes[i][j]:
                    raise ValueError(f"filled cell ({i}, {j}) carries notes")
        return self

    @classmethod
    def from_game(cls, game: SudokuGame) -> "SavedGame":
        return cls(
            version=SCHEMA_VERSION,
            difficulty=game.difficulty,
            board=game.board_snapshot(),
            given=[[1 if flag else 0 for flag in row] for row in game.given],
            notes=[[sorted(cell) for cell in row] for row in game.notes],
            solution=[row[:] for row in game.solution],
            selected=list(game.selected) if game.selected is not None else None,
            note_mode=game.note_mode,
            mistakes=game.mistakes,
            hints_used=game.hints_used,
            elapsed_seconds=game.elapsed_seconds,
            solved=game.is_solved,
        )

    def to_game(self, config=None, autosave=None) -> SudokuGame:
        game = SudokuGame(
            self.board,
            self.solution,
            difficulty=self.difficulty,
            config=config,
            given=[[bool(flag) for flag in row] for row in self.given],
        )
        game.notes = [[set(cell) for cell in row] for row in self.notes]
        game.selected = tuple(self.selected) if self.selected is not None else None
        game.note_mode = self.note_mode
        game.mistakes = self.mistakes
        game.hints_used = self.hints_used
        game.elapsed_seconds = self.elapsed_seconds
        # Attach the callback last so restoring does not trigger a save
        game.autosave = autosave
        return game


def serialize(game: SudokuGame) -> str:
    """Encodes the game as a self-describing JSON string."""
    return SavedGame.from_game(game).model_dump_json()


def deserialize(blob, config=None, autosave=None) -> Optional[SudokuGame]:
    """Decodes a saved game. Returns None for a missing, corrupt or outdated blob."""
    if not blob:
        return None
    try:
        saved = SavedGame.model_validate_json(blob)
    except ValidationError as exc:
        logger.warning("Ignoring saved game: %d validation error(s): %s", exc.error_count(), exc.errors()[0]["msg"])
        return None
    except (ValueError, TypeError) as exc:
        logger.warning("Ignoring unreadable saved game: %s", exc)
        return None
    return saved.to_game(config=config, autosave=autosave)
