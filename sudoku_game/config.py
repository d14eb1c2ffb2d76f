"""Difficulty levels and per-game settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Union


class Difficulty(str, Enum):
    """Puzzle difficulty, expressed through the number of remaining clues."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def from_any(cls, value: Optional[Union[str, "Difficulty"]]) -> "Difficulty":
        if value is None:
            return cls.MEDIUM
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(
                f"Unsupported difficulty '{value}'. Expected one of {[d.value for d in cls]}"
            ) from exc


# Inclusive (min_clues, max_clues). The generator picks a target uniformly
# from the range; uniqueness may leave more clues than the target.
CLUE_RANGES: Dict[Difficulty, Tuple[int, int]] = {
    Difficulty.EASY: (40, 50),
    Difficulty.MEDIUM: (30, 35),
    Difficulty.HARD: (25, 28),
}

UNDO_LIMIT = 100
SAVE_KEY = "sudoku_save_v1"
SAVE_PATH_ENV = "SUDOKU_GAME_SAVE"


def _default_save_path() -> Path:
    """Resolve where the desktop front-end keeps its save file."""

    env_path = os.environ.get(SAVE_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path.home() / ".sudoku_game" / "save.json"


@dataclass
class GameConfig:
    """Tunable policy for one game session."""

    clue_ranges: Dict[Difficulty, Tuple[int, int]] = field(
        default_factory=lambda: dict(CLUE_RANGES)
    )
    undo_limit: int = UNDO_LIMIT
    save_key: str = SAVE_KEY
    save_path: Path = field(default_factory=_default_save_path)

    @classmethod
    def from_env(cls) -> "GameConfig":
        return cls(save_path=_default_save_path())
