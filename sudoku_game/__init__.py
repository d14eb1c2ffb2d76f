"""Sudoku puzzle engine: generation, solving, play state with undo, and save/restore."""

from .codec import SCHEMA_VERSION, SavedGame, deserialize, serialize
from .config import CLUE_RANGES, Difficulty, GameConfig
from .conflicts import conflicting_cells, find_conflicts, has_conflict
from .exceptions import GenerationError, PuzzleError, SudokuError
from .game import SudokuGame, UndoHistory, UndoSnapshot
from .generator import GeneratedPuzzle, PuzzleGenerator, generate
from .grid import Grid, copy_grid, is_valid_placement, shuffle
from .hints import Hint, HintSystem, compute_candidates
from .solver import BacktrackingSolver, check_puzzle, count_solutions, solve
from .storage import JsonFileStore, MemoryStore, clear_saved_game, has_saved_game, load_game, save_game

__version__ = "1.0.0"

__all__ = [
    "BacktrackingSolver",
    "CLUE_RANGES",
    "Difficulty",
    "GameConfig",
    "GeneratedPuzzle",
    "GenerationError",
    "Grid",
    "Hint",
    "HintSystem",
    "JsonFileStore",
    "MemoryStore",
    "PuzzleError",
    "PuzzleGenerator",
    "SCHEMA_VERSION",
    "SavedGame",
    "SudokuError",
    "SudokuGame",
    "UndoHistory",
    "UndoSnapshot",
    "check_puzzle",
    "clear_saved_game",
    "compute_candidates",
    "conflicting_cells",
    "copy_grid",
    "count_solutions",
    "deserialize",
    "find_conflicts",
    "generate",
    "has_conflict",
    "has_saved_game",
    "is_valid_placement",
    "load_game",
    "save_game",
    "serialize",
    "shuffle",
    "solve",
]
