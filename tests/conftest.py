# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_game" imports without an install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_game.config import GameConfig  # noqa: E402
from sudoku_game.game import SudokuGame  # noqa: E402

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# A different valid grid: row i is 1..9 rotated by (i % 3) * 3 + i // 3
PATTERN_SOLUTION = [[((i % 3) * 3 + i // 3 + j) % 9 + 1 for j in range(9)] for i in range(9)]


@pytest.fixture
def puzzle():
    return [row[:] for row in PUZZLE]


@pytest.fixture
def solution():
    return [row[:] for row in SOLUTION]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config(tmp_path):
    return GameConfig(save_path=tmp_path / "save.json")


@pytest.fixture
def game(config):
    return SudokuGame(PUZZLE, SOLUTION, difficulty="easy", config=config)


def empty_cells(grid):
    return [(i, j) for i in range(9) for j in range(9) if grid[i][j] == 0]


def given_cells(grid):
    return [(i, j) for i in range(9) for j in range(9) if grid[i][j] != 0]
