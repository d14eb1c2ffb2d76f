import random

import pytest

from sudoku_game.config import CLUE_RANGES, Difficulty
from sudoku_game.exceptions import GenerationError
from sudoku_game.generator import PuzzleGenerator, generate
from sudoku_game.grid import copy_grid, count_clues, is_solved_grid
from sudoku_game.solver import count_solutions


@pytest.fixture(scope="module")
def easy_puzzles():
    return [generate("easy", rng=random.Random(seed)) for seed in (1, 2, 3)]


def test_solution_is_a_valid_full_grid(easy_puzzles):
    for generated in easy_puzzles:
        assert is_solved_grid(generated.solution)


def test_puzzle_has_exactly_one_solution(easy_puzzles):
    for generated in easy_puzzles:
        assert count_solutions(copy_grid(generated.puzzle), limit=2) == 1


def test_givens_match_solution(easy_puzzles):
    for generated in easy_puzzles:
        for i in range(9):
            for j in range(9):
                if generated.puzzle[i][j]:
                    assert generated.puzzle[i][j] == generated.solution[i][j]
                    assert generated.given[i][j]
                else:
                    assert not generated.given[i][j]


def test_easy_clue_count_in_range(easy_puzzles):
    min_clues, max_clues = CLUE_RANGES[Difficulty.EASY]
    for generated in easy_puzzles:
        assert generated.difficulty is Difficulty.EASY
        assert min_clues <= generated.target_clues <= max_clues
        assert min_clues <= generated.clues <= max_clues


def test_repeated_generation_varies(easy_puzzles):
    solutions = [generated.solution for generated in easy_puzzles]
    assert solutions[0] != solutions[1] != solutions[2]


def test_same_seed_same_puzzle():
    first = generate("medium", rng=random.Random(42))
    second = generate("medium", rng=random.Random(42))
    assert first.puzzle == second.puzzle
    assert first.solution == second.solution


def test_hard_puzzle_is_unique():
    generated = generate(Difficulty.HARD, rng=random.Random(5))
    assert count_solutions(copy_grid(generated.puzzle)) == 1
    assert generated.clues >= CLUE_RANGES[Difficulty.HARD][0]


def test_custom_clue_range():
    generated = generate("easy", rng=random.Random(9), clue_ranges={"easy": (60, 60)})
    assert generated.clues == 60
    assert generated.target_clues == 60


def test_create_puzzle_keeps_more_clues_when_target_is_unreachable():
    generator = PuzzleGenerator("hard", rng=random.Random(11))
    solution = generator.generate_complete_board()
    puzzle = generator.create_puzzle(solution, target_clues=0)
    # No 9x9 puzzle with a unique solution has fewer than 17 clues
    assert count_clues(puzzle) >= 17
    assert count_solutions(copy_grid(puzzle)) == 1


def test_unknown_difficulty_is_rejected():
    with pytest.raises(ValueError):
        PuzzleGenerator("expert")


def test_failed_full_grid_is_fatal(monkeypatch):
    generator = PuzzleGenerator("easy", rng=random.Random(1))
    monkeypatch.setattr(generator, "fill_board", lambda board, pos=0: False)
    with pytest.raises(GenerationError):
        generator.generate()
