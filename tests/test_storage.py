import json

from conftest import PUZZLE
from sudoku_game.storage import (
    JsonFileStore,
    MemoryStore,
    autosaver,
    clear_saved_game,
    has_saved_game,
    load_game,
    save_game,
)


def test_memory_store_round_trip(game):
    store = MemoryStore()
    assert not has_saved_game(store)
    assert load_game(store) is None

    game.set_value(0, 2, 4)
    assert save_game(store, game)
    assert has_saved_game(store)

    restored = load_game(store)
    assert restored.board[0][2] == 4

    clear_saved_game(store)
    assert not has_saved_game(store)


def test_file_store_persists_across_instances(tmp_path, game):
    path = tmp_path / "nested" / "save.json"
    save_game(JsonFileStore(path), game, key="slot")
    assert path.exists()

    restored = load_game(JsonFileStore(path), key="slot")
    assert restored.board == PUZZLE
    assert load_game(JsonFileStore(path), key="other") is None


def test_file_store_keeps_other_keys(tmp_path):
    store = JsonFileStore(tmp_path / "save.json")
    store.set("a", "1")
    store.set("b", "2")
    store.remove("a")
    assert store.get("a") is None
    assert store.get("b") == "2"


def test_missing_file_reads_empty(tmp_path):
    store = JsonFileStore(tmp_path / "absent.json")
    assert store.get("anything") is None
    assert load_game(store) is None


def test_corrupt_file_is_no_saved_game(tmp_path):
    path = tmp_path / "save.json"
    path.write_text("{ this is not json", encoding="utf-8")
    assert load_game(JsonFileStore(path)) is None

    path.write_text(json.dumps(["not", "an", "object"]), encoding="utf-8")
    assert load_game(JsonFileStore(path)) is None


def test_corrupt_blob_is_no_saved_game():
    store = MemoryStore({"sudoku_save_v1": "{\"version\": 99}"})
    assert has_saved_game(store)
    assert load_game(store) is None


def test_unwritable_path_reports_failure(tmp_path, game):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonFileStore(blocker / "save.json")
    assert not save_game(store, game)


def test_autosaver_writes_after_each_change(game):
    store = MemoryStore()
    game.autosave = autosaver(store)
    game.set_value(0, 2, 4)
    assert load_game(store).board[0][2] == 4
    game.undo()
    assert load_game(store).board[0][2] == 0
