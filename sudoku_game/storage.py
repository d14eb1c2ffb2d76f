"""Key-value stores that hold serialized games, and the save/load helpers using them."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from .codec import deserialize, serialize
from .config import SAVE_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> bool: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """In-process store, mostly for tests and embedding."""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore:
    """Keeps every key in a single JSON object on disk."""

    def __init__(self, filename) -> None:
        self.filename = Path(filename)

    def load_entries(self) -> Dict[str, str]:
        try:
            with open(self.filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read save file %s: %s", self.filename, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Save file %s does not hold a JSON object", self.filename)
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def save_entries(self, entries: Dict[str, str]) -> bool:
        try:
            self.filename.parent.mkdir(parents=True, exist_ok=True)
            with open(self.filename, 'w', encoding='utf-8') as f:
                json.dump(entries, f, indent=2)
        except OSError as exc:
            logger.warning("Could not write save file %s: %s", self.filename, exc)
            return False
        return True

    def get(self, key: str) -> Optional[str]:
        return self.load_entries().get(key)

    def set(self, key: str, value: str) -> bool:
        entries = self.load_entries()
        entries[key] = value
        return self.save_entries(entries)

    def remove(self, key: str) -> None:
        entries = self.load_entries()
        if entries.pop(key, None) is not None:
            self.save_entries(entries)


def save_game(store: KeyValueStore, game, key: str = SAVE_KEY) -> bool:
    return bool(store.set(key, serialize(game)))


def load_game(store: KeyValueStore, key: str = SAVE_KEY, config=None, autosave=None):
    """Restores the saved game, or returns None if there is nothing usable."""
    return deserialize(store.get(key), config=config, autosave=autosave)


def has_saved_game(store: KeyValueStore, key: str = SAVE_KEY) -> bool:
    return store.get(key) is not None


def clear_saved_game(store: KeyValueStore, key: str = SAVE_KEY) -> None:
    store.remove(key)


def autosaver(store: KeyValueStore, key: str = SAVE_KEY):
    """Callback for `SudokuGame.autosave` that writes the game after each change."""

    def _save(game) -> None:
        save_game(store, game, key)

    return _save
