"""Persistent key/value storage for the client's token and user."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

TOKEN_KEY = "token"
USER_KEY = "user"


class MemoryStorage:
    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(MemoryStorage):
    """Storage that survives restarts by mirroring items to a JSON file."""

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)
        if self.path.exists():
            self._items = json.loads(self.path.read_text(encoding="utf-8") or "{}")

    def set_item(self, key: str, value: str) -> None:
        super().set_item(key, value)
        self._flush()

    def remove_item(self, key: str) -> None:
        super().remove_item(key)
        self._flush()

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._items), encoding="utf-8")


def save_credentials(storage: MemoryStorage, token: str, user: Dict[str, Any]) -> None:
    storage.set_item(TOKEN_KEY, token)
    storage.set_item(USER_KEY, json.dumps(user))


def load_credentials(storage: MemoryStorage) -> Optional[tuple[str, Dict[str, Any]]]:
    token = storage.get_item(TOKEN_KEY)
    user_data = storage.get_item(USER_KEY)
    if not token or not user_data:
        return None
    return token, json.loads(user_data)


def clear_credentials(storage: MemoryStorage) -> None:
    storage.remove_item(TOKEN_KEY)
    storage.remove_item(USER_KEY)
