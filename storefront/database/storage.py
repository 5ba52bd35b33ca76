"""
Key-value storage backends.

Each key holds one JSON-serializable list. Storing an empty list removes
the key, so "empty" and "missing" read back the same way.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Persistence interface used by the repository"""

    def get(self, key: str) -> Optional[list]:
        ...

    def set(self, key: str, value: list) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStorage:
    """In-memory storage"""

    def __init__(self):
        self.data: dict[str, list] = {}

    def get(self, key: str) -> Optional[list]:
        value = self.data.get(key)
        return list(value) if value is not None else None

    def set(self, key: str, value: list) -> None:
        if not value:
            self.remove(key)
            return
        self.data[key] = list(value)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStorage:
    """
    Storage backed by a single JSON object file.

    An unreadable or corrupt file is logged and treated as empty; write
    errors propagate to the caller.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def _read(self) -> dict[str, list]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: expected a JSON object")
            return {}
        return data

    def _write(self, data: dict[str, list]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> Optional[list]:
        value = self._read().get(key)
        if value is not None and not isinstance(value, list):
            logger.warning(f"Ignoring {key} in {self.path}: expected a list")
            return None
        return value

    def set(self, key: str, value: list) -> None:
        if not value:
            self.remove(key)
            return
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
