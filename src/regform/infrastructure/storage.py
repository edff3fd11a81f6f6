"""File-backed key-value store with ``localStorage`` semantics.

Keys and values are strings.  The whole store is one JSON object on
disk; every write replaces the file atomically so a reader never sees
a half-written store.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The store file exists but cannot be read as a string map."""


class LocalStore:
    """String → string store persisted to a single JSON file.

    The file and its parent directory are created on the first write.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            msg = f"LocalStore values must be strings, got {type(value).__name__}"
            raise TypeError(msg)
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug("Stored key %s in %s", key, self.path)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)

    def clear(self) -> None:
        self._save({})

    def keys(self) -> list[str]:
        return sorted(self._load())

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        raw = self.path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Corrupt store file {self.path}: {exc}"
            raise StorageError(msg) from exc
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            msg = f"Store file {self.path} is not a string map"
            raise StorageError(msg)
        return data

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".store-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
