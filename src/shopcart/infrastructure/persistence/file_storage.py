"""File-backed implementation of KeyValueStorage.

Each key is one file in the data directory; the file name is the
URL-quoted key so any key string maps to a safe name.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

from shopcart.domain.exceptions import StorageError
from shopcart.domain.repository.key_value_storage import KeyValueStorage


class FileKeyValueStorage(KeyValueStorage):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    # --- KeyValueStorage interface --------------------------------------------

    def read(self, key: str) -> bytes | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read '{key}': {exc}") from exc

    def write(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        tmp = path.with_name(path.name + ".tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            tmp.replace(path)
        except OSError as exc:
            raise StorageError(f"Cannot write '{key}': {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        return self._directory / (quote(key, safe="") + ".json")
