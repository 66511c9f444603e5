"""Whole-file JSON snapshot storage.

Each store is one file holding a JSON array. Every load reads the whole
file and every save replaces it; there are no partial updates and no
locking. Two requests that interleave between a load and a save will lose
one of the writes (last write wins).
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from tareas.core.exceptions import StorageError
from tareas.core.logging import get_logger

logger = get_logger(__name__)


class JsonFileStore:
    """A JSON array persisted as a single file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def load(self) -> list[dict[str, Any]]:
        """Read the full collection.

        A missing file is an empty collection.

        Raises:
            StorageError: If the file cannot be read or is not a JSON array.
        """
        return await asyncio.to_thread(self._read)

    async def save(self, items: list[dict[str, Any]]) -> None:
        """Overwrite the file with the full collection.

        Raises:
            StorageError: If the file cannot be written.
        """
        await asyncio.to_thread(self._write, items)

    def ensure_exists(self) -> bool:
        """Create the file as an empty array if missing.

        Returns:
            True if the file was created.
        """
        if self.path.exists():
            return False
        self._write([])
        return True

    def _read(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Failed to read store", path=str(self.path), error=str(e))
            raise StorageError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, list):
            logger.error("Store is not a JSON array", path=str(self.path))
            raise StorageError(f"{self.path} does not contain a JSON array")
        return data

    def _write(self, items: list[dict[str, Any]]) -> None:
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
            ) as tf:
                tmp_name = tf.name
                json.dump(items, tf, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except (OSError, ValueError) as e:
            # ValueError covers text that cannot be encoded, e.g. lone surrogates.
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            logger.error("Failed to write store", path=str(self.path), error=repr(e))
            raise StorageError(f"Failed to write {self.path}: {e!r}") from e
