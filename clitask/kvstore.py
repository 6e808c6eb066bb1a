"""
CLITASK - Key-Value Store
=========================
Durable string-keyed mapping backed by a single JSON file.

Every mutation is dumped to disk before the call returns (auto-dump), so a
crash never loses an acknowledged write. Files are replaced atomically via a
temporary sibling.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple, Union

from .errors import StorageError

logger = logging.getLogger("clitask.kvstore")


class KeyValueStore:
    """
    JSON file key-value store

    Usage:
        with KeyValueStore("tasks.json") as db:
            db.set("1", "Buy milk")
            db.get("1")      # -> "Buy milk"
            db.rem("1")      # -> True
    """

    def __init__(self, path: Union[str, Path], auto_dump: bool = True):
        self.path = Path(path)
        self.auto_dump = auto_dump
        self._data: Dict[str, Any] = self._load()
        self._dirty = False

    # ========================================
    # PERSISTENCE
    # ========================================

    def _load(self) -> Dict[str, Any]:
        """Read the store file; a missing file is an empty store"""
        if not self.path.exists():
            logger.debug(f"No store file at {self.path}, starting empty")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt store file {self.path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read store file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(
                f"Corrupt store file {self.path}: expected a JSON object, "
                f"got {type(data).__name__}"
            )

        logger.debug(f"📂 Loaded {len(data)} keys from {self.path}")
        return data

    def dump(self) -> None:
        """Write the whole mapping to disk"""
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Cannot write store file {self.path}: {e}") from e

        self._dirty = False
        logger.debug(f"💾 Dumped {len(self._data)} keys to {self.path}")

    def _changed(self) -> None:
        self._dirty = True
        if self.auto_dump:
            self.dump()

    def close(self) -> None:
        """Flush anything not yet on disk"""
        if self._dirty:
            self.dump()

    def __enter__(self) -> "KeyValueStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ========================================
    # MAPPING OPERATIONS
    # ========================================

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._changed()

    def rem(self, key: str) -> bool:
        """Remove a key; returns False if it was not present"""
        if key not in self._data:
            return False
        del self._data[key]
        self._changed()
        return True

    def exists(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(list(self._data.items()))

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"KeyValueStore(path={str(self.path)!r}, keys={len(self._data)})"
