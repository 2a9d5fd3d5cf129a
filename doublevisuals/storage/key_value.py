"""Durable key-value stores, the server-side stand-in for browser local storage."""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from collections import OrderedDict
from pathlib import Path

from doublevisuals.models.errors import StorageUnavailableError
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    """String-to-string storage with local-storage semantics."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    """
    Process-local store.

    With `max_items` set, writing a new key beyond the limit evicts the
    least recently written key.
    """

    def __init__(self, initial: dict[str, str] | None = None, max_items: int | None = None) -> None:
        if max_items is not None and max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._items: OrderedDict[str, str] = OrderedDict(initial or {})
        self.max_items = max_items

    def __len__(self) -> int:
        return len(self._items)

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._items.move_to_end(key)
        if self.max_items is None:
            return
        while len(self._items) > self.max_items:
            evicted, _ = self._items.popitem(last=False)
            logger.debug("key_value_store.evicted", key=evicted, max_items=self.max_items)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Keeps all items in one JSON object on disk.

    Every write rewrites the file through a temporary file and an atomic
    rename, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageUnavailableError("json_file", f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageUnavailableError("json_file", f"{self.path} does not hold a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, items: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".kv-")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError as e:
            raise StorageUnavailableError("json_file", f"Cannot write {self.path}: {e}") from e
        logger.debug("key_value_store.saved", path=str(self.path), item_count=len(items))

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)


class ScopedKeyValueStore(KeyValueStore):
    """View of a shared store restricted to one visitor's keys."""

    def __init__(self, store: KeyValueStore, scope: str) -> None:
        if not scope:
            raise ValueError("scope must be a non-empty string")
        self._store = store
        self.scope = scope

    def _key(self, key: str) -> str:
        return f"{self.scope}:{key}"

    def get_item(self, key: str) -> str | None:
        return self._store.get_item(self._key(key))

    def set_item(self, key: str, value: str) -> None:
        self._store.set_item(self._key(key), value)

    def remove_item(self, key: str) -> None:
        self._store.remove_item(self._key(key))
