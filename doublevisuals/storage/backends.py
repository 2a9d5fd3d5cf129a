"""Pluggable persistence backends and the mirrored store built on them."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from doublevisuals.storage.cookies import CookieAttributes, CookieJar
from doublevisuals.storage.key_value import KeyValueStore
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)


class PersistenceBackend(ABC):
    """
    Abstract Base Class for one physical copy of a persisted value.

    Implementations let errors from the underlying storage propagate.
    MirroredStore is the one place that decides what a failure means.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short backend name used in logs."""
        raise NotImplementedError

    @abstractmethod
    def read(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        raise NotImplementedError


class KeyValueBackend(PersistenceBackend):
    """Durable copy kept in a KeyValueStore."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    @property
    def name(self) -> str:
        return "key_value"

    def read(self, key: str) -> str | None:
        return self.store.get_item(key)

    def write(self, key: str, value: str) -> None:
        self.store.set_item(key, value)


class CookieBackend(PersistenceBackend):
    """Copy kept in a cookie: `path=/`, `SameSite=Lax`, expiring after `max_age` seconds."""

    def __init__(self, jar: CookieJar, max_age: int = 31536000) -> None:
        self.jar = jar
        self.attributes = CookieAttributes(max_age=max_age, path="/", samesite="lax")

    @property
    def name(self) -> str:
        return "cookie"

    def read(self, key: str) -> str | None:
        return self.jar.get(key)

    def write(self, key: str, value: str) -> None:
        self.jar.set(key, value, self.attributes)


class MirroredStore:
    """
    Keeps the same value in every backend.

    Reads return each backend's copy, with None standing in for a backend
    that failed. Writes go to every backend independently; a failing
    backend is logged and skipped.
    """

    def __init__(self, backends: Sequence[PersistenceBackend]) -> None:
        if not backends:
            raise ValueError("MirroredStore needs at least one backend")
        self.backends = list(backends)

    def read_all(self, key: str) -> list[str | None]:
        values: list[str | None] = []
        for backend in self.backends:
            try:
                values.append(backend.read(key))
            except Exception as e:
                logger.warning("mirrored_store.read_failed", backend=backend.name, key=key, error=str(e))
                values.append(None)
        return values

    def read_first(self, key: str) -> str | None:
        """First copy present, in backend order."""
        for value in self.read_all(key):
            if value is not None:
                return value
        return None

    def write(self, key: str, value: str) -> int:
        """Writes every backend; returns how many writes succeeded."""
        written = 0
        for backend in self.backends:
            try:
                backend.write(key, value)
                written += 1
            except Exception as e:
                logger.warning("mirrored_store.write_failed", backend=backend.name, key=key, error=str(e))
        return written
