"""Persistence backends for browser-side state."""

from doublevisuals.storage.backends import (
    CookieBackend,
    KeyValueBackend,
    MirroredStore,
    PersistenceBackend,
)
from doublevisuals.storage.cookies import CookieAttributes, CookieJar, HttpCookieJar, MemoryCookieJar
from doublevisuals.storage.key_value import (
    JsonFileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
    ScopedKeyValueStore,
)
from doublevisuals.storage.preferences import ThemeStore

__all__ = [
    "CookieAttributes",
    "CookieBackend",
    "CookieJar",
    "HttpCookieJar",
    "JsonFileKeyValueStore",
    "KeyValueBackend",
    "KeyValueStore",
    "MemoryCookieJar",
    "MemoryKeyValueStore",
    "MirroredStore",
    "PersistenceBackend",
    "ScopedKeyValueStore",
    "ThemeStore",
]
