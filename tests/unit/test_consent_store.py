from unittest.mock import MagicMock

import pytest

from doublevisuals.consent.store import ConsentStore
from doublevisuals.models.errors import StorageUnavailableError
from doublevisuals.storage.backends import (
    CookieBackend,
    KeyValueBackend,
    MirroredStore,
    PersistenceBackend,
)
from doublevisuals.storage.cookies import MemoryCookieJar
from doublevisuals.storage.key_value import MemoryKeyValueStore

KEY = "dv_cookies_accepted"


@pytest.fixture
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def jar() -> MemoryCookieJar:
    return MemoryCookieJar()


@pytest.fixture
def consent(kv, jar) -> ConsentStore:
    return ConsentStore(MirroredStore([KeyValueBackend(kv), CookieBackend(jar)]), key=KEY)


def test_fresh_visitor_has_not_accepted(consent):
    assert consent.has_accepted() is False


def test_mark_accepted_writes_both_copies(consent, kv, jar):
    consent.mark_accepted()
    assert kv.get_item(KEY) == "true"
    assert jar.get(KEY) == "true"
    assert jar.attributes[KEY].max_age == 31536000


def test_mark_accepted_twice_is_idempotent(consent):
    consent.mark_accepted()
    consent.mark_accepted()
    assert consent.has_accepted() is True


def test_acceptance_survives_cleared_cookies(consent, jar):
    consent.mark_accepted()
    jar.clear()
    assert consent.has_accepted() is True


def test_acceptance_survives_cleared_durable_store(consent, kv):
    consent.mark_accepted()
    kv.remove_item(KEY)
    assert consent.has_accepted() is True


@pytest.mark.parametrize("value", ["false", "TRUE", "1", ""])
def test_only_literal_true_counts(kv, consent, value):
    kv.set_item(KEY, value)
    assert consent.has_accepted() is False


def _disabled_backend(name: str) -> MagicMock:
    backend = MagicMock()
    backend.name = name
    backend.read.side_effect = StorageUnavailableError(name, "storage disabled")
    backend.write.side_effect = StorageUnavailableError(name, "quota exceeded")
    return backend


def test_one_disabled_backend_does_not_block_the_other(jar):
    consent = ConsentStore(MirroredStore([_disabled_backend("key_value"), CookieBackend(jar)]), key=KEY)
    assert consent.has_accepted() is False

    consent.mark_accepted()

    assert jar.get(KEY) == "true"
    assert consent.has_accepted() is True


def test_all_backends_disabled_never_raises():
    consent = ConsentStore(
        MirroredStore([_disabled_backend("key_value"), _disabled_backend("cookie")]), key=KEY
    )
    consent.mark_accepted()
    assert consent.has_accepted() is False


class _RaisingBackend(PersistenceBackend):
    @property
    def name(self) -> str:
        return "raising"

    def read(self, key: str) -> str | None:
        raise OSError("disabled")

    def write(self, key: str, value: str) -> None:
        raise OSError("quota")


def test_backend_raising_plain_errors_does_not_escape(jar):
    consent = ConsentStore(MirroredStore([_RaisingBackend(), CookieBackend(jar)]), key=KEY)
    assert consent.has_accepted() is False

    consent.mark_accepted()

    assert jar.get(KEY) == "true"
    assert consent.has_accepted() is True
