"""Consent flag kept in two independent backends."""

from doublevisuals.storage.backends import MirroredStore
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)

ACCEPTED_VALUE = "true"


class ConsentStore:
    """
    `has_accepted` is the OR of all backend copies, so acceptance survives
    one backend being cleared. `mark_accepted` writes every copy and never
    raises, even when all writes fail.
    """

    def __init__(self, store: MirroredStore, key: str = "dv_cookies_accepted") -> None:
        self._store = store
        self.key = key

    def has_accepted(self) -> bool:
        return any(value == ACCEPTED_VALUE for value in self._store.read_all(self.key))

    def mark_accepted(self) -> None:
        written = self._store.write(self.key, ACCEPTED_VALUE)
        if written == 0:
            logger.warning("consent_store.not_persisted", key=self.key)
        else:
            logger.info("consent_store.accepted", key=self.key, copies=written)
