"""Theme preference, persisted the same way as consent."""

from doublevisuals.models.site import Theme
from doublevisuals.storage.backends import MirroredStore


class ThemeStore:
    def __init__(self, store: MirroredStore, key: str = "theme") -> None:
        self._store = store
        self.key = key

    def load(self) -> Theme:
        return Theme.parse(self._store.read_first(self.key))

    def save(self, theme: Theme) -> None:
        self._store.write(self.key, theme.value)
