"""Minimal DOM-style event target for user input events."""

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass

POINTER_DOWN = "pointerdown"
KEY_DOWN = "keydown"


@dataclass(frozen=True)
class UIEvent:
    type: str
    trusted: bool = True  # False for synthetic events dispatched by code, not the user


EventListener = Callable[[UIEvent], None]


class EventTarget:
    def __init__(self) -> None:
        self._listeners: dict[str, list[EventListener]] = defaultdict(list)

    def add_listener(self, event_type: str, listener: EventListener) -> None:
        if listener not in self._listeners[event_type]:
            self._listeners[event_type].append(listener)

    def remove_listener(self, event_type: str, listener: EventListener) -> None:
        if listener in self._listeners.get(event_type, []):
            self._listeners[event_type].remove(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch(self, event: UIEvent) -> None:
        # Copy: listeners may detach themselves while being called
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)
