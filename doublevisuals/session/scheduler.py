"""Frame and timer primitives for UI state machines."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Protocol

# Roughly one paint at 60 Hz.
DEFAULT_FRAME_INTERVAL_MS = 16


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(ABC):
    """The two suspension points a UI controller may use."""

    @abstractmethod
    def request_animation_frame(self, callback: Callable[[], None]) -> Cancellable:
        """Run `callback` on the next paint boundary."""
        raise NotImplementedError

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Cancellable:
        """Run `callback` once `delay_ms` has elapsed."""
        raise NotImplementedError


class AsyncioScheduler(Scheduler):
    """Schedules on an asyncio event loop; defaults to the running loop."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop | None = None,
        frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS,
    ) -> None:
        self._loop = loop
        self.frame_interval_ms = frame_interval_ms

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def request_animation_frame(self, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(self.frame_interval_ms / 1000, callback)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000, callback)
