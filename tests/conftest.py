from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import pytest

from doublevisuals.audio.engine import get_audio_engine
from doublevisuals.config import get_config
from doublevisuals.session.scheduler import Scheduler


def pytest_configure(config):
    """
    Loads a local .env, if any, before the configuration is first read.
    """
    from dotenv import load_dotenv

    load_dotenv()


@dataclass
class ManualHandle:
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler(Scheduler):
    """Deterministic scheduler: frames run on `run_frame`, timers on `advance`."""

    now_ms: int = 0
    frames: list[tuple[ManualHandle, Callable[[], None]]] = field(default_factory=list)
    timers: list[tuple[int, ManualHandle, Callable[[], None]]] = field(default_factory=list)

    def request_animation_frame(self, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle()
        self.frames.append((handle, callback))
        return handle

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle()
        self.timers.append((self.now_ms + delay_ms, handle, callback))
        return handle

    def run_frame(self) -> None:
        frames, self.frames = self.frames, []
        for handle, callback in frames:
            if not handle.cancelled:
                callback()

    def advance(self, ms: int) -> None:
        self.now_ms += ms
        due = sorted((t for t in self.timers if t[0] <= self.now_ms), key=lambda t: t[0])
        self.timers = [t for t in self.timers if t[0] > self.now_ms]
        for _, handle, callback in due:
            if not handle.cancelled:
                callback()

    @property
    def pending(self) -> int:
        live_frames = sum(1 for handle, _ in self.frames if not handle.cancelled)
        live_timers = sum(1 for _, handle, _ in self.timers if not handle.cancelled)
        return live_frames + live_timers


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(autouse=True)
def reset_cached_singletons() -> Iterator[None]:
    """Config and the process-wide audio engine are cached; start every test fresh."""
    get_config.cache_clear()
    get_audio_engine.cache_clear()
    yield
    get_config.cache_clear()
    get_audio_engine.cache_clear()
