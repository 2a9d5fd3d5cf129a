"""Audio feedback that only plays after the visitor's first input gesture."""

from collections.abc import Callable
from functools import lru_cache

from doublevisuals.audio.tone import AudioContext, SynthAudioContext
from doublevisuals.models.errors import AudioUnavailableError
from doublevisuals.session.events import KEY_DOWN, POINTER_DOWN, EventTarget, UIEvent
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)

GESTURE_EVENTS = (POINTER_DOWN, KEY_DOWN)

AudioContextFactory = Callable[[], AudioContext]


class GestureGatedAudioEngine:
    """
    Holds the unlock flag and the lazily built audio context.

    The flag flips on the first trusted pointer-down or key-down seen by an
    installed target, and never flips back. The context is built at that
    moment; if that fails every later `play` is silent. `play` never raises
    and never queues a tone for later.
    """

    def __init__(self, context_factory: AudioContextFactory = SynthAudioContext) -> None:
        self._context_factory = context_factory
        self._unlocked = False
        self._context: AudioContext | None = None
        self._targets: list[EventTarget] = []

    @property
    def unlocked(self) -> bool:
        return self._unlocked

    @property
    def context(self) -> AudioContext | None:
        return self._context

    @property
    def installed_targets(self) -> int:
        return len(self._targets)

    def install(self, target: EventTarget) -> None:
        """Listens on `target` for the first gesture. No-op once unlocked."""
        if self._unlocked or target in self._targets:
            return
        for event_type in GESTURE_EVENTS:
            target.add_listener(event_type, self._on_gesture)
        self._targets.append(target)

    def uninstall(self, target: EventTarget) -> None:
        """Stops listening on `target`. Safe to call for targets never installed."""
        if target not in self._targets:
            return
        for event_type in GESTURE_EVENTS:
            target.remove_listener(event_type, self._on_gesture)
        self._targets.remove(target)

    def play(self, frequency_hz: float, duration_ms: float, peak_gain: float) -> None:
        if not self._unlocked or self._context is None:
            return
        try:
            self._context.play_tone(frequency_hz, duration_ms, peak_gain)
        except Exception as e:
            logger.warning("audio_engine.play_failed", frequency_hz=frequency_hz, error=str(e))

    def _on_gesture(self, event: UIEvent) -> None:
        if not event.trusted or self._unlocked:
            return
        self._unlocked = True
        self._detach()
        try:
            self._context = self._context_factory()
        except AudioUnavailableError as e:
            logger.warning("audio_engine.unavailable", error=e.message)
        except Exception as e:
            logger.warning("audio_engine.unavailable", error=str(e))
        else:
            logger.info("audio_engine.unlocked", trigger=event.type)

    def _detach(self) -> None:
        for target in self._targets:
            for event_type in GESTURE_EVENTS:
                target.remove_listener(event_type, self._on_gesture)
        self._targets.clear()


@lru_cache
def get_audio_engine() -> GestureGatedAudioEngine:
    """The process-wide engine. Built on first use, never torn down."""
    return GestureGatedAudioEngine()
