"""Lifecycle of the cookie consent banner."""

from collections.abc import Callable
from enum import Enum

from doublevisuals.audio.engine import GestureGatedAudioEngine
from doublevisuals.consent.store import ConsentStore
from doublevisuals.models.site import ToneSpec
from doublevisuals.session.scheduler import Cancellable, Scheduler
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CLOSE_DELAY_MS = 260

PhaseListener = Callable[["BannerPhase"], None]


class BannerPhase(str, Enum):
    HIDDEN = "hidden"
    ENTERING = "entering"
    VISIBLE = "visible"
    CLOSING = "closing"


class ConsentBannerController:
    """
    Drives the banner through Hidden -> Entering -> Visible -> Closing -> Hidden.

    `start` runs its entry logic once per controller, however many times the
    owning view mounts. Entering becomes Visible on the next animation frame
    so the enter transition has a starting frame to animate from. After
    `accept`, consent is persisted only when the close timer fires, just
    before the banner leaves the render tree.
    """

    def __init__(
        self,
        store: ConsentStore,
        scheduler: Scheduler,
        audio_engine: GestureGatedAudioEngine | None = None,
        notification_tone: ToneSpec | None = None,
        close_delay_ms: int = DEFAULT_CLOSE_DELAY_MS,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._audio_engine = audio_engine
        self._notification_tone = notification_tone
        self.close_delay_ms = close_delay_ms

        self._phase = BannerPhase.HIDDEN
        self._started = False
        self._accepted = False
        self._disposed = False
        self._pending: Cancellable | None = None
        self._listeners: list[PhaseListener] = []

    @property
    def phase(self) -> BannerPhase:
        return self._phase

    @property
    def accepted(self) -> bool:
        """True once the banner reached its terminal Hidden state."""
        return self._accepted

    @property
    def can_accept(self) -> bool:
        return self._phase is BannerPhase.VISIBLE and not self._disposed

    def subscribe(self, listener: PhaseListener) -> Callable[[], None]:
        """Calls `listener` with every new phase. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        if self._started or self._disposed:
            logger.debug("consent_banner.start_ignored", phase=self._phase.value)
            return
        self._started = True

        if self._store.has_accepted():
            self._accepted = True
            logger.info("consent_banner.already_accepted")
            return

        self._set_phase(BannerPhase.ENTERING)
        self._play_notification()
        self._pending = self._scheduler.request_animation_frame(self._on_enter_frame)

    def accept(self) -> bool:
        """Begins closing. Returns False when the banner is not Visible."""
        if not self.can_accept:
            logger.debug("consent_banner.accept_ignored", phase=self._phase.value)
            return False
        self._set_phase(BannerPhase.CLOSING)
        self._pending = self._scheduler.call_later(self.close_delay_ms, self._on_close_timer)
        return True

    def dispose(self) -> None:
        """Tears down pending callbacks. Consent not yet persisted stays unpersisted."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._disposed = True
        self._listeners.clear()

    def _on_enter_frame(self) -> None:
        self._pending = None
        if self._disposed or self._phase is not BannerPhase.ENTERING:
            return
        self._set_phase(BannerPhase.VISIBLE)

    def _on_close_timer(self) -> None:
        self._pending = None
        if self._disposed or self._phase is not BannerPhase.CLOSING:
            return
        self._store.mark_accepted()
        self._accepted = True
        self._set_phase(BannerPhase.HIDDEN)

    def _play_notification(self) -> None:
        if self._audio_engine is None or self._notification_tone is None:
            return
        tone = self._notification_tone
        self._audio_engine.play(tone.frequency_hz, tone.duration_ms, tone.peak_gain)

    def _set_phase(self, phase: BannerPhase) -> None:
        previous = self._phase
        self._phase = phase
        logger.info("consent_banner.phase_changed", previous=previous.value, phase=phase.value)
        for listener in list(self._listeners):
            listener(phase)
