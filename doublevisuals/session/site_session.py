"""One visitor's browser session, composed from the site's runtime pieces."""

from doublevisuals.audio.engine import GestureGatedAudioEngine, get_audio_engine
from doublevisuals.config import Config, get_config
from doublevisuals.consent.banner import ConsentBannerController
from doublevisuals.consent.store import ConsentStore
from doublevisuals.models.site import Page, Theme
from doublevisuals.session.events import EventTarget
from doublevisuals.session.scheduler import Scheduler
from doublevisuals.storage.backends import CookieBackend, KeyValueBackend, MirroredStore
from doublevisuals.storage.cookies import CookieJar
from doublevisuals.storage.key_value import KeyValueStore
from doublevisuals.storage.preferences import ThemeStore
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)


class SiteSession:
    """
    Owns the consent banner, theme and page selection for one visitor.

    The theme is read once here and then only written. The banner
    controller is built once; `mount` may be called on every remount of
    the page shell.
    """

    def __init__(
        self,
        key_value_store: KeyValueStore,
        cookie_jar: CookieJar,
        scheduler: Scheduler,
        config: Config | None = None,
        audio_engine: GestureGatedAudioEngine | None = None,
        events: EventTarget | None = None,
    ) -> None:
        self.config = config or get_config()
        mirrored = MirroredStore(
            [
                KeyValueBackend(key_value_store),
                CookieBackend(cookie_jar, max_age=self.config.consent_cookie_max_age),
            ]
        )
        self.consent = ConsentStore(mirrored, key=self.config.consent_key)
        self.themes = ThemeStore(mirrored, key=self.config.theme_key)

        self.events = events or EventTarget()
        self.audio = audio_engine or get_audio_engine()
        self.audio.install(self.events)

        self.theme: Theme = self.themes.load()
        self.page: Page = Page.HOME

        self.banner = ConsentBannerController(
            store=self.consent,
            scheduler=scheduler,
            audio_engine=self.audio,
            notification_tone=self.config.banner_tone,
            close_delay_ms=self.config.banner_close_delay_ms,
        )

    def mount(self) -> None:
        self.banner.start()

    def navigate(self, page: Page | str) -> Page:
        target = page if isinstance(page, Page) else Page.parse(page)
        tone = self.config.nav_tone
        self.audio.play(tone.frequency_hz, tone.duration_ms, tone.peak_gain)
        if target is not self.page:
            logger.debug("site_session.navigated", previous=self.page.value, page=target.value)
        self.page = target
        return target

    def toggle_theme(self) -> Theme:
        self.theme = Theme.LIGHT if self.theme is Theme.DARK else Theme.DARK
        self.themes.save(self.theme)
        return self.theme

    def accept_cookies(self) -> bool:
        return self.banner.accept()

    def close(self) -> None:
        self.banner.dispose()
        self.audio.uninstall(self.events)
