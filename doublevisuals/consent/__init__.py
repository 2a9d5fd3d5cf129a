"""Cookie consent persistence and banner lifecycle."""

from doublevisuals.consent.banner import BannerPhase, ConsentBannerController
from doublevisuals.consent.store import ConsentStore

__all__ = ["BannerPhase", "ConsentBannerController", "ConsentStore"]
