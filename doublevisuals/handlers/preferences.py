"""Consent and theme endpoints.

Both values are mirrored into the visitor's scoped durable store and a
cookie on the response, through the same backends a SiteSession uses.
"""

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from doublevisuals.config import get_config
from doublevisuals.consent.store import ConsentStore
from doublevisuals.models.errors import ErrorCode, InvalidInputError, SiteError
from doublevisuals.models.site import ConsentStatus, Theme, ThemePreference
from doublevisuals.storage.backends import CookieBackend, KeyValueBackend, MirroredStore
from doublevisuals.storage.cookies import HttpCookieJar
from doublevisuals.storage.key_value import ScopedKeyValueStore
from doublevisuals.storage.preferences import ThemeStore
from doublevisuals.utils.context import visitor_id_var
from doublevisuals.utils.logging import get_logger

router = APIRouter(prefix="/api")
logger = get_logger(__name__)


class ThemeUpdate(BaseModel):
    theme: str


def get_mirrored_store(request: Request, response: Response) -> MirroredStore:
    """Durable store scoped to the visitor plus the request/response cookie jar."""
    visitor_id = getattr(request.state, "visitor_id", None) or visitor_id_var.get()
    if not visitor_id:
        raise SiteError(ErrorCode.INTERNAL_ERROR, "Visitor middleware is not installed.")

    config = get_config()
    durable = ScopedKeyValueStore(request.app.state.key_value_store, visitor_id)
    return MirroredStore(
        [
            KeyValueBackend(durable),
            CookieBackend(
                HttpCookieJar(request.cookies, response), max_age=config.consent_cookie_max_age
            ),
        ]
    )


def get_consent_store(store: MirroredStore = Depends(get_mirrored_store)) -> ConsentStore:
    return ConsentStore(store, key=get_config().consent_key)


def get_theme_store(store: MirroredStore = Depends(get_mirrored_store)) -> ThemeStore:
    return ThemeStore(store, key=get_config().theme_key)


@router.get("/consent")
def get_consent(consent: ConsentStore = Depends(get_consent_store)) -> ConsentStatus:
    accepted = consent.has_accepted()
    return ConsentStatus(accepted=accepted, show_banner=not accepted)


@router.post("/consent")
def accept_consent(consent: ConsentStore = Depends(get_consent_store)) -> ConsentStatus:
    """
    Records acceptance in both backends.

    The banner stays dismissed for this page view even if neither write
    succeeded; it will simply be shown again next session.
    """
    consent.mark_accepted()
    return ConsentStatus(accepted=consent.has_accepted(), show_banner=False)


@router.get("/theme")
def get_theme(themes: ThemeStore = Depends(get_theme_store)) -> ThemePreference:
    return ThemePreference(theme=themes.load())


@router.put("/theme")
def put_theme(
    update: ThemeUpdate, themes: ThemeStore = Depends(get_theme_store)
) -> ThemePreference:
    try:
        theme = Theme(update.theme)
    except ValueError as e:
        raise InvalidInputError(
            f"Unknown theme '{update.theme}'.", details={"allowed": [t.value for t in Theme]}
        ) from e
    themes.save(theme)
    logger.info("theme_saved", theme=theme.value)
    return ThemePreference(theme=theme)
