"""Classifies pasted video URLs."""

import re
from urllib.parse import urlparse

from doublevisuals.models.errors import UnrecognizedSourceError
from doublevisuals.models.video import Platform, VideoSource
from doublevisuals.utils.logging import get_logger

logger = get_logger(__name__)

SHORT_LINK_MARKER = "youtu.be/"
SHORTS_PATH_MARKER = "shorts/"

_WATCH_PARAM = re.compile(r"[?&]v=([^&#]*)")

# Domain -> display name. Subdomains (www., m., mobile.) match their parent.
SOCIAL_NETWORKS: dict[str, str] = {
    "x.com": "X",
    "twitter.com": "X",
    "instagram.com": "Instagram",
    "tiktok.com": "TikTok",
    "facebook.com": "Facebook",
    "fb.watch": "Facebook",
    "threads.net": "Threads",
}


def _hostname(url: str) -> str | None:
    if "://" not in url:
        url = "//" + url
    return urlparse(url).hostname


def social_network_name(url: str | None) -> str | None:
    """Display name of the social network `url` points at, if any."""
    if not url:
        return None
    try:
        host = _hostname(url.strip())
    except ValueError:
        return None
    if not host:
        return None
    for domain, name in SOCIAL_NETWORKS.items():
        if host == domain or host.endswith("." + domain):
            return name
    return None


def _segment_after(url: str, marker: str) -> str:
    """Path segment following `marker`, without query string or fragment."""
    tail = url.split(marker, 1)[1]
    segment = re.split(r"[?&#/]", tail, maxsplit=1)[0]
    if not segment:
        raise UnrecognizedSourceError(url, f"No video id after '{marker}'")
    return segment


def _classify(url: str) -> VideoSource:
    # Short-link and shorts markers first; redirect chains can embed a "v=" elsewhere.
    if SHORT_LINK_MARKER in url:
        return VideoSource(
            platform=Platform.YOUTUBE_LONG,
            id=_segment_after(url, SHORT_LINK_MARKER),
            original_url=url,
        )
    if SHORTS_PATH_MARKER in url:
        return VideoSource(
            platform=Platform.YOUTUBE_SHORT,
            id=_segment_after(url, SHORTS_PATH_MARKER),
            original_url=url,
        )
    match = _WATCH_PARAM.search(url)
    if match:
        if not match.group(1):
            raise UnrecognizedSourceError(url, "Empty 'v' parameter")
        return VideoSource(platform=Platform.YOUTUBE_WATCH, id=match.group(1), original_url=url)
    if social_network_name(url):
        return VideoSource(platform=Platform.SOCIAL_POST, original_url=url)
    raise UnrecognizedSourceError(url, "No known video or social host")


def resolve(url: str | None) -> VideoSource:
    """
    Turns a pasted URL into a VideoSource.

    Never raises: anything that cannot be classified comes back as
    Platform.UNKNOWN with the original URL kept for an outbound link.
    """
    url = (url or "").strip()
    if not url:
        return VideoSource(platform=Platform.UNKNOWN, original_url="")

    try:
        source = _classify(url)
    except UnrecognizedSourceError as e:
        logger.info("video_resolver.unrecognized_source", url=url, reason=e.message)
        return VideoSource(platform=Platform.UNKNOWN, original_url=url)
    except Exception as e:
        logger.warning("video_resolver.unexpected_error", url=url, error=str(e))
        return VideoSource(platform=Platform.UNKNOWN, original_url=url)

    logger.debug("video_resolver.resolved", platform=source.platform.value, video_id=source.id)
    return source
