"""Builds renderable embed descriptors from resolved video sources."""

from urllib.parse import urlencode

from doublevisuals.models.video import EmbedDescriptor, EmbedKind, Platform, VideoSource
from doublevisuals.video.resolver import social_network_name

EMBED_ENDPOINT = "https://www.youtube.com/embed/{video_id}"

PLACEHOLDER_LABEL = "Coming soon"
GENERIC_LINK_LABEL = "Open link"


def build(source: VideoSource, title: str) -> EmbedDescriptor:
    """Maps every VideoSource to exactly one descriptor."""
    if source.platform.is_youtube and source.id:
        return EmbedDescriptor(
            kind=EmbedKind.PLAYABLE,
            uri=EMBED_ENDPOINT.format(video_id=source.id),
            label=title,
        )

    if source.platform is Platform.SOCIAL_POST:
        network = social_network_name(source.original_url) or "social media"
        return EmbedDescriptor(
            kind=EmbedKind.EXTERNAL_LINK,
            uri=source.original_url,
            label=f"View on {network}",
        )

    if source.original_url:
        return EmbedDescriptor(
            kind=EmbedKind.EXTERNAL_LINK,
            uri=source.original_url,
            label=GENERIC_LINK_LABEL,
        )

    return EmbedDescriptor(kind=EmbedKind.PLACEHOLDER, uri=None, label=PLACEHOLDER_LABEL)


def preview_uri(descriptor: EmbedDescriptor, hovered: bool) -> str | None:
    """
    Presentation flags for the hover preview on the portfolio grid.

    Playable embeds are muted, chromeless and looping, and only autoplay
    while hovered. Other kinds are returned unchanged.
    """
    if descriptor.kind is not EmbedKind.PLAYABLE or descriptor.uri is None:
        return descriptor.uri
    flags = {"autoplay": int(hovered), "mute": 1, "controls": 0, "loop": 1}
    return f"{descriptor.uri}?{urlencode(flags)}"
