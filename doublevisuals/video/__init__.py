"""Video URL resolution and embed building."""

from doublevisuals.video.embed import build, preview_uri
from doublevisuals.video.resolver import resolve, social_network_name

__all__ = ["build", "preview_uri", "resolve", "social_network_name"]
