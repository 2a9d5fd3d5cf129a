"""Data models for the site runtime."""

from doublevisuals.models.errors import ErrorCode, SiteError
from doublevisuals.models.site import HealthCheckResponse, Page, Theme, ToneSpec, VideoWork
from doublevisuals.models.video import EmbedDescriptor, EmbedKind, Platform, VideoSource

__all__ = [
    "EmbedDescriptor",
    "EmbedKind",
    "ErrorCode",
    "HealthCheckResponse",
    "Page",
    "Platform",
    "SiteError",
    "Theme",
    "ToneSpec",
    "VideoSource",
    "VideoWork",
]
