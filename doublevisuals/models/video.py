"""Video source and embed data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Platform(str, Enum):
    """Where a pasted URL points."""

    YOUTUBE_LONG = "youtube_long"
    YOUTUBE_SHORT = "youtube_short"
    YOUTUBE_WATCH = "youtube_watch"
    SOCIAL_POST = "social_post"
    UNKNOWN = "unknown"

    @property
    def is_youtube(self) -> bool:
        return self in (Platform.YOUTUBE_LONG, Platform.YOUTUBE_SHORT, Platform.YOUTUBE_WATCH)


class VideoSource(BaseModel):
    """A classified video URL. Immutable."""

    model_config = ConfigDict(frozen=True)

    platform: Platform = Field(..., description="Detected platform")
    id: str | None = Field(None, description="Extracted video ID, YouTube variants only")
    original_url: str = Field("", description="The URL as it was pasted")

    @model_validator(mode="after")
    def check_id_matches_platform(self) -> "VideoSource":
        if self.platform.is_youtube and not self.id:
            raise ValueError(f"{self.platform.value} requires a video id")
        if not self.platform.is_youtube and self.id is not None:
            raise ValueError(f"{self.platform.value} must not carry a video id")
        return self


class EmbedKind(str, Enum):
    PLAYABLE = "playable"
    EXTERNAL_LINK = "external_link"
    PLACEHOLDER = "placeholder"


class EmbedDescriptor(BaseModel):
    """Renderable form of a VideoSource."""

    model_config = ConfigDict(frozen=True)

    kind: EmbedKind
    uri: str | None = Field(None, description="Embed URI or outbound link")
    label: str = Field(..., description="Title or call-to-action text")
