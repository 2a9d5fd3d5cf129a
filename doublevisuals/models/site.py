"""Site-level data models and API payloads."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from doublevisuals.models.video import EmbedDescriptor, VideoSource


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: str | None) -> "Theme":
        """Stored theme, light when missing or unrecognized."""
        return cls.DARK if value == cls.DARK.value else cls.LIGHT


class Page(str, Enum):
    HOME = "home"
    ABOUT = "about"
    EXPERIENCE = "experience"
    CONTACT = "contact"

    @classmethod
    def parse(cls, value: str | None) -> "Page":
        try:
            return cls(value)
        except ValueError:
            return cls.HOME


class WorkCategory(str, Enum):
    SHORTFORM = "shortform"
    LONGFORM = "longform"
    HIGHLIGHTS = "highlights"


class VideoWork(BaseModel):
    """A portfolio entry as authored. `url` may be empty for unreleased work."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str = ""
    category: WorkCategory


class ToneSpec(BaseModel):
    """Parameters of a single feedback tone."""

    model_config = ConfigDict(frozen=True)

    frequency_hz: float = Field(..., gt=0)
    duration_ms: int = Field(..., gt=0)
    peak_gain: float = Field(..., gt=0, le=1)


class HealthCheckResponse(BaseModel):
    """
    Response model for the health check endpoint.
    """

    status: str = Field(..., description="Status of the server")
    version: str = Field(..., description="Version of the server")
    timestamp: datetime = Field(..., description="Current server timestamp in ISO 8601 format")
    works_loaded: int = Field(..., description="Number of portfolio entries in the catalog")


class EmbedResolution(BaseModel):
    """Response for a single URL resolution."""

    source: VideoSource
    embed: EmbedDescriptor
    preview_uri: str | None = Field(None, description="Embed URI with idle presentation flags")
    hover_uri: str | None = Field(None, description="Embed URI with hover presentation flags")


class WorkEntry(BaseModel):
    title: str
    category: WorkCategory
    resolution: EmbedResolution


class WorksResponse(BaseModel):
    sections: dict[WorkCategory, list[WorkEntry]]


class ConsentStatus(BaseModel):
    accepted: bool
    show_banner: bool


class ThemePreference(BaseModel):
    theme: Theme
