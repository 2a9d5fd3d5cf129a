"""Configuration management using environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from doublevisuals.models.site import ToneSpec


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server Configuration
    server_host: str = Field(default="0.0.0.0", description="Server bind address")
    server_port: int = Field(default=8080, description="HTTP API port", ge=1, le=65535)
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (e.g., 'https://doublevisuals.net')",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    environment: str = Field(default="development", description="Environment name")

    # Storage
    storage_path: str | None = Field(
        default=None,
        description="JSON file backing the durable key-value store. In-memory when unset.",
    )
    memory_store_max_items: int = Field(
        default=100000,
        description=(
            "Entry cap for the in-memory store used when STORAGE_PATH is unset. "
            "Each visitor takes up to two entries; the oldest writes are evicted first."
        ),
        ge=1,
    )
    consent_key: str = Field(
        default="dv_cookies_accepted", description="Storage key and cookie name for consent"
    )
    consent_cookie_max_age: int = Field(
        default=31536000, description="Consent cookie lifetime in seconds", ge=0
    )
    theme_key: str = Field(default="theme", description="Storage key and cookie name for theme")
    visitor_cookie_name: str = Field(
        default="dv_visitor", description="Cookie scoping the durable store to one visitor"
    )

    # Consent banner
    banner_close_delay_ms: int = Field(
        default=260, description="Closing animation length before the banner is removed", ge=0
    )
    banner_tone_frequency_hz: float = Field(default=880.0, gt=0)
    banner_tone_duration_ms: int = Field(default=180, gt=0)
    banner_tone_peak_gain: float = Field(default=0.05, gt=0, le=1)

    # Navigation click tone
    nav_tone_frequency_hz: float = Field(default=660.0, gt=0)
    nav_tone_duration_ms: int = Field(default=60, gt=0)
    nav_tone_peak_gain: float = Field(default=0.03, gt=0, le=1)

    @property
    def allowed_origins(self) -> list[str]:
        """Parsed list of CORS origins."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def banner_tone(self) -> ToneSpec:
        return ToneSpec(
            frequency_hz=self.banner_tone_frequency_hz,
            duration_ms=self.banner_tone_duration_ms,
            peak_gain=self.banner_tone_peak_gain,
        )

    @property
    def nav_tone(self) -> ToneSpec:
        return ToneSpec(
            frequency_hz=self.nav_tone_frequency_hz,
            duration_ms=self.nav_tone_duration_ms,
            peak_gain=self.nav_tone_peak_gain,
        )


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config()
