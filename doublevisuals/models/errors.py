"""Error codes and exceptions."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes."""

    # Input Validation
    INVALID_INPUT = "INVALID_INPUT"
    UNRECOGNIZED_SOURCE = "UNRECOGNIZED_SOURCE"

    # Browser-boundary resources
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    AUDIO_UNAVAILABLE = "AUDIO_UNAVAILABLE"

    # System Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class SiteError(Exception):
    """Base exception for site runtime errors."""

    def __init__(self, code: ErrorCode, message: str, details: dict[str, Any] | None = None) -> None:
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidInputError(SiteError):
    """Invalid input provided."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.INVALID_INPUT, message, details)


class UnrecognizedSourceError(SiteError):
    """A pasted URL could not be classified. Never escapes the resolver."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(ErrorCode.UNRECOGNIZED_SOURCE, reason, {"url": url})


class StorageUnavailableError(SiteError):
    """A persistence backend could not be read or written."""

    def __init__(self, backend: str, message: str) -> None:
        super().__init__(ErrorCode.STORAGE_UNAVAILABLE, message, {"backend": backend})


class AudioUnavailableError(SiteError):
    """The audio context could not be constructed."""

    def __init__(self, message: str = "Audio output is unavailable") -> None:
        super().__init__(ErrorCode.AUDIO_UNAVAILABLE, message)
