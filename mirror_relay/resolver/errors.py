"""Error types raised while resolving a video against a mirror."""
from __future__ import annotations

from typing import Literal, Sequence

FETCH_FAILED_MESSAGE = "Failed to fetch video data"

FailureKind = Literal["fetch", "missing_data", "unexpected"]


class UpstreamFetchError(RuntimeError):
    """Raised when a mirror document cannot be fetched or decoded."""

    def __init__(self, document: str, url: str, reason: str) -> None:
        super().__init__(f"{document} fetch failed for {url}: {reason}")
        self.document = document
        self.url = url


class MissingFieldError(RuntimeError):
    """Raised when required fields could not be extracted."""

    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing required data: {', '.join(self.fields)}")


class VideoFetchError(RuntimeError):
    """Opaque failure surfaced to callers; the root cause is chained and logged only."""

    def __init__(self, kind: FailureKind, message: str = FETCH_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
