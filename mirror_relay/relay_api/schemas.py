"""Pydantic models exposed by the relay API."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .. import __version__
from ..resolver.models import VideoRecord


class ErrorResponse(BaseModel):
    """Body returned with HTTP 500 when a mirror cannot be resolved."""

    error: str = Field(..., description="Generic failure message naming the mirror.")
    details: str = Field(..., description="Opaque resolver error message.")


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default=__version__, description="Semantic version of the relay.")
    mirrors: list[str] = Field(default_factory=list, description="Mirror keys served by the relay.")


__all__ = ["ErrorResponse", "HealthStatus", "VideoRecord"]
