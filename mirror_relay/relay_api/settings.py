"""Runtime configuration for the relay API."""
from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelaySettings(BaseSettings):
    """Environment-aware settings for the relay service."""

    s1_page_url: str = Field(
        "https://inv.nadeko.net/watch", description="Watch page endpoint of mirror s1."
    )
    s1_api_url: str = Field(
        "https://just-frequent-network.glitch.me/api",
        description="Metadata API endpoint companion to mirror s1.",
    )
    s2_page_url: str = Field(
        "https://inv1.nadeko.net/watch", description="Watch page endpoint of mirror s2."
    )
    s1_description_source: Literal["page", "api"] = Field(
        default="page",
        description="Read the s1 description from og:description or from the API videoDes field.",
    )
    s1_channel_image_source: Literal["api", "page"] = Field(
        default="api",
        description="Read the s1 channel image from the API or derive it from the page markup.",
    )
    request_timeout: float | None = Field(
        default=5.0, description="Outbound request timeout in seconds; null disables it."
    )
    user_agent: str | None = Field(
        default=None, description="Optional User-Agent header sent to the mirrors."
    )
    host: str = Field(default="0.0.0.0", description="Interface the API binds to.")
    port: int = Field(default=3000, description="Port the API listens on.")
    log_level: str = Field(default="INFO", description="Root logging level.")

    model_config = SettingsConfigDict(
        env_prefix="MIRROR_RELAY_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
