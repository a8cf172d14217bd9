"""
Fetch and field plans for the supported mirrors.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Tuple
from urllib.parse import urlparse

from .extraction import (
    CHANNEL_IMAGE_RE,
    CHANNEL_LINK_RE,
    OG_DESCRIPTION_RE,
    OG_SITE_NAME_RE,
    OG_TITLE_RE,
    OG_VIDEO_RE,
    FieldRule,
    FieldSource,
    channel_image_url,
    decode_newlines,
    strip_site_suffix,
)

PAGE = "page"
API = "api"

DocumentKind = Literal["html", "json"]
UrlStyle = Literal["query", "path"]
FieldOrigin = Literal["page", "api"]


class MirrorKey(str, Enum):
    S1 = "s1"
    S2 = "s2"


@dataclass(frozen=True)
class FetchTarget:
    """A document fetched for every resolution, keyed by ``document``."""

    document: str
    base_url: str
    style: UrlStyle = "query"
    kind: DocumentKind = "html"

    def build_url(self, video_id: str) -> str:
        # The id is forwarded untouched; upstream decides whether it is valid.
        if self.style == "path":
            return f"{self.base_url.rstrip('/')}/{video_id}"
        return f"{self.base_url}?v={video_id}"


@dataclass(frozen=True)
class MirrorPlan:
    key: MirrorKey
    fetches: Tuple[FetchTarget, ...]
    rules: Tuple[FieldRule, ...]

    @property
    def host(self) -> str:
        return urlparse(self.fetches[0].base_url).hostname or self.key.value

    @property
    def failure_message(self) -> str:
        return f"Failed to fetch video ({self.host})"


STREAM_URL_RULE = FieldRule("stream_url", (FieldSource.markup(PAGE, OG_VIDEO_RE),))
CHANNEL_NAME_RULE = FieldRule(
    "channelName", (FieldSource.markup(PAGE, OG_SITE_NAME_RE, strip_site_suffix),)
)
TITLE_RULE = FieldRule("videoTitle", (FieldSource.markup(PAGE, OG_TITLE_RE),))
PAGE_CHANNEL_IMAGE = FieldSource.markup(PAGE, CHANNEL_IMAGE_RE, channel_image_url)


def s1_plan(
    page_url: str,
    api_url: str,
    *,
    description_source: FieldOrigin = "page",
    channel_image_source: FieldOrigin = "api",
) -> MirrorPlan:
    """Watch page plus metadata API, fetched concurrently.

    Description and channel image each have two alternate origins; exactly
    one is consulted per field.
    """

    if description_source == "api":
        description = FieldSource.json(API, "videoDes")
    else:
        description = FieldSource.markup(PAGE, OG_DESCRIPTION_RE)

    if channel_image_source == "page":
        channel_image = PAGE_CHANNEL_IMAGE
    else:
        channel_image = FieldSource.json(API, "channelImage")

    return MirrorPlan(
        key=MirrorKey.S1,
        fetches=(
            FetchTarget(PAGE, page_url),
            FetchTarget(API, api_url, style="path", kind="json"),
        ),
        rules=(
            STREAM_URL_RULE,
            FieldRule("channelId", (FieldSource.json(API, "channelId"),)),
            CHANNEL_NAME_RULE,
            FieldRule("channelImage", (channel_image,)),
            TITLE_RULE,
            FieldRule("videoDes", (description,)),
        ),
    )


def s2_plan(page_url: str) -> MirrorPlan:
    """Single watch page fetch; every field is scraped from the markup."""

    return MirrorPlan(
        key=MirrorKey.S2,
        fetches=(FetchTarget(PAGE, page_url),),
        rules=(
            STREAM_URL_RULE,
            FieldRule("channelId", (FieldSource.markup(PAGE, CHANNEL_LINK_RE),)),
            CHANNEL_NAME_RULE,
            FieldRule("channelImage", (PAGE_CHANNEL_IMAGE,)),
            TITLE_RULE,
            FieldRule("videoDes", (FieldSource.markup(PAGE, OG_DESCRIPTION_RE, decode_newlines),)),
        ),
    )
