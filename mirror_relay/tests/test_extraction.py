"""Tests for the declarative field extraction helpers."""
from __future__ import annotations

from mirror_relay.resolver.extraction import (
    CHANNEL_IMAGE_RE,
    CHANNEL_LINK_RE,
    OG_SITE_NAME_RE,
    OG_TITLE_RE,
    OG_VIDEO_RE,
    FieldRule,
    FieldSource,
    channel_image_url,
    decode_newlines,
    extract_fields,
    missing_fields,
    strip_site_suffix,
)


def test_strip_site_suffix_removes_invidious_suffix() -> None:
    assert strip_site_suffix("Example Channel | Invidious") == "Example Channel"
    assert strip_site_suffix("  Spaced Out  |Invidious ") == "Spaced Out"


def test_strip_site_suffix_keeps_plain_names_and_earlier_pipes() -> None:
    assert strip_site_suffix(" Plain Name ") == "Plain Name"
    assert strip_site_suffix("News | Daily | Invidious") == "News | Daily"


def test_decode_newlines_is_idempotent_once_decoded() -> None:
    decoded = decode_newlines("First\\nSecond\\nThird")

    assert decoded == "First\nSecond\nThird"
    assert decode_newlines(decoded) == decoded


def test_channel_image_url_uses_fixed_size_suffix() -> None:
    assert channel_image_url("AbCdEf") == "https://yt3.ggpht.com/AbCdEf=s512-c-k-c0x00ffffff-no-rj"


def test_meta_patterns_accept_plain_and_self_closing_tags() -> None:
    markup = (
        '<meta property="og:video" content="https://cdn/v.mp4">'
        '<meta property="og:title" content="A title" />'
    )

    assert OG_VIDEO_RE.search(markup).group(1) == "https://cdn/v.mp4"
    assert OG_TITLE_RE.search(markup).group(1) == "A title"
    assert OG_SITE_NAME_RE.search(markup) is None


def test_channel_patterns_capture_first_match() -> None:
    markup = (
        '<img src="/ggpht/first-image" alt="" />'
        '<a href="/channel/UC123">Channel</a>'
        '<a href="/channel/UC999">Other</a>'
    )

    assert CHANNEL_IMAGE_RE.search(markup).group(1) == "first-image"
    assert CHANNEL_LINK_RE.search(markup).group(1) == "UC123"


def test_extract_fields_uses_ordered_fallbacks() -> None:
    rules = (
        FieldRule(
            "title",
            (
                FieldSource.json("api", "title"),
                FieldSource.markup("page", OG_TITLE_RE, str.upper),
            ),
        ),
    )
    documents = {"page": '<meta property="og:title" content="from page">', "api": {"title": ""}}

    assert extract_fields(documents, rules) == {"title": "FROM PAGE"}


def test_extract_fields_treats_non_string_json_values_as_missing() -> None:
    rules = (
        FieldRule("channelId", (FieldSource.json("api", "channelId"),)),
        FieldRule("videoDes", (FieldSource.json("api", "videoDes"),), required=False),
    )
    documents = {"api": {"channelId": 42, "videoDes": None}}

    values = extract_fields(documents, rules)

    assert values == {"channelId": None, "videoDes": None}
    assert missing_fields(values, rules) == ["channelId"]


def test_transform_returning_empty_string_counts_as_missing() -> None:
    rules = (FieldRule("channelName", (FieldSource.markup("page", OG_SITE_NAME_RE, strip_site_suffix),)),)
    documents = {"page": '<meta property="og:site_name" content=" | Invidious">'}

    values = extract_fields(documents, rules)

    assert values == {"channelName": None}
    assert missing_fields(values, rules) == ["channelName"]
