"""
Declarative field extraction for mirror watch pages and metadata payloads.

A field is described by a FieldRule listing the places it can be read from,
in order. Markup sources match a regex against the raw document text; JSON
sources read a key from a decoded object.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

Transform = Callable[[str], Optional[str]]

OG_VIDEO_RE = re.compile(r'<meta property="og:video" content="([^"]+)"\s*/?>')
OG_SITE_NAME_RE = re.compile(r'<meta property="og:site_name" content="([^"]+)"\s*/?>')
OG_TITLE_RE = re.compile(r'<meta property="og:title" content="([^"]+)"\s*/?>')
OG_DESCRIPTION_RE = re.compile(r'<meta property="og:description" content="([^"]+)"\s*/?>')
CHANNEL_LINK_RE = re.compile(r'<a href="/channel/([^"]+)"')
CHANNEL_IMAGE_RE = re.compile(r'<img src="/ggpht/([^"]+)" alt="" />')

CHANNEL_IMAGE_HOST = "https://yt3.ggpht.com"
CHANNEL_IMAGE_SUFFIX = "=s512-c-k-c0x00ffffff-no-rj"


def strip_site_suffix(value: str) -> str:
    """Drop a trailing ``| Invidious`` style suffix from an og:site_name value."""
    if "|" in value:
        value = value.rsplit("|", 1)[0]
    return value.strip()


def decode_newlines(value: str) -> str:
    return value.replace("\\n", "\n")


def channel_image_url(fragment: str) -> str:
    return f"{CHANNEL_IMAGE_HOST}/{fragment}{CHANNEL_IMAGE_SUFFIX}"


@dataclass(frozen=True)
class FieldSource:
    document: str
    pattern: Optional[re.Pattern[str]] = None
    key: Optional[str] = None
    transform: Optional[Transform] = None

    @classmethod
    def markup(cls, document: str, pattern: re.Pattern[str], transform: Optional[Transform] = None) -> "FieldSource":
        return cls(document=document, pattern=pattern, transform=transform)

    @classmethod
    def json(cls, document: str, key: str, transform: Optional[Transform] = None) -> "FieldSource":
        return cls(document=document, key=key, transform=transform)

    def read(self, documents: Mapping[str, Any]) -> Optional[str]:
        payload = documents.get(self.document)
        if payload is None:
            return None

        raw: Any
        if self.pattern is not None:
            if not isinstance(payload, str):
                return None
            match = self.pattern.search(payload)
            raw = match.group(1) if match else None
        elif self.key is not None:
            raw = payload.get(self.key) if isinstance(payload, Mapping) else None
        else:
            raw = None

        # Non-string JSON values count as absent, like empty strings.
        if not isinstance(raw, str) or not raw:
            return None
        if self.transform is not None:
            raw = self.transform(raw)
        return raw or None


@dataclass(frozen=True)
class FieldRule:
    name: str
    sources: Tuple[FieldSource, ...]
    required: bool = True


def extract_fields(documents: Mapping[str, Any], rules: Sequence[FieldRule]) -> Dict[str, Optional[str]]:
    """Evaluate every rule against the fetched documents.

    The first source yielding a non-empty value wins; a rule with no such
    source resolves to ``None``.
    """

    values: Dict[str, Optional[str]] = {}
    for rule in rules:
        value: Optional[str] = None
        for source in rule.sources:
            value = source.read(documents)
            if value is not None:
                break
        values[rule.name] = value
    return values


def missing_fields(values: Mapping[str, Optional[str]], rules: Sequence[FieldRule]) -> List[str]:
    return [rule.name for rule in rules if rule.required and values.get(rule.name) is None]
