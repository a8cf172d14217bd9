"""Shared fixtures standing in for the upstream mirrors."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

S1_PAGE = "inv.nadeko.net/watch"
S1_API = "just-frequent-network.glitch.me/api"
S2_PAGE = "inv1.nadeko.net/watch"


def watch_page(
    *,
    video: str | None = "https://inv.example/latest_version?id=abc123&itag=18",
    site_name: str | None = "Example Channel | Invidious",
    title: str | None = "Example Title",
    description: str | None = "First line\\nSecond line",
    channel_id: str | None = "UCpage",
    image: str | None = "AbCdEf",
) -> str:
    """Render a minimal Invidious watch page; ``None`` leaves a part out."""

    head: list[str] = []
    if video is not None:
        head.append(f'<meta property="og:video" content="{video}">')
    if site_name is not None:
        head.append(f'<meta property="og:site_name" content="{site_name}">')
    if title is not None:
        head.append(f'<meta property="og:title" content="{title}" />')
    if description is not None:
        head.append(f'<meta property="og:description" content="{description}">')

    body: list[str] = []
    if image is not None:
        body.append(f'<img src="/ggpht/{image}" alt="" />')
    if channel_id is not None:
        body.append(f'<a href="/channel/{channel_id}">Example Channel</a>')

    return (
        "<html><head>"
        + "\n".join(head)
        + "</head><body>"
        + "\n".join(body)
        + "</body></html>"
    )


class FakeMirrors:
    """Routes outbound requests by host and path to canned responses."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[str] = []

    def html(self, route: str, markup: str, status_code: int = 200) -> None:
        self.routes[route] = lambda request: httpx.Response(status_code, text=markup)

    def json(self, route: str, payload: object, status_code: int = 200) -> None:
        self.routes[route] = lambda request: httpx.Response(status_code, json=payload)

    def raw(self, route: str, content: bytes, status_code: int = 200) -> None:
        self.routes[route] = lambda request: httpx.Response(status_code, content=content)

    def error(self, route: str, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[route] = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(str(request.url))
        handler = self.routes.get(f"{request.url.host}{request.url.path}")
        if handler is None:
            return httpx.Response(404, text="not found")
        return handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture()
def mirrors() -> FakeMirrors:
    return FakeMirrors()


@pytest.fixture()
def page_factory() -> Callable[..., str]:
    return watch_page
