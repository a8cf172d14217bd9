"""HTTP client helpers for the relay CLI."""
from __future__ import annotations

import httpx


def create_client(base_url: str, *, timeout: float = 10.0, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Instantiate an HTTPX client pointed at a running relay."""

    return httpx.Client(base_url=base_url, timeout=timeout, transport=transport)
