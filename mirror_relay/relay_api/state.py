"""Shared state container for the relay API."""
from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..resolver import MirrorKey, MirrorResolver, build_resolvers
from .settings import RelaySettings


@dataclass(slots=True)
class AppState:
    """Holds the settings and the per-mirror resolvers used by the routers."""

    settings: RelaySettings
    resolvers: dict[MirrorKey, MirrorResolver]

    def __init__(
        self,
        settings: RelaySettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.resolvers = build_resolvers(settings, transport=transport)

    def resolver(self, key: MirrorKey) -> MirrorResolver:
        return self.resolvers[key]
