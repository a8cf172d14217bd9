"""Application factory for the Mirror Relay API."""
import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .. import __version__
from .routers import health, server
from .settings import RelaySettings
from .state import AppState


def create_app(
    settings: RelaySettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    ``transport`` replaces the outbound HTTP transport of every resolver,
    which lets tests stand in for the mirrors.
    """

    resolved_settings = settings or RelaySettings()
    app_state = AppState(settings=resolved_settings, transport=transport)

    app = FastAPI(title="Mirror Relay", version=__version__)
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    for router in (health.router, server.router):
        app.include_router(router)

    return app
