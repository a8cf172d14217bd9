"""Command line interface for Mirror Relay."""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

import typer
import uvicorn

from ..relay_api.app import create_app
from ..relay_api.schemas import ErrorResponse
from ..relay_api.settings import RelaySettings
from ..resolver import MirrorKey, VideoFetchError, build_resolvers
from .client import create_client


DEFAULT_API_BASE = "http://localhost:3000"

app = typer.Typer(help="Resolve mirror video metadata locally or through a running relay.")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the relay API service.",
        show_default=True,
        envvar="MIRROR_RELAY_API_BASE",
    )


def _echo_json(payload: Any, *, err: bool = False) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False), err=err)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind; defaults to the configured host."),
    port: Optional[int] = typer.Option(None, help="Port to listen on; defaults to the configured port."),
) -> None:
    """Run the relay API with Uvicorn."""

    settings = RelaySettings()
    _configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=host or settings.host,
        port=port or settings.port,
    )


@app.command()
def resolve(
    mirror: MirrorKey = typer.Argument(..., help="Mirror to scrape."),
    video_id: str = typer.Argument(..., help="Video id forwarded to the mirror."),
    verbose: bool = typer.Option(False, "--verbose", help="Log resolver progress to stderr."),
) -> None:
    """Resolve a video in-process and print the record as JSON."""

    settings = RelaySettings()
    _configure_logging("DEBUG" if verbose else settings.log_level)
    resolver = build_resolvers(settings)[mirror]

    try:
        record = asyncio.run(resolver.resolve(video_id))
    except VideoFetchError as exc:
        body = ErrorResponse(error=resolver.plan.failure_message, details=exc.message)
        _echo_json(body.model_dump(), err=True)
        raise typer.Exit(code=1) from exc

    _echo_json(record.model_dump(by_alias=True))


@app.command()
def fetch(
    mirror: MirrorKey = typer.Argument(..., help="Mirror endpoint to query."),
    video_id: str = typer.Argument(..., help="Video id forwarded to the mirror."),
    api_base: str = _api_base_option(),
) -> None:
    """Query a running relay for a video and pretty-print the response."""

    with create_client(api_base) as client:
        response = client.get(f"/api/server/{mirror.value}/{video_id}")

    _echo_json(response.json())
    if response.status_code != 200:
        raise typer.Exit(code=1)


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        response = client.get("/health")
        response.raise_for_status()
        _echo_json(response.json())
