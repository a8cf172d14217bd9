"""CLI entry point for launching the relay API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import RelaySettings


def main() -> None:
    """Start the relay API on the configured host and port."""

    settings = RelaySettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover - manual entrypoint
    main()
