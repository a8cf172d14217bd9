"""Router exports for the relay API."""
from . import health, server

__all__ = ["health", "server"]
