"""FastAPI service republishing mirror video metadata."""
from .app import create_app

__all__ = ["create_app"]
