"""FastAPI dependencies for the relay API."""
from fastapi import Request

from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state
