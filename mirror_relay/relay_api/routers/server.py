"""Mirror endpoints republishing scraped video metadata."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...resolver import MirrorKey, VideoFetchError
from ..dependencies import get_app_state
from ..schemas import ErrorResponse, VideoRecord
from ..state import AppState

router = APIRouter(prefix="/api/server", tags=["server"])

_RESPONSES = {500: {"model": ErrorResponse, "description": "The mirror could not be resolved."}}


async def _resolve(key: MirrorKey, video_id: str, app_state: AppState) -> VideoRecord | JSONResponse:
    resolver = app_state.resolver(key)
    try:
        return await resolver.resolve(video_id)
    except VideoFetchError as exc:
        body = ErrorResponse(error=resolver.plan.failure_message, details=exc.message)
        return JSONResponse(status_code=500, content=body.model_dump())


@router.get("/s1/{video_id}", response_model=VideoRecord, responses=_RESPONSES, summary="Resolve via mirror s1")
async def server_s1(video_id: str, app_state: AppState = Depends(get_app_state)) -> VideoRecord | JSONResponse:
    """Scrape the s1 watch page and metadata API for ``video_id``."""

    return await _resolve(MirrorKey.S1, video_id, app_state)


@router.get("/s2/{video_id}", response_model=VideoRecord, responses=_RESPONSES, summary="Resolve via mirror s2")
async def server_s2(video_id: str, app_state: AppState = Depends(get_app_state)) -> VideoRecord | JSONResponse:
    """Scrape every field from the s2 watch page for ``video_id``."""

    return await _resolve(MirrorKey.S2, video_id, app_state)
