"""Pydantic model for the normalized video payload."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VideoRecord(BaseModel):
    """Fully populated video metadata republished by every mirror."""

    model_config = ConfigDict(populate_by_name=True)

    stream_url: str = Field(..., description="Direct stream URL from the og:video tag.")
    video_id: str = Field(..., alias="videoId", description="Video id echoed from the request.")
    channel_id: str = Field(..., alias="channelId")
    channel_name: str = Field(..., alias="channelName")
    channel_image: str = Field(..., alias="channelImage", description="Channel avatar URL.")
    video_title: str = Field(..., alias="videoTitle")
    video_des: str = Field(..., alias="videoDes", description="Video description text.")
