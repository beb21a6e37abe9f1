"""API router for video metadata."""

from typing import Any

from fastapi import APIRouter, Depends

from moderation_console.modules.moderation.dependencies import get_moderation_service
from moderation_console.modules.moderation.http import to_http_exception
from moderation_console.modules.moderation.service import (
    ModerationService,
    ModerationServiceError,
)
from moderation_console.modules.video.schemas import VideoUpdate
from moderation_console.modules.youtube.client import YouTubeAPIError

router = APIRouter(prefix="/video", tags=["video"])


@router.get("")
async def get_video(
    service: ModerationService = Depends(get_moderation_service),
) -> dict[str, Any]:
    """Get snippet and statistics of the configured video."""
    try:
        return await service.get_video()
    except (ModerationServiceError, YouTubeAPIError) as e:
        raise to_http_exception(e)


@router.put("")
async def update_video(
    body: VideoUpdate,
    service: ModerationService = Depends(get_moderation_service),
) -> dict[str, Any]:
    """Update title and description of the configured video."""
    try:
        return await service.update_video(body.title, body.description, body.category_id)
    except (ModerationServiceError, YouTubeAPIError) as e:
        raise to_http_exception(e)
