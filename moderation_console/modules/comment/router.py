"""API router for comment listing and moderation."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from moderation_console.modules.comment.pagination import FetchMode
from moderation_console.modules.comment.schemas import CommentCreate, CommentDeleteResponse
from moderation_console.modules.moderation.dependencies import get_moderation_service
from moderation_console.modules.moderation.http import to_http_exception
from moderation_console.modules.moderation.service import (
    ModerationService,
    ModerationServiceError,
)
from moderation_console.modules.youtube.client import YouTubeAPIError

router = APIRouter(tags=["comments"])


@router.get("/comments")
async def list_comments(
    fetch_all: bool = Query(
        False, alias="all", description="Follow page tokens up to the safety limit"
    ),
    max_results: Optional[int] = Query(None, alias="maxResults"),
    page_token: Optional[str] = Query(None, alias="pageToken"),
    service: ModerationService = Depends(get_moderation_service),
) -> dict[str, Any]:
    """List comment threads of the configured video.

    Returns the raw upstream page, or ``{items, nextPageToken, fetchedAll}``
    when ``all=true``.
    """
    mode = FetchMode.ALL if fetch_all else FetchMode.SINGLE
    try:
        return await service.list_comments(mode, page_size=max_results, page_token=page_token)
    except (ModerationServiceError, YouTubeAPIError) as e:
        raise to_http_exception(e)


@router.post("/comment")
async def post_comment(
    body: CommentCreate,
    service: ModerationService = Depends(get_moderation_service),
) -> dict[str, Any]:
    """Post a top-level comment or a reply."""
    try:
        return await service.post_comment(body.text, parent_id=body.parent_id)
    except (ModerationServiceError, YouTubeAPIError) as e:
        raise to_http_exception(e)


@router.delete("/comment/{comment_id}", response_model=CommentDeleteResponse)
async def delete_comment(
    comment_id: str,
    service: ModerationService = Depends(get_moderation_service),
) -> CommentDeleteResponse:
    """Delete a comment, or the whole thread if the id names one."""
    try:
        outcome = await service.delete_comment(comment_id)
    except ModerationServiceError as e:
        raise to_http_exception(e)

    return CommentDeleteResponse(id=comment_id, deleted=outcome.deleted.value)
