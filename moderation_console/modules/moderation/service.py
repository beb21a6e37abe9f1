"""Moderation service.

Orchestrates comment listing, posting and deletion plus video metadata
reads and updates for the configured video, and records each completed
action in the audit trail.
"""

from typing import Any, Optional

from moderation_console.modules.audit.models import AuditAction
from moderation_console.modules.audit.service import AuditLogger
from moderation_console.modules.comment.deleter import (
    CommentDeleter,
    DeletedKind,
    DeleteOutcome,
)
from moderation_console.modules.comment.pagination import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SAFETY_LIMIT,
    FetchMode,
    PageAggregator,
)
from moderation_console.modules.youtube.client import YouTubeClient


_DELETE_AUDIT_ACTIONS = {
    DeletedKind.COMMENT: AuditAction.DELETE_COMMENT,
    DeletedKind.COMMENT_THREAD: AuditAction.DELETE_COMMENTTHREAD,
}


class ModerationServiceError(Exception):
    """Base exception for moderation service errors."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ModerationValidationError(ModerationServiceError):
    """Raised for missing input or configuration, before any upstream call."""


class CommentDeleteError(ModerationServiceError):
    """Raised when neither delete path removed the comment."""

    def __init__(self, outcome: DeleteOutcome):
        self.outcome = outcome
        error = outcome.error
        super().__init__(
            outcome.explanation or (error.message if error else "Delete failed"),
            status_code=(error.status_code if error else None) or 500,
        )

    @property
    def payload(self) -> dict[str, Any]:
        return self.outcome.error.payload if self.outcome.error else {}


class ModerationService:
    """Service for comment moderation and video metadata."""

    def __init__(
        self,
        client: YouTubeClient,
        audit: AuditLogger,
        video_id: Optional[str],
        safety_limit: int = DEFAULT_SAFETY_LIMIT,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """Initialize moderation service.

        Args:
            client: YouTube client carrying the caller's credentials
            audit: Audit trail for completed actions
            video_id: The configured video, may be unset
            safety_limit: Item count at which full comment aggregation stops
            default_page_size: Comment page size used when the caller gives none
        """
        self.client = client
        self.audit = audit
        self.video_id = video_id
        self.safety_limit = safety_limit
        self.default_page_size = default_page_size
        self.deleter = CommentDeleter(client)

    def _require_video_id(self) -> str:
        if not self.video_id:
            raise ModerationValidationError("Missing VIDEO_ID in env", status_code=400)
        return self.video_id

    def _require_token(self) -> None:
        if not self.client.credentials.has_token:
            raise ModerationValidationError(
                "Missing YOUTUBE_ACCESS_TOKEN in env", status_code=401
            )

    # ============================================
    # Video
    # ============================================

    async def get_video(self) -> dict[str, Any]:
        """Fetch snippet and statistics for the configured video."""
        video_id = self._require_video_id()
        data = await self.client.get_video(video_id)
        await self.audit.record(AuditAction.FETCH_VIDEO_DETAILS)
        return data

    async def update_video(
        self,
        title: str,
        description: str,
        category_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Update title and description of the configured video.

        Raises:
            ModerationValidationError: If the token or video id is missing
            YouTubeAPIError: If the upstream update fails
        """
        self._require_token()
        video_id = self._require_video_id()

        data = await self.client.update_video(video_id, title, description, category_id)
        await self.audit.record(
            AuditAction.UPDATE_VIDEO_DETAILS,
            {"title": title, "description": description},
        )
        return data

    # ============================================
    # Comments
    # ============================================

    async def list_comments(
        self,
        mode: FetchMode = FetchMode.SINGLE,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """List comment threads for the configured video.

        ``SINGLE`` returns one raw upstream page; ``ALL`` follows page tokens
        up to the safety limit and returns ``{items, nextPageToken, fetchedAll}``.

        Raises:
            ModerationValidationError: If no video is configured
            YouTubeAPIError: If any page fetch fails
        """
        video_id = self._require_video_id()
        aggregator = PageAggregator(
            self.client,
            video_id,
            safety_limit=self.safety_limit,
            default_page_size=self.default_page_size,
        )

        if mode is FetchMode.SINGLE:
            page = await aggregator.fetch_page(page_token, page_size)
            await self.audit.record(
                AuditAction.FETCH_COMMENTS_PAGE,
                {"pageToken": page_token, "count": len(page.get("items") or [])},
            )
            return page

        result = await aggregator.fetch_all(page_token, page_size)
        await self.audit.record(AuditAction.FETCH_COMMENTS_ALL, {"total": len(result.items)})
        return result.to_response()

    async def post_comment(self, text: str, parent_id: Optional[str] = None) -> dict[str, Any]:
        """Post a top-level comment, or a reply when ``parent_id`` is given.

        Raises:
            ModerationValidationError: If the token, text or video id is missing
            YouTubeAPIError: If the upstream insert fails
        """
        self._require_token()
        if not text or not text.strip():
            raise ModerationValidationError("Comment text required", status_code=400)

        if parent_id:
            data = await self.client.post_reply(parent_id, text)
        else:
            data = await self.client.post_comment_thread(self._require_video_id(), text)

        await self.audit.record(AuditAction.POST_COMMENT, {"text": text, "parentId": parent_id})
        return data

    async def delete_comment(self, comment_id: str) -> DeleteOutcome:
        """Delete a comment or comment thread by id.

        Raises:
            ModerationValidationError: If the token or id is missing
            CommentDeleteError: If the delete failed on every attempted path
        """
        self._require_token()
        if not comment_id or not comment_id.strip():
            raise ModerationValidationError("Comment id required", status_code=400)

        outcome = await self.deleter.delete(comment_id)
        if not outcome.succeeded:
            raise CommentDeleteError(outcome)

        await self.audit.record(_DELETE_AUDIT_ACTIONS[outcome.deleted], {"id": comment_id})
        return outcome
