"""Comment delete resolution.

The console accepts a single unqualified identifier for deletion, while
YouTube deletes comments and comment threads through separate endpoints.
A ``400`` from ``comments.delete`` is taken to mean the identifier names a
thread, and the delete is retried once against ``commentThreads.delete``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional, Protocol

from moderation_console.core.logging import log_info
from moderation_console.modules.youtube.client import ErrorKind, YouTubeAPIError

logger = logging.getLogger(__name__)


# Upstream performs the permission check; these only describe its likely cause
FAILURE_EXPLANATIONS: dict[ErrorKind, str] = {
    ErrorKind.UNAUTHORIZED: (
        "Unauthorized: token missing, expired, invalid or missing the youtube.force-ssl scope"
    ),
    ErrorKind.FORBIDDEN: (
        "Forbidden: you likely do not have permission to delete this comment "
        "(not the comment owner or channel owner)"
    ),
    ErrorKind.NOT_FOUND: "Not found: no comment or comment thread with this id",
    ErrorKind.SERVER_ERROR: "Upstream error: YouTube could not be reached or failed",
}


class CommentDeleteClient(Protocol):
    async def delete_comment(self, comment_id: str) -> None: ...

    async def delete_comment_thread(self, thread_id: str) -> None: ...


class DeletedKind(str, Enum):
    """Which upstream resource was deleted."""

    COMMENT = "comment"
    COMMENT_THREAD = "commentThread"


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of resolving and deleting an identifier.

    Exactly one of ``deleted`` and ``error`` is set.
    """

    comment_id: str
    attempts: int
    deleted: Optional[DeletedKind] = None
    error: Optional[YouTubeAPIError] = None
    explanation: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.deleted is not None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None


async def _attempt(
    operation: Callable[[str], Awaitable[None]],
    resource_id: str,
) -> Optional[YouTubeAPIError]:
    """Run one delete call, returning its error instead of raising it."""
    try:
        await operation(resource_id)
    except YouTubeAPIError as e:
        return e
    return None


class CommentDeleter:
    """Deletes an identifier as a comment, falling back to a thread delete."""

    def __init__(self, client: CommentDeleteClient):
        self.client = client

    async def delete(self, comment_id: str) -> DeleteOutcome:
        """Delete ``comment_id`` as a comment or, failing that, as a thread.

        Only a bad-request failure of the comment delete triggers the
        thread delete, and only once. Every other failure is returned with
        an explanation and no retry.

        Args:
            comment_id: Comment or comment thread identifier

        Returns:
            DeleteOutcome: What was deleted, or why nothing was
        """
        error = await _attempt(self.client.delete_comment, comment_id)
        if error is None:
            return DeleteOutcome(comment_id, attempts=1, deleted=DeletedKind.COMMENT)

        if error.kind is not ErrorKind.BAD_REQUEST:
            return DeleteOutcome(
                comment_id,
                attempts=1,
                error=error,
                explanation=FAILURE_EXPLANATIONS.get(error.kind),
            )

        log_info(
            logger,
            "Comment delete rejected as bad request, retrying as comment thread",
            comment_id=comment_id,
        )
        fallback_error = await _attempt(self.client.delete_comment_thread, comment_id)
        if fallback_error is None:
            return DeleteOutcome(comment_id, attempts=2, deleted=DeletedKind.COMMENT_THREAD)

        return DeleteOutcome(comment_id, attempts=2, error=fallback_error)
