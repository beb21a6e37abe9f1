"""Translation of service and upstream failures into HTTP errors.

Upstream status codes and payloads pass through unchanged.
"""

from fastapi import HTTPException, status

from moderation_console.modules.moderation.service import (
    CommentDeleteError,
    ModerationServiceError,
)
from moderation_console.modules.youtube.client import YouTubeAPIError


def to_http_exception(exc: Exception) -> HTTPException:
    """Build the HTTPException returned for a failed operation.

    Args:
        exc: A ModerationServiceError or YouTubeAPIError

    Returns:
        HTTPException: With ``detail={"error": ...}``
    """
    if isinstance(exc, CommentDeleteError):
        if exc.outcome.explanation:
            detail = {"error": exc.outcome.explanation, "details": exc.payload}
        else:
            detail = {"error": exc.payload}
        return HTTPException(status_code=exc.status_code, detail=detail)

    if isinstance(exc, ModerationServiceError):
        return HTTPException(status_code=exc.status_code, detail={"error": exc.message})

    if isinstance(exc, YouTubeAPIError):
        return HTTPException(
            status_code=exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": exc.payload},
        )

    raise TypeError(f"Unsupported error type: {type(exc).__name__}")
