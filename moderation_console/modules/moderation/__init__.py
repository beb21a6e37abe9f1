"""Moderation module.

Orchestrates comment and video operations against the configured video.
"""

from moderation_console.modules.moderation.service import (
    CommentDeleteError,
    ModerationService,
    ModerationServiceError,
    ModerationValidationError,
)

__all__ = [
    "CommentDeleteError",
    "ModerationService",
    "ModerationServiceError",
    "ModerationValidationError",
]
