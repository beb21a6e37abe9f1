"""Comment listing and delete resolution."""

from moderation_console.modules.comment.deleter import (
    CommentDeleter,
    DeletedKind,
    DeleteOutcome,
)
from moderation_console.modules.comment.pagination import (
    AggregationResult,
    FetchMode,
    PageAggregator,
    clamp_page_size,
    should_stop,
)

__all__ = [
    "CommentDeleter",
    "DeletedKind",
    "DeleteOutcome",
    "AggregationResult",
    "FetchMode",
    "PageAggregator",
    "clamp_page_size",
    "should_stop",
]
