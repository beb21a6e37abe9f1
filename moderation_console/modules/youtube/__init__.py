"""YouTube Data API integration."""

from moderation_console.modules.youtube.client import (
    MAX_PAGE_SIZE,
    ErrorKind,
    YouTubeAPIError,
    YouTubeClient,
    YouTubeCredentials,
    classify_status,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "ErrorKind",
    "YouTubeAPIError",
    "YouTubeClient",
    "YouTubeCredentials",
    "classify_status",
]
