"""FastAPI dependencies wiring configuration into the services."""

from fastapi import Depends

from moderation_console.core.config import settings
from moderation_console.core.database import async_session_maker
from moderation_console.modules.audit.service import AuditLogger
from moderation_console.modules.moderation.service import ModerationService
from moderation_console.modules.youtube.client import YouTubeClient, YouTubeCredentials


def get_credentials() -> YouTubeCredentials:
    """Credentials from process configuration, read-only per request."""
    return YouTubeCredentials(
        access_token=settings.YOUTUBE_ACCESS_TOKEN,
        api_key=settings.YOUTUBE_API_KEY,
    )


def get_youtube_client(
    credentials: YouTubeCredentials = Depends(get_credentials),
) -> YouTubeClient:
    return YouTubeClient(credentials, timeout=settings.YOUTUBE_API_TIMEOUT_SECONDS)


def get_audit_logger() -> AuditLogger:
    return AuditLogger(async_session_maker)


def get_moderation_service(
    client: YouTubeClient = Depends(get_youtube_client),
    audit: AuditLogger = Depends(get_audit_logger),
) -> ModerationService:
    return ModerationService(
        client,
        audit,
        video_id=settings.VIDEO_ID,
        safety_limit=settings.COMMENT_SAFETY_LIMIT,
        default_page_size=settings.COMMENT_PAGE_SIZE_DEFAULT,
    )
