"""Application configuration settings.

All configuration values are loaded from environment variables (.env file).
No sensitive values should be hardcoded here.
"""

from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    PROJECT_NAME: str = "YouTube Moderation Console"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./moderation_console.db"

    # YouTube Data API
    YOUTUBE_ACCESS_TOKEN: Optional[str] = None
    YOUTUBE_API_KEY: Optional[str] = None
    VIDEO_ID: Optional[str] = None
    YOUTUBE_API_TIMEOUT_SECONDS: float = 30.0

    # YouTube OAuth - only needed to mint a new access token
    YOUTUBE_CLIENT_ID: str = ""
    YOUTUBE_CLIENT_SECRET: str = ""
    YOUTUBE_REDIRECT_URI: str = "http://localhost:8000/api/oauth2callback"

    # CORS
    CORS_ORIGINS: list[str] = []

    # Comment listing
    COMMENT_PAGE_SIZE_DEFAULT: int = 50
    COMMENT_SAFETY_LIMIT: int = 1000

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
