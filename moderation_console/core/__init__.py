"""Core module for configuration and utilities."""

from moderation_console.core.config import settings
from moderation_console.core.database import Base, get_session

__all__ = [
    "settings",
    "Base",
    "get_session",
]
