"""Video metadata module."""

from moderation_console.modules.video.router import router

__all__ = ["router"]
