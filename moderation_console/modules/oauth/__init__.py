"""OAuth helper for obtaining a YouTube access token."""

from moderation_console.modules.oauth.client import OAuthError, YouTubeOAuthClient

__all__ = ["OAuthError", "YouTubeOAuthClient"]
