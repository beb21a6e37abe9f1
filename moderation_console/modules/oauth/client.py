"""Google OAuth2 helper for minting a YouTube access token.

The console itself only reads ``YOUTUBE_ACCESS_TOKEN`` from configuration;
this client drives the consent flow that produces one.
"""

from typing import Optional
from urllib.parse import urlencode

import httpx

from moderation_console.core.config import settings
from moderation_console.modules.youtube.client import safe_json

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"

# Enough to post and delete comments and edit video metadata
YOUTUBE_SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]


class OAuthError(Exception):
    """Exception for OAuth-related errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class YouTubeOAuthClient:
    """Client for the Google OAuth2 authorization-code flow."""

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id or settings.YOUTUBE_CLIENT_ID
        self.client_secret = client_secret or settings.YOUTUBE_CLIENT_SECRET
        self.redirect_uri = redirect_uri or settings.YOUTUBE_REDIRECT_URI
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def get_authorization_url(self) -> str:
        """Build the consent URL.

        ``prompt=consent`` with offline access makes Google return a
        refresh token every time.
        """
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(YOUTUBE_SCOPES),
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> dict:
        """Exchange an authorization code for tokens.

        Args:
            code: Authorization code from the callback

        Returns:
            dict: Token response with access_token, refresh_token, expires_in

        Raises:
            OAuthError: If the exchange fails
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    GOOGLE_TOKEN_URL,
                    data={
                        "client_id": self.client_id,
                        "client_secret": self.client_secret,
                        "code": code,
                        "grant_type": "authorization_code",
                        "redirect_uri": self.redirect_uri,
                    },
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            raise OAuthError(f"Token exchange failed: {e}") from e

        if not response.is_success:
            error_data = safe_json(response)
            raise OAuthError(
                f"Token exchange failed: {error_data.get('error_description', 'Unknown error')}",
                details=error_data,
            )

        return safe_json(response)
