"""API router for the OAuth consent flow."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from moderation_console.core.logging import log_error, log_info
from moderation_console.modules.oauth.client import OAuthError, YouTubeOAuthClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["oauth"])


def get_oauth_client() -> YouTubeOAuthClient:
    return YouTubeOAuthClient()


@router.get("/auth")
async def start_authorization(
    client: YouTubeOAuthClient = Depends(get_oauth_client),
) -> dict[str, str]:
    """Return the Google consent URL to open in a browser."""
    if not client.is_configured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "Set YOUTUBE_CLIENT_ID and YOUTUBE_CLIENT_SECRET in env"},
        )
    return {"authorization_url": client.get_authorization_url()}


@router.get("/oauth2callback")
async def oauth_callback(
    code: str = Query("", description="Authorization code issued by Google"),
    client: YouTubeOAuthClient = Depends(get_oauth_client),
) -> dict:
    """Exchange the authorization code and return the issued tokens.

    Copy ``access_token`` into ``YOUTUBE_ACCESS_TOKEN`` to enable mutations.
    """
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Missing code in query"},
        )

    try:
        tokens = await client.exchange_code(code)
    except OAuthError as e:
        log_error(logger, "OAuth code exchange failed", exception=e, details=e.details)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"error": e.message, "details": e.details},
        )

    log_info(logger, "OAuth code exchanged", scope=tokens.get("scope"))
    return tokens
