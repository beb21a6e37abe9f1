"""YouTube Data API client.

Thin call surface over the video and comment endpoints used by the console.
The credential is passed in explicitly so tests can substitute fakes.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"

# YouTube refuses maxResults above this for commentThreads.list
MAX_PAGE_SIZE = 100


class ErrorKind(str, Enum):
    """Classification of upstream failures."""

    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    OTHER = "other"


def classify_status(status_code: Optional[int]) -> ErrorKind:
    """Map an upstream HTTP status to an ErrorKind.

    A missing status means the request never got a response.
    """
    if status_code is None or status_code >= 500:
        return ErrorKind.SERVER_ERROR
    if status_code == 400:
        return ErrorKind.BAD_REQUEST
    if status_code == 401:
        return ErrorKind.UNAUTHORIZED
    if status_code == 403:
        return ErrorKind.FORBIDDEN
    if status_code == 404:
        return ErrorKind.NOT_FOUND
    return ErrorKind.OTHER


class YouTubeAPIError(Exception):
    """Exception raised for YouTube Data API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def kind(self) -> ErrorKind:
        return classify_status(self.status_code)

    @property
    def payload(self) -> dict:
        """Upstream error body, or a message when there was none."""
        return self.details or {"message": self.message}


@dataclass(frozen=True)
class YouTubeCredentials:
    """Credentials used for every upstream call.

    Attributes:
        access_token: OAuth2 bearer token, required for mutations
        api_key: API key used for reads when no token is configured
    """

    access_token: Optional[str] = None
    api_key: Optional[str] = None

    @property
    def has_token(self) -> bool:
        return bool(self.access_token)


class YouTubeClient:
    """Client for the YouTube Data API v3."""

    BASE_URL = YOUTUBE_API_BASE

    def __init__(
        self,
        credentials: YouTubeCredentials,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize client.

        Args:
            credentials: Bearer token and/or API key
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used to stub the network
        """
        self.credentials = credentials
        self.timeout = timeout
        self.transport = transport

    def _auth(self, params: dict[str, Any]) -> dict[str, str]:
        """Attach credentials, returning the headers to send.

        The bearer token wins; the API key is only added to ``params`` when
        no token is configured.
        """
        if self.credentials.access_token:
            return {"Authorization": f"Bearer {self.credentials.access_token}"}
        if self.credentials.api_key:
            params["key"] = self.credentials.api_key
        return {}

    async def _request(
        self,
        method: str,
        path: str,
        action: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        params = dict(params or {})
        headers = self._auth(params)
        if json is not None:
            headers["Content-Type"] = "application/json"

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    method,
                    f"{self.BASE_URL}/{path}",
                    params=params,
                    headers=headers,
                    json=json,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logger.error(
                "YouTube API request failed",
                extra={"action": action, "error": str(e)},
            )
            raise YouTubeAPIError(f"Failed to {action}: {e}") from e

        if not response.is_success:
            error_data = safe_json(response)
            logger.error(
                "YouTube API error",
                extra={
                    "action": action,
                    "status_code": response.status_code,
                    "details": error_data,
                },
            )
            raise YouTubeAPIError(
                f"Failed to {action}: {response.status_code}",
                status_code=response.status_code,
                details=error_data,
            )

        return safe_json(response)

    async def get_video(self, video_id: str) -> dict[str, Any]:
        """Get snippet and statistics for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            dict: ``videos.list`` response

        Raises:
            YouTubeAPIError: If API call fails
        """
        return await self._request(
            "GET",
            "videos",
            "get video",
            params={"part": "snippet,statistics", "id": video_id},
        )

    async def update_video(
        self,
        video_id: str,
        title: str,
        description: str,
        category_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Update a video's title and description.

        Args:
            video_id: YouTube video ID
            title: New title
            description: New description
            category_id: Category to keep on the video; YouTube requires it
                for snippet updates on most videos

        Returns:
            dict: Updated video resource

        Raises:
            YouTubeAPIError: If API call fails
        """
        snippet: dict[str, Any] = {"title": title, "description": description}
        if category_id:
            snippet["categoryId"] = category_id

        return await self._request(
            "PUT",
            "videos",
            "update video",
            params={"part": "snippet"},
            json={"id": video_id, "snippet": snippet},
        )

    async def list_comment_threads(
        self,
        video_id: str,
        max_results: int = 50,
        page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        """Get one page of comment threads for a video.

        Args:
            video_id: YouTube video ID
            max_results: Maximum results per page (clamped to 100)
            page_token: Page token for pagination

        Returns:
            dict: Comment threads response with items and nextPageToken

        Raises:
            YouTubeAPIError: If API call fails
        """
        params: dict[str, Any] = {
            "part": "snippet,replies",
            "videoId": video_id,
            "maxResults": min(max_results, MAX_PAGE_SIZE),
        }
        if page_token:
            params["pageToken"] = page_token

        return await self._request("GET", "commentThreads", "list comment threads", params=params)

    async def post_comment_thread(self, video_id: str, text: str) -> dict[str, Any]:
        """Post a new top-level comment on a video.

        Raises:
            YouTubeAPIError: If API call fails
        """
        body = {
            "snippet": {
                "videoId": video_id,
                "topLevelComment": {"snippet": {"textOriginal": text}},
            }
        }
        return await self._request(
            "POST",
            "commentThreads",
            "post comment thread",
            params={"part": "snippet"},
            json=body,
        )

    async def post_reply(self, parent_id: str, text: str) -> dict[str, Any]:
        """Post a reply to a top-level comment.

        Raises:
            YouTubeAPIError: If API call fails
        """
        body = {"snippet": {"parentId": parent_id, "textOriginal": text}}
        return await self._request(
            "POST",
            "comments",
            "post reply",
            params={"part": "snippet"},
            json=body,
        )

    async def delete_comment(self, comment_id: str) -> None:
        """Delete a single comment.

        Raises:
            YouTubeAPIError: If API call fails
        """
        await self._request("DELETE", "comments", "delete comment", params={"id": comment_id})

    async def delete_comment_thread(self, thread_id: str) -> None:
        """Delete a comment thread, including its replies.

        Raises:
            YouTubeAPIError: If API call fails
        """
        await self._request(
            "DELETE",
            "commentThreads",
            "delete comment thread",
            params={"id": thread_id},
        )


def safe_json(response: httpx.Response) -> dict[str, Any]:
    """Decode a response body as a dict, tolerating empty or non-JSON bodies."""
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {"message": response.text}
    return data if isinstance(data, dict) else {"data": data}

