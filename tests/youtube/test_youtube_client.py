"""Tests for the YouTube Data API client.

The network is replaced by ``httpx.MockTransport`` so each test can inspect
the exact request sent upstream.
"""

import json

import httpx
import pytest
from hypothesis import given, settings, strategies as st

from moderation_console.modules.youtube.client import (
    MAX_PAGE_SIZE,
    ErrorKind,
    YouTubeAPIError,
    YouTubeClient,
    YouTubeCredentials,
    classify_status,
)


def make_client(handler, access_token="ya29.token", api_key=None) -> tuple[YouTubeClient, list]:
    requests: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    client = YouTubeClient(
        YouTubeCredentials(access_token=access_token, api_key=api_key),
        transport=httpx.MockTransport(recording_handler),
    )
    return client, requests


class TestRequests:
    """Requests sent for each operation."""

    @pytest.mark.asyncio
    async def test_list_comment_threads_params(self):
        client, requests = make_client(
            lambda r: httpx.Response(200, json={"items": [], "nextPageToken": "T1"})
        )

        data = await client.list_comment_threads("vid123", max_results=500, page_token="T0")

        assert data["nextPageToken"] == "T1"
        request = requests[0]
        assert request.method == "GET"
        assert request.url.path == "/youtube/v3/commentThreads"
        assert request.url.params["part"] == "snippet,replies"
        assert request.url.params["videoId"] == "vid123"
        assert request.url.params["maxResults"] == str(MAX_PAGE_SIZE)
        assert request.url.params["pageToken"] == "T0"
        assert request.headers["Authorization"] == "Bearer ya29.token"

    @pytest.mark.asyncio
    async def test_first_page_sends_no_page_token(self):
        client, requests = make_client(lambda r: httpx.Response(200, json={"items": []}))

        await client.list_comment_threads("vid123")

        assert "pageToken" not in requests[0].url.params

    @pytest.mark.asyncio
    async def test_api_key_used_without_token(self):
        client, requests = make_client(
            lambda r: httpx.Response(200, json={"items": []}),
            access_token=None,
            api_key="AIza-key",
        )

        await client.get_video("vid123")

        request = requests[0]
        assert request.url.params["key"] == "AIza-key"
        assert request.url.params["part"] == "snippet,statistics"
        assert request.url.params["id"] == "vid123"
        assert "Authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_token_takes_precedence_over_api_key(self):
        client, requests = make_client(
            lambda r: httpx.Response(200, json={"items": []}),
            api_key="AIza-key",
        )

        await client.get_video("vid123")

        assert "key" not in requests[0].url.params
        assert requests[0].headers["Authorization"] == "Bearer ya29.token"

    @pytest.mark.asyncio
    async def test_post_comment_thread_body(self):
        client, requests = make_client(lambda r: httpx.Response(200, json={"id": "thread1"}))

        data = await client.post_comment_thread("vid123", "Nice video")

        assert data == {"id": "thread1"}
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path == "/youtube/v3/commentThreads"
        assert request.url.params["part"] == "snippet"
        assert json.loads(request.content) == {
            "snippet": {
                "videoId": "vid123",
                "topLevelComment": {"snippet": {"textOriginal": "Nice video"}},
            }
        }

    @pytest.mark.asyncio
    async def test_post_reply_body(self):
        client, requests = make_client(lambda r: httpx.Response(200, json={"id": "reply1"}))

        await client.post_reply("thread1", "Thanks!")

        request = requests[0]
        assert request.url.path == "/youtube/v3/comments"
        assert json.loads(request.content) == {
            "snippet": {"parentId": "thread1", "textOriginal": "Thanks!"}
        }

    @pytest.mark.asyncio
    async def test_update_video_body(self):
        client, requests = make_client(lambda r: httpx.Response(200, json={"id": "vid123"}))

        await client.update_video("vid123", "New title", "New description", category_id="22")

        request = requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/youtube/v3/videos"
        assert json.loads(request.content) == {
            "id": "vid123",
            "snippet": {"title": "New title", "description": "New description", "categoryId": "22"},
        }

    @pytest.mark.asyncio
    async def test_delete_endpoints(self):
        client, requests = make_client(lambda r: httpx.Response(204))

        await client.delete_comment("c1")
        await client.delete_comment_thread("t1")

        assert [(r.method, r.url.path, r.url.params["id"]) for r in requests] == [
            ("DELETE", "/youtube/v3/comments", "c1"),
            ("DELETE", "/youtube/v3/commentThreads", "t1"),
        ]


class TestErrors:
    """Upstream failures become YouTubeAPIError with payload intact."""

    @pytest.mark.asyncio
    async def test_error_payload_passed_through(self):
        payload = {"error": {"code": 400, "message": "Invalid id", "errors": [{"reason": "processingFailure"}]}}
        client, _ = make_client(lambda r: httpx.Response(400, json=payload))

        with pytest.raises(YouTubeAPIError) as exc_info:
            await client.delete_comment("Ugx-thread")

        error = exc_info.value
        assert error.status_code == 400
        assert error.details == payload
        assert error.payload == payload
        assert error.kind is ErrorKind.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_network_failure_classified_as_server_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client(handler)

        with pytest.raises(YouTubeAPIError) as exc_info:
            await client.get_video("vid123")

        error = exc_info.value
        assert error.status_code is None
        assert error.kind is ErrorKind.SERVER_ERROR
        assert "message" in error.payload

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        client, _ = make_client(lambda r: httpx.Response(502, text="<html>Bad Gateway</html>"))

        with pytest.raises(YouTubeAPIError) as exc_info:
            await client.get_video("vid123")

        assert exc_info.value.details == {"message": "<html>Bad Gateway</html>"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [200, 201, 202, 203, 206])
    async def test_any_2xx_is_success(self, status: int):
        client, _ = make_client(lambda r: httpx.Response(status, json={"id": "vid123"}))

        data = await client.update_video("vid123", "Title", "Description")

        assert data == {"id": "vid123"}

    @pytest.mark.asyncio
    async def test_empty_2xx_body(self):
        client, _ = make_client(lambda r: httpx.Response(204))

        assert await client.get_video("vid123") == {}


class TestClassification:
    @given(status=st.integers(min_value=500, max_value=599))
    @settings(max_examples=50)
    def test_5xx_is_server_error(self, status: int) -> None:
        assert classify_status(status) is ErrorKind.SERVER_ERROR

    def test_known_statuses(self) -> None:
        assert classify_status(None) is ErrorKind.SERVER_ERROR
        assert classify_status(400) is ErrorKind.BAD_REQUEST
        assert classify_status(401) is ErrorKind.UNAUTHORIZED
        assert classify_status(403) is ErrorKind.FORBIDDEN
        assert classify_status(404) is ErrorKind.NOT_FOUND
        assert classify_status(429) is ErrorKind.OTHER
