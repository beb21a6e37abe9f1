"""Comment thread pagination.

Aggregates the paginated ``commentThreads.list`` listing into a single
bounded result. Pages are fetched strictly one after another because each
page token is only known once the previous page has arrived.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, AsyncIterator, Optional, Protocol

from moderation_console.core.logging import log_warning
from moderation_console.modules.youtube.client import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50
DEFAULT_SAFETY_LIMIT = 1000


class CommentThreadLister(Protocol):
    """The one upstream call the aggregator needs."""

    async def list_comment_threads(
        self,
        video_id: str,
        max_results: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
    ) -> dict[str, Any]: ...


class FetchMode(str, Enum):
    """How many pages to fetch."""

    SINGLE = "single"
    ALL = "all"


@dataclass
class AggregationResult:
    """Concatenated comment threads from one or more pages.

    Attributes:
        items: Comment threads in upstream order
        next_page_token: Token to resume from, None once the listing is exhausted
        fetched_all: True iff the listing ended because no further token existed
    """

    items: list[dict[str, Any]] = field(default_factory=list)
    next_page_token: Optional[str] = None
    fetched_all: bool = True

    def to_response(self) -> dict[str, Any]:
        return {
            "items": self.items,
            "nextPageToken": self.next_page_token,
            "fetchedAll": self.fetched_all,
        }


def clamp_page_size(requested: Optional[int], default: int = DEFAULT_PAGE_SIZE) -> int:
    """Clamp a caller's page size (or ``default``) to what the upstream accepts."""
    if requested is None:
        requested = default
    return max(1, min(requested, MAX_PAGE_SIZE))


def should_stop(item_count: int, next_page_token: Optional[str], safety_limit: int) -> bool:
    """Stop predicate evaluated between pages.

    Aggregation ends when the listing is exhausted or when the items
    collected so far reached the safety limit.
    """
    return not next_page_token or item_count >= safety_limit


class PageAggregator:
    """Drives repeated ``commentThreads.list`` calls for one video."""

    def __init__(
        self,
        client: CommentThreadLister,
        video_id: str,
        safety_limit: int = DEFAULT_SAFETY_LIMIT,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """Initialize aggregator.

        Args:
            client: Upstream client providing ``list_comment_threads``
            video_id: Video whose comment threads are listed
            safety_limit: Item count at which full aggregation stops early
            default_page_size: Page size used when the caller gives none
        """
        self.client = client
        self.video_id = video_id
        self.safety_limit = safety_limit
        self.default_page_size = default_page_size

    async def fetch_page(
        self,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> dict[str, Any]:
        """Fetch exactly one page and return it verbatim.

        Raises:
            YouTubeAPIError: If the upstream call fails
        """
        return await self.client.list_comment_threads(
            video_id=self.video_id,
            max_results=clamp_page_size(page_size, self.default_page_size),
            page_token=page_token or None,
        )

    async def iter_pages(
        self,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Yield pages until the listing is exhausted or the limit is hit.

        The sequence can be restarted from any yielded page's
        ``nextPageToken``.
        """
        item_count = 0
        token = page_token
        while True:
            page = await self.fetch_page(token, page_size)
            yield page

            item_count += len(page.get("items") or [])
            token = page.get("nextPageToken")
            if should_stop(item_count, token, self.safety_limit):
                return

    async def fetch_all(
        self,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> AggregationResult:
        """Follow page tokens and concatenate every page's items.

        A failing page aborts the whole aggregation; nothing collected
        before the failure is returned.

        Raises:
            YouTubeAPIError: If any page fetch fails
        """
        items: list[dict[str, Any]] = []
        last_token: Optional[str] = None

        async for page in self.iter_pages(page_token, page_size):
            items.extend(page.get("items") or [])
            last_token = page.get("nextPageToken") or None

        result = AggregationResult(
            items=items,
            next_page_token=last_token,
            fetched_all=last_token is None,
        )
        if not result.fetched_all:
            log_warning(
                logger,
                "Comment aggregation reached safety limit",
                video_id=self.video_id,
                total=len(items),
                safety_limit=self.safety_limit,
            )
        return result

