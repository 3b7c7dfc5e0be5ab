"""
RSS/Atom adapter
Downloads a feed with httpx and normalizes its entries with feedparser
"""

from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping

import feedparser
import httpx
import structlog

from ....config import Settings
from ....core.exceptions import FeedSourceError
from ..media_extractor import extract_media_url
from .base import CandidateItem, FeedSource, NewsSourceAdapter

logger = structlog.get_logger(__name__)

_UNPARSABLE = object()


class RSSFeedAdapter(NewsSourceAdapter):
    """Adapter for any RSS or Atom feed URL"""

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = datetime.now):
        super().__init__("RSS")
        self.clock = clock
        self.timeout = settings.http_timeout_seconds
        self.headers = {"User-Agent": settings.feed_user_agent}

    async def fetch_items(self, source: FeedSource) -> List[CandidateItem]:
        feed = await self.fetch_feed(source.url)
        return self.parse_entries(feed, source)

    async def fetch_feed(self, url: str) -> feedparser.FeedParserDict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers, follow_redirects=True) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException:
            raise FeedSourceError(url, "request timed out")
        except httpx.HTTPStatusError as e:
            raise FeedSourceError(url, f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            raise FeedSourceError(url, str(e))

        feed = feedparser.parse(response.content)
        if feed.bozo and not feed.entries:
            raise FeedSourceError(url, f"unparsable feed: {feed.get('bozo_exception')}")
        if feed.bozo:
            logger.warning("feed_parse_issues", feed_url=url, error=str(feed.get("bozo_exception")))
        return feed

    def parse_entries(self, feed: Mapping[str, Any], source: FeedSource) -> List[CandidateItem]:
        source_name = (feed.get("feed") or {}).get("title", "") or ""
        items = []

        for entry in feed.get("entries", []):
            link = (entry.get("link") or "").strip()
            if not link:
                logger.debug("feed_entry_without_link", feed_url=source.url, title=entry.get("title"))
                continue

            published = self._published_at(entry)
            items.append(CandidateItem(
                title=(entry.get("title") or "").strip(),
                link=link,
                source_name=source_name,
                category_id=source.category_id,
                published_at=None if published is _UNPARSABLE else published,
                image_url=extract_media_url(entry),
            ))

        return items

    def _published_at(self, entry: Mapping[str, Any]):
        """Entry timestamp as an aware datetime; now when absent, a sentinel when unparsable."""
        for field in ("published", "updated"):
            raw = entry.get(field)
            if not raw:
                continue
            parsed = entry.get(f"{field}_parsed")
            if parsed:
                return datetime(*parsed[:6], tzinfo=timezone.utc)
            return self._parse_date_string(raw)
        return self.clock().astimezone()

    @staticmethod
    def _parse_date_string(raw: str):
        from email.utils import parsedate_to_datetime

        try:
            value = parsedate_to_datetime(raw)
        except (TypeError, ValueError):
            value = None
        if value is None:
            try:
                value = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
            except ValueError:
                return _UNPARSABLE
        if value.tzinfo is None:
            value = value.astimezone()
        return value

