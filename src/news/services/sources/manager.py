"""
Feed aggregator - collects candidates from every configured source
Sources are fetched one after another; a failing source is logged and skipped
"""

from typing import Iterable, List

import structlog

from .base import CandidateItem, FeedSource, NewsSourceAdapter

logger = structlog.get_logger(__name__)


class FeedAggregator:
    """Fetches a set of feed sources and returns the union of their candidates"""

    def __init__(self, adapter: NewsSourceAdapter):
        self.adapter = adapter
        self.failed_sources: List[str] = []

    async def aggregate(self, sources: Iterable[FeedSource]) -> List[CandidateItem]:
        self.failed_sources = []
        candidates: List[CandidateItem] = []

        for source in sources:
            if not source.active:
                continue
            try:
                items = await self.adapter.fetch_items(source)
            except Exception as e:
                logger.error("feed_fetch_failed", feed_url=source.url, error=str(e))
                self.failed_sources.append(source.url)
                continue

            logger.info("feed_fetched", feed_url=source.url, items=len(items), category_id=source.category_id)
            candidates.extend(items)

        logger.info("feeds_aggregated", total_items=len(candidates), failed_sources=len(self.failed_sources))
        return candidates

