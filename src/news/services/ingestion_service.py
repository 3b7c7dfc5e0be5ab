"""
News Ingestion Service
One run of the news pipeline:
1. Load active feed sources
2. Aggregate candidates from every feed
3. Drop candidates already posted or not published today
4. For each survivor, up to the per-run cap:
   extract article text -> summarize -> insert post and category link
5. Pause between successful insertions to respect the summarization rate limit
"""

import asyncio
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Awaitable, Callable, Dict, List, Optional

import structlog
from sqlalchemy.engine import Engine

from ...config import Settings, get_settings
from ...core.database import create_db_engine, create_session_factory
from ...core.exceptions import NewsIngestError, SummarizationError, SummaryTooShortError
from ...repositories import BlogRepository, FeedSourceRepository
from .candidate_filter import CandidateFilter
from .content_extractor import ContentExtractorClient
from .sources.base import CandidateItem
from .sources.manager import FeedAggregator
from .sources.rss_adapter import RSSFeedAdapter
from .summarizer import SummarizerService, SummaryStatus

logger = structlog.get_logger(__name__)


@dataclass
class IngestionReport:
    started_at: datetime
    candidates_found: int = 0
    feeds_failed: int = 0
    already_processed: int = 0
    not_today: int = 0
    items_to_process: int = 0
    attempted: int = 0
    processed: int = 0
    failures: Dict[str, int] = field(default_factory=dict)
    inserted_post_ids: List[int] = field(default_factory=list)
    duration_seconds: float = 0.0

    def record_failure(self, reason: str):
        self.failures[reason] = self.failures.get(reason, 0) + 1


class NewsIngestionService:
    """Drives one complete ingestion run. Runs must not overlap within a process."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine_factory: Callable[[Settings], Engine] = create_db_engine,
        aggregator: Optional[FeedAggregator] = None,
        extractor: Optional[ContentExtractorClient] = None,
        summarizer: Optional[SummarizerService] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.settings = settings or get_settings()
        self.engine_factory = engine_factory
        self.aggregator = aggregator or FeedAggregator(RSSFeedAdapter(self.settings, clock=clock))
        self.extractor = extractor or ContentExtractorClient(self.settings)
        self.summarizer = summarizer or SummarizerService(self.settings)
        self.sleep = sleep
        self.clock = clock

    async def run(self) -> IngestionReport:
        report = IngestionReport(started_at=self.clock())
        started = time.monotonic()
        logger.info("ingestion_started", max_items=self.settings.max_items_per_run)

        engine = self.engine_factory(self.settings)
        db = None
        try:
            db = create_session_factory(engine)()
            sources = FeedSourceRepository(db).get_active_sources()
            blog_repository = BlogRepository(db)

            candidates = await self.aggregator.aggregate(sources)
            report.candidates_found = len(candidates)
            report.feeds_failed = len(self.aggregator.failed_sources)

            filtered = CandidateFilter(blog_repository, self.clock).filter(candidates)
            report.already_processed = filtered.already_processed
            report.not_today = filtered.not_today

            report.items_to_process = min(self.settings.max_items_per_run, len(filtered.accepted))
            logger.info(
                "candidates_ready",
                found=report.candidates_found,
                fresh=len(filtered.accepted),
                items_to_process=report.items_to_process,
            )

            for candidate in filtered.accepted:
                if report.processed >= report.items_to_process:
                    break

                report.attempted += 1
                try:
                    post_id = await self.process_candidate(blog_repository, candidate)
                except NewsIngestError as e:
                    logger.warning("candidate_failed", link=candidate.link, reason=e.error_code, error=e.message)
                    report.record_failure(e.error_code)
                    continue
                except Exception as e:
                    logger.error("candidate_failed", link=candidate.link, reason="UNEXPECTED", error=str(e))
                    report.record_failure("UNEXPECTED")
                    continue

                report.processed += 1
                report.inserted_post_ids.append(post_id)

                if report.processed < report.items_to_process:
                    await self.sleep(self.settings.inter_item_delay_seconds)

        finally:
            if db is not None:
                db.close()
            engine.dispose()

        report.duration_seconds = round(time.monotonic() - started, 2)
        logger.info(
            "ingestion_completed",
            processed=report.processed,
            attempted=report.attempted,
            failures=report.failures,
            duration_seconds=report.duration_seconds,
        )
        return report

    async def process_candidate(self, blog_repository: BlogRepository, candidate: CandidateItem) -> int:
        """Extract, summarize and persist one candidate. Raises on any failure."""
        logger.info("candidate_processing", link=candidate.link)

        article_text = await self.extractor.extract_text(candidate.link)

        summary = await self.summarizer.summarize(article_text)
        if summary.status == SummaryStatus.FAILED:
            raise SummarizationError(
                f"Summarization failed for {candidate.link}: {summary.error}",
                error_code="SUMMARIZATION_FAILED",
                details={"link": candidate.link, "attempts": summary.attempts},
            )
        if summary.word_count < self.settings.summary_min_words:
            raise SummaryTooShortError(summary.word_count, self.settings.summary_min_words)

        post_id = blog_repository.save_post_with_category(
            category_id=candidate.category_id,
            title=candidate.title,
            description=summary.text,
            source_link=candidate.link,
            source_name=candidate.source_name,
            source_img=candidate.image_url,
            pub_date=_naive_local(candidate.published_at),
            created_by=self.settings.post_created_by,
            status=self.settings.post_status,
        )

        logger.info(
            "news_inserted",
            post_id=post_id,
            title=candidate.title,
            category_id=candidate.category_id,
            word_count=summary.word_count,
        )
        return post_id


def _naive_local(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
