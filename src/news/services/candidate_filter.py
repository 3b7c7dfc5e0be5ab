"""
Candidate filtering
Drops items that were already published as posts or that are not from today.
Runs before any paid external call.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, List, Optional, Protocol

import structlog

from .sources.base import CandidateItem

logger = structlog.get_logger(__name__)


class ProcessedLinkLookup(Protocol):
    def exists_by_source_link(self, source_link: str) -> bool: ...


def local_date(value: Optional[datetime]) -> Optional[date]:
    """Calendar day of a timestamp in the process's local timezone"""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def is_published_today(published_at: Optional[datetime], now: datetime) -> bool:
    published_day = local_date(published_at)
    return published_day is not None and published_day == local_date(now)


@dataclass
class FilterResult:
    accepted: List[CandidateItem] = field(default_factory=list)
    already_processed: int = 0
    not_today: int = 0


class CandidateFilter:
    def __init__(self, lookup: ProcessedLinkLookup, clock: Callable[[], datetime] = datetime.now):
        self.lookup = lookup
        self.clock = clock

    def filter(self, candidates: List[CandidateItem]) -> FilterResult:
        """Apply both checks, preserving the original order of survivors"""
        result = FilterResult()
        now = self.clock()

        for candidate in candidates:
            if self.lookup.exists_by_source_link(candidate.link):
                logger.info("candidate_skipped", reason="already_processed", link=candidate.link)
                result.already_processed += 1
                continue

            if not is_published_today(candidate.published_at, now):
                logger.info(
                    "candidate_skipped",
                    reason="not_today",
                    link=candidate.link,
                    published_at=candidate.published_at.isoformat() if candidate.published_at else None,
                )
                result.not_today += 1
                continue

            result.accepted.append(candidate)

        return result
