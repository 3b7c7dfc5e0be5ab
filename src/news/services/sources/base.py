"""
Base types for feed sources
Normalized shapes shared by the aggregator, the filter and the ingestion service
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class FeedSource:
    """A configured RSS/Atom feed and the category its items belong to"""
    url: str
    category_id: Optional[int] = None
    active: bool = True


@dataclass(frozen=True)
class CandidateItem:
    """Standardized news item produced from a feed entry, not yet accepted or rejected"""
    title: str
    link: str
    source_name: str
    category_id: Optional[int] = None
    # None means the entry carried a date we could not parse
    published_at: Optional[datetime] = None
    image_url: str = ""


class NewsSourceAdapter(ABC):
    """Base adapter for feed sources"""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def fetch_items(self, source: FeedSource) -> List[CandidateItem]:
        """Fetch one source and return its entries as candidates"""
        pass
