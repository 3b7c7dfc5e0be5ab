from typing import List

from sqlalchemy.orm import Session

from src.news.models.rss_feed import RSSFeed
from src.news.services.sources.base import FeedSource


class FeedSourceRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_active_sources(self) -> List[FeedSource]:
        rows = self.db.query(RSSFeed).filter(RSSFeed.status == 1).order_by(RSSFeed.id).all()
        return [FeedSource(url=row.rss_url, category_id=row.category_id, active=True) for row in rows]
