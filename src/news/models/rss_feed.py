from sqlalchemy import Column, Integer, String

from ...core.database import Base


class RSSFeed(Base):
    """Configured feed source. Managed outside the pipeline; only status=1 rows are read."""
    __tablename__ = "rss_feeds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    rss_url = Column(String(1000), nullable=False)
    category_id = Column(Integer)
    status = Column(Integer, nullable=False, default=1)

    def __repr__(self):
        return f"<RSSFeed(id={self.id}, url='{self.rss_url}', category={self.category_id})>"
