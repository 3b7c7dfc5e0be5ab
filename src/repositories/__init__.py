from .blog_repository import BlogRepository
from .feed_source_repository import FeedSourceRepository

__all__ = ["BlogRepository", "FeedSourceRepository"]
