from typing import Optional, Dict, Any


class NewsIngestError(Exception):
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class FeedSourceError(NewsIngestError):
    def __init__(self, feed_url: str, reason: str):
        super().__init__(
            message=f"Failed to read feed {feed_url}: {reason}",
            error_code="FEED_SOURCE_ERROR",
            details={"feed_url": feed_url}
        )


class ExtractionError(NewsIngestError):
    def __init__(self, link: str, reason: str):
        super().__init__(
            message=f"No article content for {link}: {reason}",
            error_code="EXTRACTION_FAILED",
            details={"link": link}
        )


class SummarizationError(NewsIngestError):
    pass


class SummaryTooShortError(NewsIngestError):
    def __init__(self, word_count: int, min_words: int):
        super().__init__(
            message=f"Summary has {word_count} words, need at least {min_words}",
            error_code="SUMMARY_TOO_SHORT",
            details={"word_count": word_count, "min_words": min_words}
        )


class PersistenceError(NewsIngestError):
    pass


class UnauthorizedError(NewsIngestError):
    def __init__(self):
        super().__init__(message="Unauthorized", error_code="UNAUTHORIZED")
