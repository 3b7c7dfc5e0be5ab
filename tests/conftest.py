import pytest
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock, AsyncMock

from src.config import Settings
from src.news.services.sources.base import CandidateItem


FIXED_NOW = datetime(2026, 10, 17, 9, 30, 0)


def words(count: int, word: str = "word") -> str:
    return " ".join([word] * count)


def chat_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def make_candidate(n: int = 1, **overrides) -> CandidateItem:
    fields = {
        "title": f"Story {n}",
        "link": f"https://news.example.com/story-{n}",
        "source_name": "Example News",
        "category_id": 7,
        "published_at": FIXED_NOW,
        "image_url": f"https://news.example.com/img/{n}.jpg",
    }
    fields.update(overrides)
    return CandidateItem(**fields)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'news.db'}",
        diffbot_api_token="test-diffbot-token",
        openrouter_api_key="test-openrouter-key",
        cron_secret_key="test-secret",
        max_items_per_run=3,
        inter_item_delay_seconds=12,
        summary_min_words=50,
        summary_max_retries=4,
    )


@pytest.fixture
def db_engine(settings):
    from src.core.database import create_db_engine, create_tables

    engine = create_db_engine(settings)
    create_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def test_db(db_engine):
    from src.core.database import create_session_factory

    db = create_session_factory(db_engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def mock_aggregator():
    aggregator = MagicMock()
    aggregator.aggregate = AsyncMock(return_value=[])
    aggregator.failed_sources = []
    return aggregator


@pytest.fixture
def mock_extractor():
    extractor = MagicMock()
    extractor.extract_text = AsyncMock(return_value=words(400, "article"))
    return extractor


@pytest.fixture
def mock_openai_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=chat_response(words(58, "fact")))
    return client


@pytest.fixture
def mock_sleep():
    return AsyncMock()
