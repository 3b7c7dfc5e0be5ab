import pytest
from datetime import datetime
from unittest.mock import MagicMock, AsyncMock

from src.news.services.ingestion_service import IngestionReport


@pytest.fixture
def mock_ingestion_service():
    service = MagicMock()
    service.run = AsyncMock(return_value=IngestionReport(started_at=datetime.now(), processed=2))
    return service


@pytest.fixture
async def async_client(settings, mock_ingestion_service):
    from httpx import AsyncClient, ASGITransport
    from src.main import app
    from src.config import get_settings
    from src.api.dependencies import get_ingestion_service

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_ingestion_service] = lambda: mock_ingestion_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_process_news_requires_key(async_client, mock_ingestion_service):
    response = await async_client.get("/api/process-news", params={"key": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    mock_ingestion_service.run.assert_not_awaited()


@pytest.mark.asyncio
async def test_process_news_missing_key(async_client):
    response = await async_client.get("/api/process-news")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_process_news_reports_count(async_client, mock_ingestion_service):
    response = await async_client.get("/api/process-news", params={"key": "test-secret"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Successfully processed 2 news items.",
        "processed": 2,
    }
    mock_ingestion_service.run.assert_awaited_once()


@pytest.mark.asyncio
async def test_process_news_run_failure(async_client, mock_ingestion_service):
    mock_ingestion_service.run.side_effect = RuntimeError("cannot open pool")

    response = await async_client.get("/api/process-news", params={"key": "test-secret"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "cannot open pool"}


@pytest.mark.asyncio
async def test_unset_secret_rejects_everything(async_client, settings):
    settings.cron_secret_key = None

    response = await async_client.get("/api/process-news", params={"key": ""})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_test_trigger_plain_text(async_client):
    response = await async_client.get("/test-news-processing")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "Processed 2 items" in response.text


@pytest.mark.asyncio
async def test_test_trigger_failure(async_client, mock_ingestion_service):
    mock_ingestion_service.run.side_effect = RuntimeError("db down")

    response = await async_client.get("/test-news-processing")

    assert response.status_code == 500
    assert response.text == "Error: db down"


@pytest.mark.asyncio
async def test_health(async_client):
    response = await async_client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
