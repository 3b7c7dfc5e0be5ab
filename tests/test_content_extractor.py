import pytest
import httpx
from unittest.mock import patch, MagicMock, AsyncMock

from src.core.exceptions import ExtractionError
from src.news.services.content_extractor import ContentExtractorClient


LINK = "https://news.example.com/story-1"


class TestContentExtractorClient:
    @pytest.fixture(autouse=True)
    def setup_client(self, settings):
        self.client = ContentExtractorClient(settings)

    def _response(self, payload):
        response = MagicMock()
        response.json = MagicMock(return_value=payload)
        response.raise_for_status = MagicMock()
        return response

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_returns_first_object_text(self, mock_client):
        get = AsyncMock(return_value=self._response({"objects": [{"text": "Full article"}, {"text": "Other"}]}))
        mock_client.return_value.__aenter__.return_value.get = get

        text = await self.client.extract_text(LINK)

        assert text == "Full article"
        get.assert_awaited_once_with(
            "https://api.diffbot.com/v3/article",
            params={"url": LINK, "token": "test-diffbot-token"},
        )

    @pytest.mark.parametrize("payload", [{"objects": []}, {}, {"objects": [{"title": "no text"}]}, {"objects": [{"text": "  "}]}])
    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_no_usable_text_raises(self, mock_client, payload):
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(return_value=self._response(payload))

        with pytest.raises(ExtractionError):
            await self.client.extract_text(LINK)

    @patch('httpx.AsyncClient')
    @pytest.mark.asyncio
    async def test_timeout_is_not_retried(self, mock_client):
        get = AsyncMock(side_effect=httpx.TimeoutException("Request timeout"))
        mock_client.return_value.__aenter__.return_value.get = get

        with pytest.raises(ExtractionError) as exc_info:
            await self.client.extract_text(LINK)

        assert "timed out" in exc_info.value.message
        assert get.await_count == 1
