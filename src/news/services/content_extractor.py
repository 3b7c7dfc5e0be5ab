"""
Article text extraction through the Diffbot Article API.
One request per link; any failure drops the candidate.
"""

import httpx
import structlog

from ...config import Settings
from ...core.exceptions import ExtractionError

logger = structlog.get_logger(__name__)


class ContentExtractorClient:
    def __init__(self, settings: Settings):
        self.api_url = settings.diffbot_api_url
        self.api_token = settings.diffbot_api_token
        self.timeout = settings.http_timeout_seconds

    async def extract_text(self, link: str) -> str:
        params = {"url": link, "token": self.api_token}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.api_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException:
            raise ExtractionError(link, "request timed out")
        except httpx.HTTPStatusError as e:
            raise ExtractionError(link, f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            raise ExtractionError(link, str(e))

        objects = payload.get("objects") if isinstance(payload, dict) else None
        article = objects[0] if objects else None
        text = article.get("text") if isinstance(article, dict) else None

        if not text or not text.strip():
            raise ExtractionError(link, "no article text returned")

        logger.info("article_extracted", link=link, characters=len(text))
        return text
