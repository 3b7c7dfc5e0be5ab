"""
Article summarization through an OpenAI-compatible chat endpoint (OpenRouter).

A summary shorter than the minimum triggers a quality retry with a stricter
prompt. The loop ends in one of three states:
- ACCEPTED: the text reached the minimum word count
- EXHAUSTED: every retry came back short; the last text is returned
- FAILED: the call itself errored or returned nothing
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import openai
import structlog

from ...config import Settings
from ...utils.prompt_strings import PromptStrings

logger = structlog.get_logger(__name__)


def count_words(text: Optional[str]) -> int:
    return len(text.split()) if text else 0


class SummaryStatus(str, Enum):
    ACCEPTED = "accepted"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


@dataclass
class SummaryResult:
    status: SummaryStatus
    text: Optional[str]
    word_count: int
    attempts: int
    error: Optional[str] = None


class SummarizerService:
    def __init__(self, settings: Settings, client: Optional[openai.AsyncOpenAI] = None):
        self.model = settings.summarization_model
        self.min_words = settings.summary_min_words
        self.max_retries = settings.summary_max_retries
        self.client = client or openai.AsyncOpenAI(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            timeout=settings.http_timeout_seconds,
            max_retries=0,
        )

    async def summarize(self, article_text: str) -> SummaryResult:
        last_text: Optional[str] = None
        word_count = 0
        attempts = 0

        # attempt 0 is the primary prompt, the rest are quality retries
        while attempts <= self.max_retries:
            prompt = PromptStrings.summary_prompt(article_text, attempts, self.min_words)
            attempts += 1

            try:
                text = await self._complete(prompt)
            except openai.OpenAIError as e:
                logger.error("summarization_failed", attempt=attempts, error=str(e))
                return SummaryResult(SummaryStatus.FAILED, None, 0, attempts, error=str(e))

            if not text:
                logger.warning("summarization_empty", attempt=attempts)
                return SummaryResult(SummaryStatus.FAILED, None, 0, attempts, error="empty response")

            last_text = text
            word_count = count_words(text)
            if word_count >= self.min_words:
                logger.info("summary_generated", attempt=attempts, word_count=word_count)
                return SummaryResult(SummaryStatus.ACCEPTED, text, word_count, attempts)

            logger.info("summary_too_short", attempt=attempts, word_count=word_count, min_words=self.min_words)

        return SummaryResult(SummaryStatus.EXHAUSTED, last_text, word_count, attempts)

    async def _complete(self, prompt: str) -> Optional[str]:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.choices:
            return None
        content = response.choices[0].message.content
        return content.strip() if content else None
