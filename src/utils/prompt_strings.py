class PromptStrings:
    NEWS_SUMMARY = """Summarize the following news article **in exactly 60 words** (minimum 55, maximum 65).

- Ensure the summary covers **who, what, where, when, and why**.
- **Do not omit key details** - expand on critical aspects.
- **No promotional text, opinions, or extra commentary**.
- **Write in a neutral, factual tone**.
- **No calls to action** (e.g., "subscribe for more", "read more on our website").
- **Rephrase rather than shorten** if necessary.

**Article:**

{article}"""

    NEWS_SUMMARY_RETRY = """I need a PRECISE summary of exactly {min_words}-65 words for this news article. Your previous summary was too short.

Please provide a more comprehensive summary that:
- Captures the essential information (who, what, where, when, why)
- Maintains factual accuracy and balanced tone
- Uses complete sentences with proper context
- MUST be between {min_words}-65 words - this is critical

**Article:**

{article}"""

    @classmethod
    def summary_prompt(cls, article: str, attempt: int, min_words: int = 50) -> str:
        if attempt == 0:
            return cls.NEWS_SUMMARY.format(article=article)
        return cls.NEWS_SUMMARY_RETRY.format(article=article, min_words=min_words)
