"""Summary request handler — fetch, prompt, complete."""

from __future__ import annotations

import logging
import time

from config import settings
from prompts.summary_prompts import SYSTEM_PROMPT, SummaryStyle, build_prompt
from schemas.response import GENERIC_FAILURE
from services.fetch_service import fetch_article
from services.llm_service import chat_completion

logger = logging.getLogger("summarizer.engine")


class SummarizeError(Exception):
    """Single failure signal for every fetch / prompt / model error."""

    def __init__(self, message: str = GENERIC_FAILURE) -> None:
        super().__init__(message)


async def summarize_article(url: str, style: str | SummaryStyle | None) -> str:
    """Return a *style* summary of the article at *url*.

    The result may be an empty string when the model produced no text.
    Any underlying failure is re-raised as :class:`SummarizeError`.
    """
    t0 = time.perf_counter()
    resolved = SummaryStyle.resolve(style)
    try:
        html = await fetch_article(url)
        summary = await chat_completion(
            SYSTEM_PROMPT,
            build_prompt(resolved, html),
            temperature=settings.summary_temperature,
            max_tokens=settings.summary_max_tokens,
        )
    except Exception as exc:
        raise SummarizeError() from exc

    logger.info(
        "Summarized %s style=%s chars=%d in %.2fs",
        url,
        resolved.value,
        len(summary),
        time.perf_counter() - t0,
    )
    return summary
