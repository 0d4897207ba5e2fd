"""Raw article fetch over HTTP(S)."""

from __future__ import annotations

import logging

import httpx

from config import settings

logger = logging.getLogger("summarizer.fetch")


class FetchError(Exception):
    """Raised when the article could not be retrieved."""


async def fetch_article(url: str) -> str:
    """Return the body of *url* as text.

    The body is forwarded untouched: no content-type, size or encoding
    checks, and no retries.
    """
    try:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=settings.fetch_timeout,
            headers={"User-Agent": settings.fetch_user_agent},
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        raise FetchError(f"Could not fetch {url}: {exc}") from exc

    logger.debug("Fetched %s (%d chars)", url, len(resp.text))
    return resp.text
