"""Article Summarizer — AI summaries of web articles in seven styles.

FastAPI application entry-point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from engine.summarizer import SummarizeError, summarize_article
from prompts.summary_prompts import SummaryStyle
from schemas.request import SummarizeRequest
from schemas.response import GENERIC_FAILURE, ErrorResponse, StyleOption, SummarizeResponse

__version__ = "0.1.0"

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("summarizer")


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    logger.info(
        "Article summarizer starting — provider=%s temperature=%s max_tokens=%d",
        settings.llm_provider,
        settings.summary_temperature,
        settings.summary_max_tokens,
    )
    yield
    logger.info("Article summarizer shutting down.")


# ── App ────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Article Summarizer",
    description="Fetches an article and returns an AI-generated summary in the requested style.",
    version=__version__,
    lifespan=lifespan,
)

# Parse allowed_origins (comma-separated string → list)
_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error handling ─────────────────────────────────────────────────────

@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """Malformed bodies get the same fixed 500 as every other failure."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})


# ── Routes ─────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "article-summarizer",
        "version": __version__,
    }


@app.get(
    "/api/styles",
    response_model=list[StyleOption],
    summary="List summary styles",
)
async def styles() -> list[StyleOption]:
    return [
        StyleOption(id=style.value, label=style.label, description=style.description)
        for style in SummaryStyle
    ]


@app.post(
    "/api/summarize",
    response_model=SummarizeResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Summarize an article",
    description="Fetches the page at `url` and asks the model for a `summaryType` summary. "
    "Every failure is reported with the same generic message.",
)
async def summarize(payload: SummarizeRequest):
    try:
        summary = await summarize_article(payload.url, payload.summary_type)
    except SummarizeError:
        logger.exception("Summarization failed for %s", payload.url)
        return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE})
    return SummarizeResponse(summary=summary)


# ── Dev runner ─────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=True,
    )
