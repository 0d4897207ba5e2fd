"""Request schemas for the summarizer API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SummarizeRequest(BaseModel):
    """Payload sent by the browser page or the Python session client."""

    url: str = Field(..., description="Address of the article to summarize.")
    summary_type: str | None = Field(
        default="concise",
        alias="summaryType",
        description="Style tag: concise, bullet, eli5, executive, detailed, proscons, facts. "
        "Unknown values fall back to concise.",
    )

    model_config = {"populate_by_name": True}
