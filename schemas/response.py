"""Response schemas for the summarizer API."""

from __future__ import annotations

from pydantic import BaseModel, Field

GENERIC_FAILURE = "Failed to summarize article"


class SummarizeResponse(BaseModel):
    summary: str = Field(description="Model output; may be empty.")


class ErrorResponse(BaseModel):
    error: str


class StyleOption(BaseModel):
    id: str
    label: str
    description: str
