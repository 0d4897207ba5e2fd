"""Saved summary record."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from prompts.summary_prompts import SummaryStyle

UNTITLED = "Untitled Summary"


def derive_title(url: str) -> str:
    """Last ``/``-separated segment of *url*, or the untitled placeholder."""
    return url.split("/")[-1] or UNTITLED


class SavedSummary(BaseModel):
    """One past summarization result. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str
    url: str
    summary: str
    type: SummaryStyle
    timestamp: int  # epoch milliseconds
    title: str
