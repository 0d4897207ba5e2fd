"""Summary session — the client side of one user's summarize/save workflow.

Holds the current URL, style, result and error, gates submission through
an explicit state machine, and owns the saved-summary store.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import httpx

from config import settings
from history.backends import JsonFileStore
from history.export import export_summary
from history.models import SavedSummary
from history.store import SummaryStore
from prompts.summary_prompts import SummaryStyle
from schemas.response import GENERIC_FAILURE

logger = logging.getLogger("summarizer.client")

SAVED_NOTICE = "Summary saved successfully!"


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


_TRANSITIONS: dict[SubmissionState, frozenset[SubmissionState]] = {
    SubmissionState.IDLE: frozenset({SubmissionState.SUBMITTING}),
    SubmissionState.SUBMITTING: frozenset({SubmissionState.SUCCEEDED, SubmissionState.FAILED}),
    SubmissionState.SUCCEEDED: frozenset({SubmissionState.SUBMITTING}),
    SubmissionState.FAILED: frozenset({SubmissionState.SUBMITTING}),
}


class SubmissionInProgress(Exception):
    """Raised when a submit is attempted while another is in flight."""


class SummarySession:
    def __init__(self, http: httpx.AsyncClient, store: SummaryStore) -> None:
        self._http = http
        self.store = store
        self.state = SubmissionState.IDLE
        self.url = ""
        self.style = SummaryStyle.CONCISE
        self.summary = ""
        self.error = ""
        self.notice = ""

    def _move(self, target: SubmissionState) -> None:
        if target not in _TRANSITIONS[self.state]:
            if self.state is SubmissionState.SUBMITTING:
                raise SubmissionInProgress("A summary request is already in flight.")
            raise RuntimeError(f"Illegal transition {self.state.value} -> {target.value}")
        self.state = target

    @property
    def can_submit(self) -> bool:
        return SubmissionState.SUBMITTING in _TRANSITIONS[self.state]

    async def submit(self, url: str, style: str | SummaryStyle | None = SummaryStyle.CONCISE) -> str:
        """POST the request and record the outcome; returns the summary ("" on failure).

        Any exit other than success (error status, bad body, transport error,
        cancellation) leaves the session in FAILED with the generic message.
        """
        self._move(SubmissionState.SUBMITTING)
        self.url = url
        self.style = SummaryStyle.resolve(style)
        self.summary = ""
        self.error = ""

        try:
            resp = await self._http.post(
                "/api/summarize",
                json={"url": url, "summaryType": self.style.value},
            )
            data = resp.json()
            if not isinstance(data, dict):
                raise ValueError(f"Unexpected response body: {data!r:.100}")
            if resp.is_error:
                self.error = data.get("error") or GENERIC_FAILURE
                self._move(SubmissionState.FAILED)
                return ""
            self.summary = str(data.get("summary") or "")
            self._move(SubmissionState.SUCCEEDED)
            return self.summary
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Summarize request failed: %s", exc)
            return ""
        finally:
            if self.state is SubmissionState.SUBMITTING:
                self.summary = ""
                self.error = GENERIC_FAILURE
                self._move(SubmissionState.FAILED)

    def save(self) -> SavedSummary | None:
        """Copy the current result into the store; no-op without a summary."""
        saved = self.store.add(self.url, self.style, self.summary)
        if saved is not None:
            self.notice = SAVED_NOTICE
        return saved

    def delete(self, summary_id: str) -> None:
        self.store.delete(summary_id)

    def export(self, saved: SavedSummary, directory: str | Path = ".") -> Path:
        return export_summary(saved, directory)

    def toggle_history(self) -> bool:
        return self.store.toggle_history()


def open_session(
    base_url: str | None = None,
    history_path: str | Path | None = None,
) -> SummarySession:
    """Build a session against the configured API with file-backed history."""
    http = httpx.AsyncClient(base_url=base_url or settings.api_base_url, timeout=None)
    store = SummaryStore(JsonFileStore(history_path or settings.history_path))
    return SummarySession(http, store)
