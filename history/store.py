"""Client summary store — newest-first history persisted as one JSON array."""

from __future__ import annotations

import json
import logging
import time

from history.backends import KeyValueStore
from history.models import SavedSummary, derive_title
from prompts.summary_prompts import SummaryStyle

logger = logging.getLogger("summarizer.history")

STORAGE_KEY = "savedSummaries"


def _now_ms() -> int:
    return int(time.time() * 1000)


class SummaryStore:
    """Ordered collection of :class:`SavedSummary`, newest first.

    The full sequence is loaded once on construction and written back after
    every mutation. A malformed stored value raises during construction.
    """

    def __init__(self, backend: KeyValueStore) -> None:
        self._backend = backend
        self._items: list[SavedSummary] = self._load()
        self.history_visible = False

    def _load(self) -> list[SavedSummary]:
        raw = self._backend.get(STORAGE_KEY)
        if not raw:
            return []
        return [SavedSummary.model_validate(entry) for entry in json.loads(raw)]

    def _persist(self) -> None:
        payload = json.dumps([item.model_dump(mode="json") for item in self._items], ensure_ascii=False)
        self._backend.set(STORAGE_KEY, payload)

    @property
    def items(self) -> tuple[SavedSummary, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(
        self,
        url: str,
        style: str | SummaryStyle | None,
        summary: str,
        *,
        now: int | None = None,
    ) -> SavedSummary | None:
        """Prepend a new record built from the current result; no-op for an empty summary."""
        if not summary:
            return None
        ts = now if now is not None else _now_ms()
        if self._items:
            # ids are timestamps; keep them unique and increasing
            ts = max(ts, self._items[0].timestamp + 1)
        saved = SavedSummary(
            id=str(ts),
            url=url,
            summary=summary,
            type=SummaryStyle.resolve(style),
            timestamp=ts,
            title=derive_title(url),
        )
        self._items.insert(0, saved)
        self._persist()
        logger.info("Saved summary %s (%s)", saved.id, saved.title)
        return saved

    def delete(self, summary_id: str) -> None:
        remaining = [item for item in self._items if item.id != summary_id]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        self._persist()

    def toggle_history(self) -> bool:
        self.history_visible = not self.history_visible
        return self.history_visible
