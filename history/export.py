"""Plain-text export of a saved summary."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from history.models import SavedSummary

logger = logging.getLogger("summarizer.history.export")

EXPORT_SUFFIX = "_summary.txt"


def format_timestamp(timestamp_ms: int) -> str:
    """Local date-time in the ``M/D/YYYY, h:mm:ss AM`` shape."""
    dt = datetime.fromtimestamp(timestamp_ms / 1000)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def render_export(saved: SavedSummary) -> str:
    return (
        f"Title: {saved.title}\n"
        f"URL: {saved.url}\n"
        f"Type: {saved.type.label}\n"
        f"Date: {format_timestamp(saved.timestamp)}\n"
        f"\n"
        f"{saved.summary}"
    )


def export_filename(saved: SavedSummary) -> str:
    return re.sub(r"[^a-z0-9]", "_", saved.title, flags=re.IGNORECASE).lower() + EXPORT_SUFFIX


def export_summary(saved: SavedSummary, directory: str | Path = ".") -> Path:
    """Write the rendered export into *directory* and return the file path."""
    target = Path(directory) / export_filename(saved)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_export(saved), encoding="utf-8")
    logger.info("Exported summary %s to %s", saved.id, target)
    return target
