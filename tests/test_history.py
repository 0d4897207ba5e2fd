"""Unit tests for the saved-summary store, its backends and export."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from history.backends import JsonFileStore, MemoryStore
from history.export import export_filename, export_summary, format_timestamp, render_export
from history.models import SavedSummary, derive_title
from history.store import STORAGE_KEY, SummaryStore
from prompts.summary_prompts import SummaryStyle


# ── Helpers ────────────────────────────────────────────────────────────

def _store(**initial: str) -> SummaryStore:
    return SummaryStore(MemoryStore(initial))


def _saved(title: str = "my-article", summary: str = "Body text.") -> SavedSummary:
    return SavedSummary(
        id="1700000000000",
        url=f"https://example.com/posts/{title}",
        summary=summary,
        type=SummaryStyle.BULLET,
        timestamp=1_700_000_000_000,
        title=title,
    )


# ── Title derivation ───────────────────────────────────────────────────

class TestDeriveTitle:
    def test_last_path_segment(self):
        assert derive_title("https://example.com/posts/my-article") == "my-article"

    def test_trailing_slash_is_untitled(self):
        assert derive_title("https://example.com/") == "Untitled Summary"

    def test_query_string_kept(self):
        assert derive_title("https://example.com/a?id=3") == "a?id=3"


# ── Store ──────────────────────────────────────────────────────────────

class TestSummaryStore:
    def test_starts_empty_without_stored_value(self):
        assert _store().items == ()

    def test_newest_first(self):
        store = _store()
        a = store.add("https://a.test/a", "concise", "A", now=1)
        b = store.add("https://a.test/b", "bullet", "B", now=2)
        assert store.items == (b, a)

    def test_add_builds_record(self):
        saved = _store().add("https://example.com/posts/my-article", "eli5", "Simple.", now=42)
        assert saved.id == "42"
        assert saved.timestamp == 42
        assert saved.title == "my-article"
        assert saved.type is SummaryStyle.ELI5

    def test_add_unknown_style_stored_as_concise(self):
        saved = _store().add("https://a.test/x", "mystery", "text", now=1)
        assert saved.type is SummaryStyle.CONCISE

    def test_add_empty_summary_is_noop(self):
        backend = MemoryStore()
        store = SummaryStore(backend)
        assert store.add("https://a.test/x", "concise", "") is None
        assert len(store) == 0
        assert backend.get(STORAGE_KEY) is None

    def test_add_then_delete_restores_sequence(self):
        store = _store()
        store.add("https://a.test/1", "concise", "one", now=1)
        store.add("https://a.test/2", "facts", "two", now=2)
        before = store.items
        added = store.add("https://a.test/3", "bullet", "three", now=3)
        store.delete(added.id)
        assert store.items == before

    def test_same_millisecond_saves_get_distinct_ids(self, monkeypatch):
        monkeypatch.setattr("history.store._now_ms", lambda: 1000)
        store = _store()
        a = store.add("https://a.test/a", "concise", "A")
        b = store.add("https://a.test/b", "bullet", "B")
        assert a.id == "1000"
        assert b.id == "1001"
        store.delete(b.id)
        assert store.items == (a,)

    def test_clock_going_backwards_keeps_ids_increasing(self):
        store = _store()
        first = store.add("https://a.test/a", "concise", "A", now=500)
        second = store.add("https://a.test/b", "concise", "B", now=100)
        assert int(second.id) > int(first.id)
        assert store.items == (second, first)

    def test_delete_missing_id_is_silent(self):
        store = _store()
        store.add("https://a.test/1", "concise", "one", now=1)
        store.delete("does-not-exist")
        assert len(store) == 1

    def test_records_are_immutable(self):
        saved = _store().add("https://a.test/1", "concise", "one", now=1)
        with pytest.raises(ValidationError):
            saved.summary = "changed"

    def test_every_mutation_persists_whole_sequence(self):
        backend = MemoryStore()
        store = SummaryStore(backend)
        store.add("https://a.test/1", "concise", "one", now=1)
        store.add("https://a.test/2", "bullet", "two", now=2)
        stored = json.loads(backend.get(STORAGE_KEY))
        assert [e["id"] for e in stored] == ["2", "1"]
        assert stored[0]["type"] == "bullet"

        store.delete("2")
        assert [e["id"] for e in json.loads(backend.get(STORAGE_KEY))] == ["1"]

    def test_reload_from_backend(self):
        backend = MemoryStore()
        first = SummaryStore(backend)
        first.add("https://a.test/1", "detailed", "one", now=1)
        second = SummaryStore(backend)
        assert second.items == first.items

    def test_malformed_storage_raises(self):
        with pytest.raises(json.JSONDecodeError):
            _store(savedSummaries="{not json")

    def test_toggle_history(self):
        store = _store()
        assert store.history_visible is False
        assert store.toggle_history() is True
        assert store.toggle_history() is False


class TestJsonFileStore:
    def test_missing_file_reads_none(self, tmp_path):
        assert JsonFileStore(tmp_path / "h.json").get(STORAGE_KEY) is None

    def test_survives_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "h.json"
        store = SummaryStore(JsonFileStore(path))
        saved = store.add("https://a.test/x", "proscons", "Pros and cons.", now=5)
        reopened = SummaryStore(JsonFileStore(path))
        assert reopened.items == (saved,)

    def test_last_writer_wins(self, tmp_path):
        path = tmp_path / "h.json"
        one = SummaryStore(JsonFileStore(path))
        two = SummaryStore(JsonFileStore(path))
        one.add("https://a.test/1", "concise", "one", now=1)
        two.add("https://a.test/2", "concise", "two", now=2)
        assert [s.id for s in SummaryStore(JsonFileStore(path)).items] == ["2"]


# ── Export ─────────────────────────────────────────────────────────────

class TestExport:
    def test_layout(self):
        saved = _saved()
        lines = render_export(saved).split("\n")
        assert lines[0] == "Title: my-article"
        assert lines[1] == "URL: https://example.com/posts/my-article"
        assert lines[2] == "Type: Bullet Points"
        assert lines[3] == f"Date: {format_timestamp(saved.timestamp)}"
        assert lines[4] == ""
        assert lines[5] == "Body text."

    def test_render_is_idempotent(self):
        saved = _saved(summary="• one\n• two")
        assert render_export(saved) == render_export(saved)

    def test_filename_sanitized_and_lowercased(self):
        assert export_filename(_saved(title="My Article?v=2")) == "my_article_v_2_summary.txt"
        assert export_filename(_saved(title="Untitled Summary")) == "untitled_summary_summary.txt"

    def test_export_writes_file(self, tmp_path):
        saved = _saved()
        path = export_summary(saved, tmp_path)
        assert path == tmp_path / "my_article_summary.txt"
        assert path.read_text(encoding="utf-8") == render_export(saved)

    def test_timestamp_format(self):
        stamp = format_timestamp(1_700_000_000_000)
        date_part, time_part = stamp.split(", ")
        assert date_part.count("/") == 2
        assert time_part.endswith(("AM", "PM"))
