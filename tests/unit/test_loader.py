"""
Unit tests for the content loader.

Tests cover:
- Reading entries from a directory (list and {"entries": [...]} files)
- File-name ordering
- Malformed entries in lenient and strict mode
- Unreadable files
- Bundled content
"""

import json

import pytest

from accessguide.config import Settings
from accessguide.content.loader import ContentLoadError, load_entries, load_store
from accessguide.content.store import DuplicateEntryError


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


# =============================================================================
# Directory Loading
# =============================================================================


class TestLoadEntries:
    """Tests for load_entries() against a temporary directory."""

    def test_loads_list_file(self, tmp_path, entry_dict_factory):
        write_json(tmp_path / "a.json", [entry_dict_factory("2.1-F-1"), entry_dict_factory("2.2-F-1")])

        entries = load_entries(tmp_path)

        assert [entry.question_id for entry in entries] == ["2.1-F-1", "2.2-F-1"]

    def test_loads_entries_object(self, tmp_path, entry_dict_factory):
        write_json(tmp_path / "a.json", {"entries": [entry_dict_factory("4.1-F-1")]})

        entries = load_entries(tmp_path)

        assert len(entries) == 1
        assert entries[0].question_id == "4.1-F-1"

    def test_files_read_in_name_order(self, tmp_path, entry_dict_factory):
        write_json(tmp_path / "b.json", [entry_dict_factory("B-1")])
        write_json(tmp_path / "a.json", [entry_dict_factory("A-1")])

        entries = load_entries(tmp_path)

        assert [entry.question_id for entry in entries] == ["A-1", "B-1"]

    def test_non_json_files_ignored(self, tmp_path, entry_dict_factory):
        write_json(tmp_path / "a.json", [entry_dict_factory("A-1")])
        (tmp_path / "notes.txt").write_text("not content")

        assert len(load_entries(tmp_path)) == 1

    def test_missing_directory_returns_empty(self, tmp_path):
        assert load_entries(tmp_path / "does-not-exist") == []

    def test_empty_directory_returns_empty(self, tmp_path):
        assert load_entries(tmp_path) == []

    def test_snake_case_fields_parsed(self, tmp_path, parking_entry_dict):
        write_json(tmp_path / "a.json", [parking_entry_dict])

        entry = load_entries(tmp_path)[0]

        assert entry.keywords == ("parking", "car park", "ACROD")
        assert entry.related_questions[1].question_id == "1.1-F-8"
        assert entry.examples[0].audience == "restaurant-cafe"


# =============================================================================
# Malformed Content
# =============================================================================


class TestMalformedContent:
    """Tests for invalid entries and files."""

    def test_invalid_entry_skipped_by_default(self, tmp_path, entry_dict_factory):
        broken = entry_dict_factory("B-1")
        del broken["title"]
        write_json(tmp_path / "a.json", [entry_dict_factory("A-1"), broken, "not an object"])

        entries = load_entries(tmp_path)

        assert [entry.question_id for entry in entries] == ["A-1"]

    def test_invalid_entry_raises_in_strict_mode(self, tmp_path, entry_dict_factory):
        broken = entry_dict_factory("B-1")
        del broken["why_it_matters"]
        write_json(tmp_path / "a.json", [broken])

        with pytest.raises(ContentLoadError):
            load_entries(tmp_path, strict=True)

    def test_unreadable_json_raises(self, tmp_path):
        (tmp_path / "a.json").write_text("{ not json", encoding="utf-8")

        with pytest.raises(ContentLoadError):
            load_entries(tmp_path)

    def test_wrong_shape_raises(self, tmp_path):
        write_json(tmp_path / "a.json", {"question_id": "A-1"})

        with pytest.raises(ContentLoadError):
            load_entries(tmp_path)


# =============================================================================
# Store Loading
# =============================================================================


class TestLoadStore:
    """Tests for load_store() and the bundled content."""

    def test_load_store_uses_settings(self, tmp_path, entry_dict_factory):
        write_json(tmp_path / "a.json", [entry_dict_factory("A-1"), entry_dict_factory("A-2")])

        store = load_store(Settings(content_dir=tmp_path))

        assert len(store) == 2
        assert store.exists("A-2")

    def test_duplicate_across_files_rejected(self, tmp_path, entry_dict_factory):
        write_json(tmp_path / "a.json", [entry_dict_factory("A-1")])
        write_json(tmp_path / "b.json", [entry_dict_factory("A-1")])

        with pytest.raises(DuplicateEntryError):
            load_store(Settings(content_dir=tmp_path))

    def test_bundled_content_loads(self):
        store = load_store(Settings(content_dir=None, strict_content=True))

        assert len(store) > 0
        assert store.exists("2.1-F-1")
        assert store.get_by_id("3.2-D-13").question_id == "3.2-D-8"
