"""Unit tests for related-question resolution."""

from accessguide.content.related import resolve_related


class TestResolveRelated:
    """Tests for resolve_related()."""

    def test_resolves_in_declared_order(self, store):
        entry = store.get_by_id("2.1-F-1")

        resolved = resolve_related(store, entry)

        assert [item.ref.question_id for item in resolved] == ["2.2-F-1", "1.1-F-8"]

    def test_existing_target_available(self, store):
        entry = store.get_by_id("2.1-F-1")

        first = resolve_related(store, entry)[0]

        assert first.available is True
        assert first.entry.title == "Accessible Entrance"

    def test_dangling_reference_unavailable(self, store):
        entry = store.get_by_id("2.1-F-1")

        dangling = resolve_related(store, entry)[1]

        assert dangling.available is False
        assert dangling.entry is None
        assert dangling.ref.display_text == "Transport info?"

    def test_reference_to_covered_id_resolves(self, store, entry_factory):
        entry = entry_factory(
            "Z-1", related_questions=[{"question_id": "3.2-D-9", "question_text": "Backrest?"}]
        )

        resolved = resolve_related(store, entry)

        assert resolved[0].entry.question_id == "3.2-D-8"
        assert resolved[0].ref.display_text == "Backrest?"

    def test_no_references(self, store):
        assert resolve_related(store, store.get_by_id("4.1-F-1")) == []
