"""
Unit tests for audience-aware example selection and tip ordering.
"""

from accessguide.content.relevance import ordered_tips, select_examples
from accessguide.delivery.session import SessionController


def audiences(examples):
    return [example.audience for example in examples]


# =============================================================================
# select_examples
# =============================================================================


class TestSelectExamples:
    """Tests for select_examples()."""

    def test_matching_tag_plus_general(self, store):
        entry = store.get_by_id("2.1-F-1")

        selected = select_examples(entry, ["retail"])

        assert audiences(selected) == ["retail", "general"]

    def test_no_tags_returns_all(self, store):
        entry = store.get_by_id("2.1-F-1")

        assert audiences(select_examples(entry, [])) == ["restaurant-cafe", "retail", "general"]

    def test_blank_tags_treated_as_none(self, store):
        entry = store.get_by_id("2.1-F-1")
        assert len(select_examples(entry, ["", "  "])) == 3

    def test_tags_case_insensitive(self, store):
        entry = store.get_by_id("2.1-F-1")
        assert audiences(select_examples(entry, ["RETAIL"])) == ["retail", "general"]

    def test_unmatched_tag_keeps_general(self, store):
        entry = store.get_by_id("2.1-F-1")
        assert audiences(select_examples(entry, ["tour-operator"])) == ["general"]

    def test_falls_back_to_all_when_nothing_matches(self, entry_factory):
        entry = entry_factory(
            "2.2-F-1",
            examples=[
                {"audience": "restaurant-cafe", "scenario": "s1", "solution": "x"},
                {"audience": "retail", "scenario": "s2", "solution": "y"},
                {"audience": "accommodation", "scenario": "s3", "solution": "z"},
            ],
        )

        selected = select_examples(entry, ["tour-operator"])

        assert audiences(selected) == ["restaurant-cafe", "retail", "accommodation"]

    def test_multiple_tags(self, store):
        entry = store.get_by_id("2.1-F-1")
        selected = select_examples(entry, {"retail", "restaurant-cafe"})
        assert audiences(selected) == ["restaurant-cafe", "retail", "general"]

    def test_entry_without_examples(self, store):
        entry = store.get_by_id("4.1-F-1")
        assert select_examples(entry, ["retail"]) == []

    def test_missing_audience_defaults_to_general(self, entry_factory):
        entry = entry_factory("A-1", examples=[{"scenario": "s", "solution": "x"}])
        assert audiences(select_examples(entry, ["retail"])) == ["general"]


# =============================================================================
# ordered_tips
# =============================================================================


class TestOrderedTips:
    """Tests for ordered_tips()."""

    def test_sorted_by_priority_unranked_last(self, store):
        entry = store.get_by_id("2.1-F-1")

        tips = ordered_tips(entry)

        assert [tip.text for tip in tips] == ["Keep spaces close", "Make spaces wide", "Light the path"]

    def test_ties_keep_source_order(self, entry_factory):
        entry = entry_factory(
            "A-1",
            tips=[
                {"text": "first unranked"},
                {"text": "ranked", "priority": 1},
                {"text": "second unranked"},
            ],
        )

        assert [tip.text for tip in ordered_tips(entry)] == ["ranked", "first unranked", "second unranked"]

    def test_source_tuple_unchanged(self, store):
        entry = store.get_by_id("2.1-F-1")
        ordered_tips(entry)
        assert entry.tips[0].text == "Light the path"


class TestSelectExamplesSingleTag:
    """A bare string names one audience, not a sequence of characters."""

    def test_string_treated_as_one_tag(self, store):
        entry = store.get_by_id("2.1-F-1")

        assert audiences(select_examples(entry, "retail")) == ["retail", "general"]

    def test_controller_passes_string_through(self, store, timers):
        controller = SessionController(store, timers=timers)
        controller.open_entry("2.1-F-1")

        assert audiences(controller.relevant_examples("retail")) == ["retail", "general"]
