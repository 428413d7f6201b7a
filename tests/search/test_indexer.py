"""Tests for per-event search index construction."""

from festsearch.core.models import Contributor
from festsearch.search.indexing import (
    FIELD_WEIGHTS,
    FieldWeights,
    SearchField,
    build_index,
)


class TestSearchField:
    """Test field extraction and weights."""

    def test_weights(self):
        assert FIELD_WEIGHTS[SearchField.NAME] == 5
        assert FIELD_WEIGHTS[SearchField.CONTRIBUTORS] == 4
        assert FIELD_WEIGHTS[SearchField.CATEGORY] == 2
        assert FIELD_WEIGHTS[SearchField.VENUE] == 2
        assert FIELD_WEIGHTS[SearchField.EVENT_TYPE] == 2

    def test_unknown_field_defaults_to_one(self):
        weights = FieldWeights()
        del weights.weights[SearchField.VENUE]

        assert weights.get_weight(SearchField.VENUE) == 1

    def test_weight_overrides(self):
        weights = FieldWeights({SearchField.NAME: 10})

        assert weights.get_weight(SearchField.NAME) == 10
        assert weights.get_weight(SearchField.CATEGORY) == 2

    def test_extract(self, sample_events):
        event = sample_events[3]

        assert SearchField.NAME.extract(event) == event.name
        assert SearchField.VENUE.extract(event) == "Hilton Salon D"
        assert SearchField.CONTRIBUTORS.extract(event) == "Grace Hopper Alan Turing"
        assert SearchField.EVENT_TYPE.extract(sample_events[0]) == ""


class TestBuildIndex:
    """Test SearchIndex construction."""

    def test_tokens_are_canonical_sets_per_field(self, sample_events):
        index = build_index(sample_events[3])

        assert index.tokens_by_field[SearchField.NAME] == {
            "agent",
            "tooling",
            "for",
            "developer",
            "engineers",
        }
        assert index.tokens_by_field[SearchField.CATEGORY] == {"panel"}
        assert index.tokens_by_field[SearchField.VENUE] == {"hilton", "salon", "d"}
        assert index.tokens_by_field[SearchField.CONTRIBUTORS] == {
            "grace",
            "hopper",
            "alan",
            "turing",
        }

    def test_duplicates_within_field_collapse(self, event_factory):
        index = build_index(event_factory("a", name="AI, LLM and GenAI"))

        assert index.tokens_by_field[SearchField.NAME] == {"ai", "and"}

    def test_blobs(self, sample_events):
        index = build_index(sample_events[1])

        assert index.raw_blob == (
            "building developer tools with llms workshop hilton salon d "
            "session ada lovelace"
        )
        assert index.canonical_blob == (
            "building developer tooling with llms workshop hilton salon d "
            "session ada lovelace"
        )

    def test_empty_fields_do_not_leave_gaps(self, sample_events):
        index = build_index(sample_events[0])

        assert index.raw_blob == "ai and the future panel"
        assert index.tokens_by_field[SearchField.VENUE] == frozenset()
        assert index.tokens_by_field[SearchField.CONTRIBUTORS] == frozenset()

    def test_contributors_without_names(self, event_factory):
        event = event_factory(
            "a", contributors=(Contributor(type="speaker"), Contributor(name="Dev Rel"))
        )

        index = build_index(event)

        assert index.tokens_by_field[SearchField.CONTRIBUTORS] == {"developer", "rel"}

    def test_rebuild_is_identical(self, sample_events):
        for event in sample_events:
            first = build_index(event)
            second = build_index(event)

            assert dict(first.tokens_by_field) == dict(second.tokens_by_field)
            assert first.raw_blob == second.raw_blob
            assert first.canonical_blob == second.canonical_blob

    def test_fields_containing(self, sample_events):
        index = build_index(sample_events[3])

        assert index.fields_containing("panel") == [SearchField.CATEGORY, SearchField.EVENT_TYPE]
        assert index.fields_containing("missing") == []
