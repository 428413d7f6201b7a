"""Tests for scoring and result ordering."""

from festsearch.search.indexing import FieldWeights, SearchField, build_index
from festsearch.search.ranking import Scorer, order_results, result_sort_key


class TestScorer:
    """Test field-weighted scoring."""

    def test_score_sums_field_weights_and_term_bonus(self, sample_events):
        scored = Scorer().score(build_index(sample_events[3]), ["agent", "hopper"])

        # agent: name 5, hopper: contributors 4, plus 1 per matched term
        assert scored.score == 11
        assert scored.matched_terms == ("agent", "hopper")
        assert scored.matched_fields == ("contributors", "name")

    def test_unmatched_tokens_score_nothing(self, sample_events):
        scored = Scorer().score(build_index(sample_events[0]), ["music"])

        assert scored.score == 0
        assert scored.matched_terms == ()
        assert scored.matched_fields == ()

    def test_custom_weights(self, sample_events):
        scorer = Scorer(FieldWeights({SearchField.NAME: 1}))

        scored = scorer.score(build_index(sample_events[0]), ["ai"])

        assert scored.score == 2


class TestOrdering:
    """Test the shared result order."""

    def test_score_then_start_then_id(self, event_factory):
        late = event_factory("b", start_time="2026-03-14T12:00:00")
        early = event_factory("c", start_time="2026-03-14T09:00:00")
        same_time = event_factory("a", start_time="2026-03-14T09:00:00")
        best = event_factory("z", start_time="2026-03-14T23:00:00")

        items = [(late, 5), (early, 5), (best, 9), (same_time, 5)]

        ordered = order_results(items, lambda item: item)

        assert [event.id for event, _ in ordered] == ["z", "a", "c", "b"]

    def test_missing_start_time_sorts_first(self, event_factory):
        timed = event_factory("a", start_time="2026-03-14T09:00:00")
        untimed = event_factory("b")

        ordered = order_results([(timed, 3), (untimed, 3)], lambda item: item)

        assert [event.id for event, _ in ordered] == ["b", "a"]

    def test_sort_key(self, event_factory):
        event = event_factory("x", start_time="2026-03-14T09:00:00")

        assert result_sort_key(event, 7) == (-7, "2026-03-14T09:00:00", "x")
        assert result_sort_key(event_factory("y"), 0) == (0, "", "y")

    def test_order_is_independent_of_input_order(self, event_factory):
        events = [
            event_factory(str(i), start_time=f"2026-03-14T0{i % 3}:00:00")
            for i in range(6)
        ]
        items = [(event, i % 2) for i, event in enumerate(events)]

        forward = order_results(items, lambda item: item)
        backward = order_results(list(reversed(items)), lambda item: item)

        assert [e.id for e, _ in forward] == [e.id for e, _ in backward]
