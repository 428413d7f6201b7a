"""Tests for query modes and matching."""

import pytest

from festsearch.search.errors import QueryError
from festsearch.search.indexing import build_index
from festsearch.search.query import (
    NO_MATCH,
    PASS_THROUGH,
    QueryMatcher,
    QueryMode,
    evaluate,
    parse_mode,
)


class TestParseMode:
    """Test mode validation."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("any", QueryMode.ANY),
            ("ALL", QueryMode.ALL),
            (" Phrase ", QueryMode.PHRASE),
            (None, QueryMode.ANY),
            ("", QueryMode.ANY),
            (QueryMode.ALL, QueryMode.ALL),
        ],
    )
    def test_valid_modes(self, value, expected):
        assert parse_mode(value) is expected

    def test_invalid_mode(self):
        with pytest.raises(QueryError, match="Use one of: any, all, phrase"):
            parse_mode("fuzzy")


class TestQueryTokens:
    def test_tokens_are_canonical_and_unique(self):
        matcher = QueryMatcher()

        assert matcher.query_tokens("LLM GPT tools ai") == ["ai", "tooling"]


class TestAnyMode:
    """Test any-mode matching."""

    def test_synonym_hit_in_name(self, sample_events):
        result = evaluate(build_index(sample_events[0]), "llm", QueryMode.ANY)

        assert result.matches
        assert result.score == 6
        assert result.matched_terms == ("ai",)
        assert result.matched_fields == ("name",)

    def test_multiple_terms(self, sample_events):
        result = evaluate(build_index(sample_events[1]), "developer tooling", "any")

        assert result.score == 12
        assert result.matched_terms == ("developer", "tooling")

    def test_partial_hit_matches(self, sample_events):
        result = evaluate(build_index(sample_events[0]), "ai cooking", QueryMode.ANY)

        assert result.matches
        assert result.matched_terms == ("ai",)

    def test_no_hit(self, sample_events):
        result = evaluate(build_index(sample_events[2]), "llm", QueryMode.ANY)

        assert result is NO_MATCH
        assert not result.matches

    def test_token_in_several_fields(self, sample_events):
        result = evaluate(build_index(sample_events[3]), "panel", QueryMode.ANY)

        assert result.score == 5
        assert result.matched_fields == ("category", "event_type")

    def test_contributor_field(self, sample_events):
        result = evaluate(build_index(sample_events[3]), "hopper", QueryMode.ANY)

        assert result.score == 5
        assert result.matched_fields == ("contributors",)

    def test_fields_sorted_by_name(self, sample_events):
        result = evaluate(build_index(sample_events[3]), "hilton agent", QueryMode.ANY)

        assert result.score == 9
        assert result.matched_terms == ("hilton", "agent")
        assert result.matched_fields == ("name", "venue")

    def test_repeated_query_tokens_count_once(self, sample_events):
        index = build_index(sample_events[0])

        once = evaluate(index, "ai", QueryMode.ANY)
        repeated = evaluate(index, "AI llm genai ai", QueryMode.ANY)

        assert repeated.score == once.score == 6
        assert repeated.matched_terms == ("ai",)


class TestAllMode:
    """Test all-mode matching."""

    def test_every_term_present(self, sample_events):
        result = evaluate(build_index(sample_events[3]), "developer tooling", "all")

        assert result.matches
        assert result.score == 15

    def test_missing_term_rejects(self, sample_events):
        result = evaluate(build_index(sample_events[1]), "developer agent", "all")

        assert result is NO_MATCH

    def test_synonyms_satisfy_all(self, sample_events):
        result = evaluate(build_index(sample_events[3]), "software workflows", "all")

        assert result.matches
        assert result.matched_terms == ("developer", "tooling")

    def test_all_matches_are_any_matches(self, sample_events):
        queries = [
            "ai developer",
            "developer tooling",
            "hopper panel",
            "rock indie",
            "!!!",
        ]

        for event in sample_events:
            index = build_index(event)
            for query in queries:
                if evaluate(index, query, QueryMode.ALL).matches:
                    assert evaluate(index, query, QueryMode.ANY).matches


class TestPhraseMode:
    """Test phrase matching."""

    def test_raw_substring(self, sample_events):
        result = evaluate(build_index(sample_events[1]), "Developer Tools", "phrase")

        assert result.matches
        assert result.score == 16

    def test_canonical_substring(self, sample_events):
        result = evaluate(build_index(sample_events[1]), "engineering tools", "phrase")

        assert result.matches
        assert result.score == 16

    def test_words_out_of_order_do_not_match(self, sample_events):
        result = evaluate(build_index(sample_events[1]), "tools developer", "phrase")

        assert result is NO_MATCH

    def test_phrase_spanning_fields(self, sample_events):
        result = evaluate(build_index(sample_events[0]), "future panel", "phrase")

        assert result.matches


class TestBlankQuery:
    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_blank_query_passes_through(self, sample_events, query):
        matcher = QueryMatcher()

        for mode in QueryMode:
            assert matcher.analyze(sample_events[2], query, mode) is PASS_THROUGH

    def test_pass_through_has_no_score(self):
        assert PASS_THROUGH.matches
        assert PASS_THROUGH.score == 0
        assert PASS_THROUGH.to_dict() == {
            "score": 0,
            "matched_terms": [],
            "matched_fields": [],
        }

    @pytest.mark.parametrize("mode", [QueryMode.ANY, QueryMode.ALL, QueryMode.PHRASE])
    def test_punctuation_only_query_matches_nothing(self, sample_events, mode):
        for event in sample_events:
            result = evaluate(build_index(event), "!!!", mode)

            assert result is NO_MATCH
