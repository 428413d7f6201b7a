"""Tests for string normalization helpers."""

import pytest

from festsearch.core.strings import contains, normalize


class TestNormalize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("AI and the Future", "ai and the future"),
            ("  spaced \t out\n text  ", "spaced out text"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, text, expected):
        assert normalize(text) == expected


class TestContains:
    def test_case_and_whitespace_insensitive(self):
        assert contains("Hilton  Austin Salon D", "austin salon")

    def test_empty_needle_matches(self):
        assert contains("anything", "")
        assert contains(None, None)

    def test_missing_haystack(self):
        assert not contains(None, "hilton")
