"""Unit tests for feed query-string parsing.

Run with:
    pytest tests/unit/test_feed_query.py
"""

from __future__ import annotations

import pytest

from govfeed.filters.query import param_present, param_values, parse_feed_query


class TestParseFeedQuery:
    """Tests for parse_feed_query."""

    def test_empty_query(self) -> None:
        """An empty query yields no params."""
        assert parse_feed_query("") == {}, "Expected no params"

    def test_array_keys_accumulate_in_order(self) -> None:
        """``name[]`` keys collect their values into a list."""
        params = parse_feed_query(
            "departments[]=home-office&departments[]=ministry-of-justice"
        )
        assert params == {"departments": ["home-office", "ministry-of-justice"]}, (
            "Expected array values in URL order"
        )

    def test_plain_key_keeps_last_value(self) -> None:
        """Repeated plain keys keep the last value."""
        assert parse_feed_query("page=1&page=2") == {"page": "2"}, (
            "Expected the last plain value to win"
        )

    def test_key_without_equals_maps_to_none(self) -> None:
        """A key given without ``=`` maps to None."""
        params = parse_feed_query("relevant_to_local_government")
        assert params == {"relevant_to_local_government": None}, (
            "Expected a valueless key to map to None"
        )

    def test_key_with_empty_value_maps_to_empty_string(self) -> None:
        """``key=`` is distinct from a bare key."""
        params = parse_feed_query("relevant_to_local_government=")
        assert params == {"relevant_to_local_government": ""}, (
            "Expected an empty string value"
        )

    def test_values_are_percent_decoded(self) -> None:
        """Keys and values are decoded, with ``+`` as a space."""
        params = parse_feed_query("topics%5B%5D=crime+and+policing&q=a%26b")
        assert params == {"topics": ["crime and policing"], "q": "a&b"}, (
            "Expected percent and plus decoding"
        )

    def test_keys_keep_first_seen_order(self) -> None:
        """Params are ordered by first appearance of their key."""
        params = parse_feed_query("topics[]=welfare&departments[]=home-office")
        assert list(params) == ["topics", "departments"], (
            "Expected insertion order of keys"
        )

    @pytest.mark.parametrize("query", ["&&", "[]=x", "=x"])
    def test_nameless_pairs_are_skipped(self, query: str) -> None:
        """Empty pairs and pairs without a name are ignored."""
        assert parse_feed_query(query) == {}, f"Expected {query!r} to be skipped"

    def test_plain_key_replaces_array(self) -> None:
        """A plain key after an array key of the same name replaces the list."""
        params = parse_feed_query("topics[]=welfare&topics=crime-and-policing")
        assert params == {"topics": "crime-and-policing"}, (
            "Expected the plain value to replace the list"
        )


class TestParamValues:
    """Tests for param_values and param_present."""

    def test_scalar_becomes_single_item_list(self) -> None:
        """A plain value is wrapped in a list."""
        assert param_values({"page": "2"}, "page") == ["2"], "Expected list"

    def test_missing_key_yields_empty_list(self) -> None:
        """Missing keys yield no values."""
        assert param_values({}, "page") == [], "Expected empty list"

    def test_valueless_entries_are_dropped(self) -> None:
        """None entries in arrays and bare keys yield nothing."""
        params = parse_feed_query("topics[]&topics[]=welfare&flag")
        assert param_values(params, "topics") == ["welfare"], "Expected one value"
        assert param_values(params, "flag") == [], "Expected no values"

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("publication_filter_option=statistics", True),
            ("publication_filter_option=", False),
            ("publication_filter_option=+", False),
            ("publication_filter_option", False),
            ("other=statistics", False),
        ],
    )
    def test_param_present(self, query: str, *, expected: bool) -> None:
        """Presence requires at least one non-blank value."""
        params = parse_feed_query(query)
        assert param_present(params, "publication_filter_option") is expected, (
            f"Unexpected presence for {query!r}"
        )
