"""Tests for dotted-path field resolution."""

from __future__ import annotations

from stubmatch.predicates import resolve


def test_resolves_top_level_field() -> None:
    assert resolve("field", {"field": "value"}) == "value"


def test_resolves_nested_field() -> None:
    assert resolve("headers.key", {"headers": {"key": "value"}}) == "value"


def test_segment_lookup_is_case_insensitive() -> None:
    """Upper-case path segments find lower-case keys and vice versa."""
    request = {"headers": {"key": "v"}}
    assert resolve("headers.KEY", request) == resolve("headers.key", request) == "v"
    assert resolve("HEADERS.Key", {"Headers": {"KEY": "v"}}) == "v"


def test_first_case_insensitive_key_wins() -> None:
    assert resolve("key", {"KEY": "upper", "key": "lower"}) == "upper"


def test_missing_path_is_empty_string() -> None:
    assert resolve("field", {}) == ""
    assert resolve("headers.key", {"headers": {}}) == ""
    assert resolve("headers.key.deeper", {"headers": {"key": "flat"}}) == ""


def test_non_mapping_request_is_empty_string() -> None:
    assert resolve("field", "not a mapping") == ""
    assert resolve("field", None) == ""


def test_returns_non_string_values_untouched() -> None:
    assert resolve("count", {"count": 3}) == 3
    assert resolve("headers", {"headers": {"a": "b"}}) == {"a": "b"}
