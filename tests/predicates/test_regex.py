"""Tests for the matches operation."""

from __future__ import annotations

import pytest

from stubmatch.exceptions import ConfigurationError
from stubmatch.predicates import run_matches


def test_matches_pattern() -> None:
    assert run_matches("field", "end$", {"field": "begin middle end"})
    assert not run_matches("field", "middle$", {"field": "begin middle end"})


def test_matches_nested_field() -> None:
    assert run_matches("headers.key", "end$", {"headers": {"key": "begin middle end"}})
    assert not run_matches("headers.key", "end$", {"headers": {}})
    assert not run_matches("headers.key", r"begin\d+", {"headers": {"key": "begin end"}})


def test_matches_is_case_sensitive() -> None:
    assert not run_matches("field", "END$", {"field": "begin middle end"})
    assert run_matches("field", "(?i)END$", {"field": "begin middle end"})


def test_non_string_values_never_match() -> None:
    assert not run_matches("field", 1, {"field": 1})
    assert not run_matches("field", ".*", {"field": 1})


@pytest.mark.parametrize("request_data", [{"field": "dGVzdA=="}, {}, {"field": 5}])
def test_base64_mode_always_raises(request_data: dict[str, object]) -> None:
    """Binary mode is rejected no matter what the request holds."""
    with pytest.raises(ConfigurationError) as exc_info:
        run_matches("field", "dGVzdA==", request_data, "base64")
    assert exc_info.value.code == "bad data"
    assert exc_info.value.message == "the matches predicate is not allowed in binary mode"


def test_invalid_pattern_is_bad_predicate() -> None:
    with pytest.raises(ConfigurationError, match="invalid matches pattern") as exc_info:
        run_matches("field", "(unclosed", {"field": "value"})
    assert exc_info.value.code == "bad predicate"
