"""Tests for predicate and rule schema validation and compilation."""

from __future__ import annotations

import pytest

from stubmatch.exceptions import ConfigError, ConfigurationError
from stubmatch.predicates import compile_predicate, compile_rule
from stubmatch.predicates.schema import iter_predicate_problems, validate_rule
from stubmatch.types.predicates import Combinator, CompiledRule, Comparison, Existence, Injection

from .conftest import _minimal_rule


def test_compiles_each_variant() -> None:
    assert compile_predicate({"is": "x"}) == Comparison(operator="is", expected="x")
    assert compile_predicate({"exists": True}) == Existence(desired=True)
    assert compile_predicate({"inject": "lambda: True"}) == Injection(code="lambda: True")
    assert compile_predicate({"not": {"matches": "^a"}}) == Combinator(
        kind="not", children=(Comparison(operator="matches", expected="^a"),)
    )
    assert compile_predicate({"or": []}) == Combinator(kind="or", children=())


def test_non_string_comparison_operand_is_accepted() -> None:
    assert compile_predicate({"is": 1}) == Comparison(operator="is", expected=1)


def test_unknown_operator_fails_at_compile_time() -> None:
    with pytest.raises(ConfigurationError, match=r"predicate\.and\[1\]: unknown predicate operator 'equals'") as exc:
        compile_predicate({"and": [{"is": "x"}, {"equals": "y"}]})
    assert exc.value.code == "bad predicate"


@pytest.mark.parametrize(
    ("definition", "message"),
    [
        ({"exists": "yes"}, "'exists' takes a boolean"),
        ({"inject": ""}, "'inject' takes non-empty predicate source"),
        ({"and": {"is": "x"}}, "'and' takes a list of predicates"),
        ({"not": "x"}, "predicate must be a mapping"),
        ({}, "exactly one operator key"),
    ],
)
def test_malformed_definitions(definition: object, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        compile_predicate(definition)


def test_problem_iteration_reports_every_node() -> None:
    problems = list(iter_predicate_problems({"or": [{"bogus": 1}, {"exists": 1}, {"is": "ok"}]}, "p"))
    assert problems == [
        ("p.or[0]", "unknown predicate operator 'bogus'"),
        ("p.or[1].exists", "'exists' takes a boolean, got 1"),
    ]


def test_injection_can_be_disabled() -> None:
    with pytest.raises(ConfigurationError, match="injection is disabled") as exc_info:
        compile_predicate({"not": {"inject": "lambda: True"}}, allow_injection=False)
    assert exc_info.value.code == "invalid injection"


def test_compile_minimal_rule() -> None:
    compiled = compile_rule(_minimal_rule(), "<test>")
    assert isinstance(compiled, CompiledRule)
    assert compiled.rule_id == "TEST_RULE"
    assert compiled.encoding == "text"
    assert compiled.predicates == (
        ("path", Comparison(operator="is", expected="/")),
        ("method", Comparison(operator="is", expected="GET")),
    )


def test_rule_encoding_overrides_default() -> None:
    compiled = compile_rule(_minimal_rule(encoding="base64"), "<test>", default_encoding="text")
    assert compiled.encoding == "base64"
    assert compile_rule(_minimal_rule(), "<test>", default_encoding="base64").encoding == "base64"


def test_matches_under_base64_fails_at_compile_time() -> None:
    rule = _minimal_rule(encoding="base64", predicates={"body": {"not": {"matches": "x"}}})
    with pytest.raises(ConfigurationError, match="not allowed in binary mode") as exc_info:
        compile_rule(rule, "<test>")
    assert exc_info.value.code == "bad data"


def test_valid_minimal_rule() -> None:
    validate_rule(_minimal_rule(), "<test>")


def test_rejects_unknown_top_key() -> None:
    with pytest.raises(ConfigError, match="unknown top-level keys"):
        validate_rule(_minimal_rule(bogus="bad"), "<test>")


def test_rejects_missing_rule_id() -> None:
    rule = _minimal_rule()
    del rule["rule_id"]
    with pytest.raises(ConfigError, match="missing required key 'rule_id'"):
        validate_rule(rule, "<test>")


def test_rejects_wrong_version() -> None:
    with pytest.raises(ConfigError, match="version"):
        validate_rule(_minimal_rule(version=2), "<test>")
    with pytest.raises(ConfigError, match="version"):
        validate_rule(_minimal_rule(version=True), "<test>")


def test_rejects_unknown_encoding() -> None:
    with pytest.raises(ConfigError, match="encoding"):
        validate_rule(_minimal_rule(encoding="hex"), "<test>")


def test_rejects_empty_predicates() -> None:
    with pytest.raises(ConfigError, match="'predicates' must be a non-empty mapping"):
        validate_rule(_minimal_rule(predicates={}), "<test>")


def test_invalid_matches_pattern_fails_at_compile_time() -> None:
    with pytest.raises(ConfigurationError, match="invalid matches pattern") as exc_info:
        compile_predicate({"and": [{"is": "/"}, {"matches": "(unclosed"}]})
    assert exc_info.value.code == "bad predicate"
    assert "predicate.and[1].matches" in exc_info.value.message


def test_non_string_matches_pattern_is_accepted() -> None:
    assert compile_predicate({"matches": 42}) == Comparison(operator="matches", expected=42)
