"""Compiler: turn validated wire-form definitions into typed predicate trees."""

from __future__ import annotations

import logging
from typing import Any

from stubmatch.constants.config import DEFAULT_ENCODING
from stubmatch.constants.predicates import (
    BAD_DATA,
    BINARY_MATCHES_MESSAGE,
    COMPARISON_OPERATORS,
    INJECTION_DISABLED_MESSAGE,
    INVALID_INJECTION,
    OP_EXISTS,
    OP_INJECT,
    OP_MATCHES,
    OP_NOT,
)
from stubmatch.exceptions import ConfigurationError
from stubmatch.predicates.schema import validate_predicate, validate_rule
from stubmatch.types.predicates import (
    Combinator,
    CompiledRule,
    Comparison,
    Existence,
    Injection,
    PredicateDefinition,
)

logger = logging.getLogger(__name__)


def compile_predicate(
    definition: Any,
    *,
    allow_injection: bool = True,
    location: str = "predicate",
) -> PredicateDefinition:
    """Validate and compile one wire-form definition.

    Raises ConfigurationError with code ``bad predicate`` for malformed
    definitions, and ``invalid injection`` for ``inject`` when injection is
    disabled.
    """
    validate_predicate(definition, location)
    return _build(definition, allow_injection, location)


def _build(definition: Any, allow_injection: bool, location: str) -> PredicateDefinition:
    ((operator, operand),) = definition.items()
    child_location = f"{location}.{operator}"

    if operator in COMPARISON_OPERATORS:
        return Comparison(operator=operator, expected=operand)
    if operator == OP_EXISTS:
        return Existence(desired=operand)
    if operator == OP_INJECT:
        if not allow_injection:
            raise ConfigurationError(INVALID_INJECTION, f"{location}: {INJECTION_DISABLED_MESSAGE}")
        return Injection(code=operand)
    if operator == OP_NOT:
        return Combinator(kind=OP_NOT, children=(_build(operand, allow_injection, child_location),))
    return Combinator(
        kind=operator,
        children=tuple(
            _build(child, allow_injection, f"{child_location}[{index}]") for index, child in enumerate(operand)
        ),
    )


def uses_operator(predicate: PredicateDefinition, operator: str) -> bool:
    """Whether *operator* appears anywhere in a compiled tree."""
    if predicate.operator == operator:
        return True
    if isinstance(predicate, Combinator):
        return any(uses_operator(child, operator) for child in predicate.children)
    return False


def compile_rule(
    data: dict[str, Any],
    source_path: str,
    *,
    default_encoding: str = DEFAULT_ENCODING,
    allow_injection: bool = True,
) -> CompiledRule:
    """Validate and compile a rule file mapping into a CompiledRule.

    Raises ConfigError on rule-level schema violations and
    ConfigurationError for bad predicate definitions, including ``matches``
    under base64 encoding, which can never be evaluated.
    """
    validate_rule(data, source_path)

    encoding = data.get("encoding", default_encoding)
    compiled: list[tuple[str, PredicateDefinition]] = []
    for field, definition in data["predicates"].items():
        predicate = compile_predicate(
            definition,
            allow_injection=allow_injection,
            location=f"predicates.{field}",
        )
        if encoding == "base64" and uses_operator(predicate, OP_MATCHES):
            raise ConfigurationError(BAD_DATA, f"predicates.{field}: {BINARY_MATCHES_MESSAGE}")
        compiled.append((field, predicate))

    logger.debug("Compiled rule %s: %d field predicate(s), %s encoding", data["rule_id"], len(compiled), encoding)
    return CompiledRule(
        source_path=source_path,
        rule_id=data["rule_id"],
        version=data["version"],
        encoding=encoding,
        predicates=tuple(compiled),
        description=data.get("description", ""),
    )
