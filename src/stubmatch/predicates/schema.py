"""Strict validation for predicate definitions and rule files.

``iter_predicate_problems`` walks a whole wire-form tree and yields every
problem; the ``validate_*`` functions fail fast on the first one.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

from stubmatch.constants.config import VALID_ENCODINGS
from stubmatch.constants.predicates import (
    BAD_PREDICATE,
    COMPARISON_OPERATORS,
    LIST_COMBINATORS,
    OP_EXISTS,
    OP_INJECT,
    OP_MATCHES,
    OP_NOT,
    VALID_OPERATORS,
)
from stubmatch.constants.rule_schema import ALLOWED_TOP_KEYS, REQUIRED_TOP_KEYS, RULE_VERSION
from stubmatch.exceptions import ConfigError, ConfigurationError


def iter_predicate_problems(definition: Any, location: str) -> Iterator[tuple[str, str]]:
    """Yield ``(location, message)`` for every malformed node under *definition*.

    Comparison operands are not type-checked: a non-string expected value
    is legal and simply never matches. String ``matches`` patterns must
    compile.
    """
    if not isinstance(definition, Mapping):
        yield location, f"predicate must be a mapping, got {type(definition).__name__}"
        return
    if len(definition) != 1:
        yield location, f"predicate must have exactly one operator key, got {sorted(map(str, definition))}"
        return

    ((operator, operand),) = definition.items()
    child_location = f"{location}.{operator}"
    if operator not in VALID_OPERATORS:
        yield location, f"unknown predicate operator {operator!r}"
    elif operator in COMPARISON_OPERATORS:
        if operator == OP_MATCHES and isinstance(operand, str):
            try:
                re.compile(operand)
            except re.error as exc:
                yield child_location, f"invalid matches pattern {operand!r}: {exc}"
    elif operator == OP_EXISTS:
        if not isinstance(operand, bool):
            yield child_location, f"'exists' takes a boolean, got {operand!r}"
    elif operator == OP_INJECT:
        if not isinstance(operand, str) or not operand.strip():
            yield child_location, "'inject' takes non-empty predicate source"
    elif operator == OP_NOT:
        yield from iter_predicate_problems(operand, child_location)
    elif operator in LIST_COMBINATORS:
        if not isinstance(operand, list):
            yield child_location, f"'{operator}' takes a list of predicates, got {type(operand).__name__}"
            return
        for index, child in enumerate(operand):
            yield from iter_predicate_problems(child, f"{child_location}[{index}]")


def validate_predicate(definition: Any, location: str = "predicate") -> None:
    """Raise ``ConfigurationError('bad predicate')`` for the first problem found."""
    for problem_location, message in iter_predicate_problems(definition, location):
        raise ConfigurationError(BAD_PREDICATE, f"{problem_location}: {message}")


def validate_rule(data: dict[str, Any], source_path: str) -> None:
    """Validate a rule file mapping. Raises ConfigError on any violation."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source_path}: rule must be a mapping, got {type(data).__name__}")

    unknown_top = set(data.keys()) - ALLOWED_TOP_KEYS
    if unknown_top:
        raise ConfigError(f"{source_path}: unknown top-level keys: {sorted(unknown_top)}")

    for key in sorted(REQUIRED_TOP_KEYS):
        if key not in data:
            raise ConfigError(f"{source_path}: missing required key '{key}'")

    rule_id = data["rule_id"]
    if not isinstance(rule_id, str) or not rule_id.strip():
        raise ConfigError(f"{source_path}: 'rule_id' must be a non-empty string")

    version = data["version"]
    if isinstance(version, bool) or not isinstance(version, int) or version != RULE_VERSION:
        raise ConfigError(f"{source_path}: 'version' must be {RULE_VERSION}, got {version!r}")

    if "encoding" in data and (not isinstance(data["encoding"], str) or data["encoding"] not in VALID_ENCODINGS):
        raise ConfigError(
            f"{source_path}: encoding must be one of {sorted(VALID_ENCODINGS)}, got {data['encoding']!r}"
        )

    if "description" in data and not isinstance(data["description"], str):
        raise ConfigError(f"{source_path}: 'description' must be a string")

    predicates = data["predicates"]
    if not isinstance(predicates, dict) or not predicates:
        raise ConfigError(f"{source_path}: 'predicates' must be a non-empty mapping of field path to predicate")
    for field in predicates:
        if not isinstance(field, str) or not field.strip():
            raise ConfigError(f"{source_path}: predicate field paths must be non-empty strings, got {field!r}")
