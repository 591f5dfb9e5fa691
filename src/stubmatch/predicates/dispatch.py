"""Predicate dispatcher: route one definition to the operation implementing it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stubmatch.constants.predicates import BAD_PREDICATE, LIST_COMBINATORS, OP_NOT
from stubmatch.exceptions import ConfigurationError
from stubmatch.predicates.ops import OP_REGISTRY
from stubmatch.types.common import FieldPath, RequestValue
from stubmatch.types.predicates import COMPILED_PREDICATE_TYPES, ErrorLogger


def evaluate(
    definition: object,
    field: FieldPath,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> Any:
    """Evaluate *definition* for *field* against *request*.

    *definition* is either the wire form, a mapping with exactly one
    operator key such as ``{"is": "GET"}``, or a compiled predicate from
    :func:`stubmatch.predicates.compiler.compile_predicate`. Unknown
    operators and malformed definitions raise ``ConfigurationError`` with
    code ``bad predicate``.
    """
    operator, operand = unpack(definition)
    operation = OP_REGISTRY.get(operator)
    if operation is None:
        raise ConfigurationError(BAD_PREDICATE, f"unknown predicate operator {operator!r}")
    _check_combinator_operand(operator, operand)
    return operation(field, operand, request, encoding, logger)


def unpack(definition: object) -> tuple[str, Any]:
    """Return ``(operator, operand)`` for a wire-form or compiled definition."""
    if isinstance(definition, COMPILED_PREDICATE_TYPES):
        return definition.operator, definition.operand
    if not isinstance(definition, Mapping):
        raise ConfigurationError(
            BAD_PREDICATE,
            f"predicate must be a mapping with one operator key, got {type(definition).__name__}",
        )
    if len(definition) != 1:
        raise ConfigurationError(
            BAD_PREDICATE,
            f"predicate must have exactly one operator key, got {sorted(map(str, definition))}",
        )
    ((operator, operand),) = definition.items()
    return operator, operand


def _check_combinator_operand(operator: str, operand: Any) -> None:
    if operator in LIST_COMBINATORS and not isinstance(operand, (list, tuple)):
        raise ConfigurationError(BAD_PREDICATE, f"'{operator}' takes a list of predicates")
    if operator == OP_NOT and not isinstance(operand, (Mapping, *COMPILED_PREDICATE_TYPES)):
        raise ConfigurationError(BAD_PREDICATE, "'not' takes a single predicate")
