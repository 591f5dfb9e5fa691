"""Operator names, fault codes and fixed messages for predicate evaluation."""

from __future__ import annotations

OP_IS: str = "is"
OP_CONTAINS: str = "contains"
OP_STARTS_WITH: str = "startsWith"
OP_ENDS_WITH: str = "endsWith"
OP_MATCHES: str = "matches"
OP_EXISTS: str = "exists"
OP_NOT: str = "not"
OP_AND: str = "and"
OP_OR: str = "or"
OP_INJECT: str = "inject"

SCALAR_OPERATORS: frozenset[str] = frozenset({OP_IS, OP_CONTAINS, OP_STARTS_WITH, OP_ENDS_WITH})
COMPARISON_OPERATORS: frozenset[str] = SCALAR_OPERATORS | {OP_MATCHES}
LIST_COMBINATORS: frozenset[str] = frozenset({OP_AND, OP_OR})
COMBINATOR_OPERATORS: frozenset[str] = LIST_COMBINATORS | {OP_NOT}
VALID_OPERATORS: frozenset[str] = COMPARISON_OPERATORS | COMBINATOR_OPERATORS | {OP_EXISTS, OP_INJECT}

ENCODING_TEXT: str = "text"
ENCODING_BASE64: str = "base64"

# Injection target that hands the callable the whole request.
REQUEST_TARGET: str = "request"
# Prefix naming a callable registered with register_injection().
REGISTERED_INJECTION_PREFIX: str = "@"

BAD_DATA: str = "bad data"
BAD_PREDICATE: str = "bad predicate"
INVALID_INJECTION: str = "invalid injection"

BINARY_MATCHES_MESSAGE: str = "the matches predicate is not allowed in binary mode"
INJECTION_FAILURE_MESSAGE: str = "invalid predicate injection"
INJECTION_DISABLED_MESSAGE: str = "predicate injection is disabled; set allow_injection: true to enable it"
INJECTION_LOG_TEMPLATE: str = "injection X=> %s"
