"""``matches``: regular-expression test against a text field."""

from __future__ import annotations

import re

from stubmatch.constants.predicates import BAD_DATA, BAD_PREDICATE, BINARY_MATCHES_MESSAGE
from stubmatch.exceptions import ConfigurationError
from stubmatch.predicates.fields import resolve
from stubmatch.predicates.operations.shared import normalize_encoding
from stubmatch.types.common import FieldPath, RequestValue
from stubmatch.types.predicates import ErrorLogger


def run_matches(
    field: FieldPath,
    pattern: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True when *pattern* is found anywhere in the field.

    Binary mode is rejected before the request is inspected. The pattern is
    case-sensitive; an unparseable pattern is a configuration fault.
    """
    if normalize_encoding(encoding) == "base64":
        raise ConfigurationError(BAD_DATA, BINARY_MATCHES_MESSAGE)

    actual = resolve(field, request)
    if not isinstance(actual, str) or not isinstance(pattern, str):
        return False

    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(BAD_PREDICATE, f"invalid matches pattern {pattern!r}: {exc}") from exc
    return compiled.search(actual) is not None
