"""Equality-family operations: ``is``, ``contains``, ``startsWith``, ``endsWith``.

Each compares the value resolved at a field path with an expected string,
either case-insensitively as text or byte-for-byte after base64 decoding.
A non-string on either side is simply not a match.
"""

from __future__ import annotations

from stubmatch.predicates.fields import resolve
from stubmatch.predicates.operations.shared import comparable_pair
from stubmatch.types.common import FieldPath, RequestValue
from stubmatch.types.predicates import ErrorLogger


def run_is(
    field: FieldPath,
    expected: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True when the field equals *expected*."""
    pair = comparable_pair(resolve(field, request), expected, encoding)
    if pair is None:
        return False
    actual, wanted = pair
    return actual == wanted


def run_contains(
    field: FieldPath,
    expected: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True when *expected* occurs anywhere in the field."""
    pair = comparable_pair(resolve(field, request), expected, encoding)
    if pair is None:
        return False
    actual, wanted = pair
    return wanted in actual


def run_starts_with(
    field: FieldPath,
    expected: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True when the field begins with *expected*."""
    pair = comparable_pair(resolve(field, request), expected, encoding)
    if pair is None:
        return False
    actual, wanted = pair
    return actual.startswith(wanted)


def run_ends_with(
    field: FieldPath,
    expected: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True when the field ends with *expected*."""
    pair = comparable_pair(resolve(field, request), expected, encoding)
    if pair is None:
        return False
    actual, wanted = pair
    return actual.endswith(wanted)
