"""``exists``: presence test for a field."""

from __future__ import annotations

from stubmatch.predicates.fields import resolve
from stubmatch.types.common import FieldPath, RequestValue
from stubmatch.types.predicates import ErrorLogger


def run_exists(
    field: FieldPath,
    desired: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True when the field's presence agrees with *desired*.

    A missing path and an empty string are both absent.
    """
    present = resolve(field, request) != ""
    return present == bool(desired)
