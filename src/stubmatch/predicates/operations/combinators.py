"""Boolean composition: ``not``, ``and``, ``or``.

Children are re-dispatched one at a time in list order, so short-circuiting
also decides which nested injections run and log.
"""

from __future__ import annotations

from collections.abc import Iterable

from stubmatch.predicates import dispatch
from stubmatch.types.common import FieldPath, RequestValue
from stubmatch.types.predicates import ErrorLogger


def run_not(
    field: FieldPath,
    definition: object,
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """Negate a single nested predicate."""
    return not dispatch.evaluate(definition, field, request, encoding, logger)


def run_or(
    field: FieldPath,
    definitions: Iterable[object],
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """True at the first nested predicate that holds; False for an empty list."""
    for definition in definitions:
        if dispatch.evaluate(definition, field, request, encoding, logger):
            return True
    return False


def run_and(
    field: FieldPath,
    definitions: Iterable[object],
    request: RequestValue,
    encoding: str | None = None,
    logger: ErrorLogger | None = None,
) -> bool:
    """False at the first nested predicate that fails; True for an empty list."""
    for definition in definitions:
        if not dispatch.evaluate(definition, field, request, encoding, logger):
            return False
    return True
