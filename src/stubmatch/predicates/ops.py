"""Central operator registry.

Maps wire-format operator names to their implementation functions. Only
registered operators can appear in a predicate definition.
"""

from __future__ import annotations

from typing import Any

from stubmatch.constants.predicates import (
    OP_AND,
    OP_CONTAINS,
    OP_ENDS_WITH,
    OP_EXISTS,
    OP_INJECT,
    OP_IS,
    OP_MATCHES,
    OP_NOT,
    OP_OR,
    OP_STARTS_WITH,
)
from stubmatch.predicates.operations.combinators import run_and, run_not, run_or
from stubmatch.predicates.operations.existence import run_exists
from stubmatch.predicates.operations.injection import run_inject
from stubmatch.predicates.operations.regex import run_matches
from stubmatch.predicates.operations.scalar import run_contains, run_ends_with, run_is, run_starts_with

OP_REGISTRY: dict[str, Any] = {
    OP_IS: run_is,
    OP_CONTAINS: run_contains,
    OP_STARTS_WITH: run_starts_with,
    OP_ENDS_WITH: run_ends_with,
    OP_MATCHES: run_matches,
    OP_EXISTS: run_exists,
    OP_NOT: run_not,
    OP_AND: run_and,
    OP_OR: run_or,
    OP_INJECT: run_inject,
}
