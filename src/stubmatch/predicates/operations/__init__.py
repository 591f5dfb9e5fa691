"""Predicate operations subpackage.

One module per family of operators. Every ``run_*`` function shares the
signature ``(field, operand, request, encoding=None, logger=None)`` so the
dispatcher can call any of them the same way.
"""

from __future__ import annotations

from stubmatch.predicates.operations.combinators import run_and, run_not, run_or
from stubmatch.predicates.operations.existence import run_exists
from stubmatch.predicates.operations.injection import (
    register_injection,
    registered_injections,
    run_inject,
    unregister_injection,
)
from stubmatch.predicates.operations.regex import run_matches
from stubmatch.predicates.operations.scalar import run_contains, run_ends_with, run_is, run_starts_with

__all__ = [
    "register_injection",
    "registered_injections",
    "run_and",
    "run_contains",
    "run_ends_with",
    "run_exists",
    "run_inject",
    "run_is",
    "run_matches",
    "run_not",
    "run_or",
    "run_starts_with",
    "unregister_injection",
]
