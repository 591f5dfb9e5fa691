"""Predicate evaluation engine.

``evaluate`` is the entry point: hand it a definition (wire form or
compiled), the field path it applies to, and a request.
"""

from __future__ import annotations

from stubmatch.predicates.dispatch import evaluate
from stubmatch.predicates.compiler import compile_predicate, compile_rule
from stubmatch.predicates.fields import resolve
from stubmatch.predicates.operations import (
    register_injection,
    registered_injections,
    run_and,
    run_contains,
    run_ends_with,
    run_exists,
    run_inject,
    run_is,
    run_matches,
    run_not,
    run_or,
    run_starts_with,
    unregister_injection,
)
from stubmatch.predicates.runtime import PredicateEngine

__all__ = [
    "PredicateEngine",
    "compile_predicate",
    "compile_rule",
    "evaluate",
    "register_injection",
    "registered_injections",
    "resolve",
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
