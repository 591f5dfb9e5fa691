"""Faults surfaced by predicate evaluation."""

from __future__ import annotations

from stubmatch.constants.predicates import INJECTION_FAILURE_MESSAGE
from stubmatch.exceptions.base import StubmatchError


class ConfigurationError(StubmatchError):
    """A predicate definition that cannot be evaluated as written.

    ``code`` is a stable token callers switch on (``bad data``,
    ``bad predicate``, ``invalid injection``).
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"ConfigurationError(code={self.code!r}, message={self.message!r})"


class InjectionError(StubmatchError):
    """Normalized failure of an injected predicate."""

    def __init__(self) -> None:
        super().__init__(INJECTION_FAILURE_MESSAGE)
        self.message = INJECTION_FAILURE_MESSAGE


class RuleNotFoundError(StubmatchError, LookupError):
    """Raised when a rule ID is not loaded in the engine."""
