"""Shared exception hierarchy for stubmatch."""

from __future__ import annotations

from .base import StubmatchError
from .config import ConfigError
from .predicates import ConfigurationError, InjectionError, RuleNotFoundError

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "InjectionError",
    "RuleNotFoundError",
    "StubmatchError",
]
