"""Configuration-related exceptions."""

from __future__ import annotations

from stubmatch.exceptions.base import StubmatchError


class ConfigError(StubmatchError, ValueError):
    """Raised when engine configuration or a rule file is invalid."""
