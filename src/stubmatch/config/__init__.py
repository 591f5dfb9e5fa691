"""Configuration loading and validation for the predicate engine.

This package facade re-exports the public names so callers can use
``from stubmatch.config import ...``.
"""

from __future__ import annotations

from stubmatch.config.loader import load_config
from stubmatch.config.model import EngineConfig
from stubmatch.config.validator import validate_config_file

__all__ = [
    "EngineConfig",
    "load_config",
    "validate_config_file",
]
