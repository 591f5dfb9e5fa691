"""Configuration defaults and filenames."""

from __future__ import annotations

from stubmatch.constants.predicates import ENCODING_BASE64, ENCODING_TEXT

CONFIG_FILENAME: str = "stubmatch.yaml"

DEFAULT_ENCODING: str = ENCODING_TEXT
VALID_ENCODINGS: frozenset[str] = frozenset({ENCODING_TEXT, ENCODING_BASE64})

DEFAULT_ALLOW_INJECTION: bool = True

DEFAULT_LOG_LEVEL: str = "INFO"
VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"encoding", "allow_injection", "rules_dir", "log_level"})
