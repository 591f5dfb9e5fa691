"""Config loading and normalization."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from stubmatch.config.model import EngineConfig
from stubmatch.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_ALLOW_INJECTION,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    VALID_ENCODINGS,
    VALID_LOG_LEVELS,
)
from stubmatch.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> EngineConfig:
    """Load and validate engine config from ``stubmatch.yaml`` or an explicit path.

    A missing default file yields the defaults; a missing explicit file is
    an error. ``rules_dir`` is resolved relative to the config file.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return EngineConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(map(str, unknown))}")

    encoding = raw.get("encoding", DEFAULT_ENCODING)
    if not isinstance(encoding, str) or encoding not in VALID_ENCODINGS:
        raise ConfigError(f"encoding must be one of {sorted(VALID_ENCODINGS)}, got {encoding!r}")

    allow_injection = raw.get("allow_injection", DEFAULT_ALLOW_INJECTION)
    if not isinstance(allow_injection, bool):
        raise ConfigError("allow_injection must be a boolean")

    log_level = raw.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {log_level!r}")

    return EngineConfig(
        encoding=encoding,
        allow_injection=allow_injection,
        rules_dir=_resolve_rules_dir(raw.get("rules_dir"), path.parent),
        log_level=log_level.upper(),
    )


def _resolve_rules_dir(value: Any, base: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("rules_dir must be a non-empty string")
    rules_dir = Path(value)
    if not rules_dir.is_absolute():
        rules_dir = base / rules_dir
    return rules_dir.resolve()
