"""Load request documents from disk."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from stubmatch.exceptions import ConfigError
from stubmatch.types.common import RequestValue

YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


def load_request_file(path: Path) -> RequestValue:
    """Parse a JSON (or, by suffix, YAML) request document."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read request file {path}: {exc}") from exc

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML request file {path}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON request file {path}: {exc}") from exc
