"""Config file validation that reports every problem at once."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from stubmatch.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, VALID_ENCODINGS, VALID_LOG_LEVELS
from stubmatch.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from stubmatch.exceptions.validation import ValidationError


def validate_config_file(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Validate a stubmatch.yaml file and return all validation errors.

    Never raises. A missing default config file is valid; a missing
    explicit one is ``CFG001``.
    """
    errors: list[ValidationError] = []
    path = config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_path is not None:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors
    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(set(map(str, raw)) - ALLOWED_CONFIG_KEYS):
        suggestion = _suggest_key(key)
        errors.append(
            ValidationError(
                code=CFG004,
                path=path_str,
                field=key,
                message=f"unknown config key `{key}`",
                hint=f"did you mean `{suggestion}`?" if suggestion else "",
            )
        )

    if "encoding" in raw and (not isinstance(raw["encoding"], str) or raw["encoding"] not in VALID_ENCODINGS):
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="encoding",
                message="invalid encoding",
                hint=f"expected one of: {', '.join(sorted(VALID_ENCODINGS))}; got: {raw['encoding']!r}",
            )
        )

    if "allow_injection" in raw and not isinstance(raw["allow_injection"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="allow_injection",
                message="`allow_injection` must be a boolean",
            )
        )

    if "rules_dir" in raw and (not isinstance(raw["rules_dir"], str) or not raw["rules_dir"].strip()):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="rules_dir",
                message="`rules_dir` must be a non-empty string",
            )
        )

    if "log_level" in raw:
        level = raw["log_level"]
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="log_level",
                    message="invalid log level",
                    hint=f"expected one of: {', '.join(sorted(VALID_LOG_LEVELS))}; got: {level!r}",
                )
            )

    return errors


def _suggest_key(key: str) -> str | None:
    """Return the closest allowed config key, if any is close enough."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return matches[0] if matches else None
