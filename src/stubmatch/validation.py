"""Preflight validation orchestrator.

Combines config-file and rule-source validation into a single entry point
shared by ``stubmatch validate`` and ``stubmatch check``.
"""

from __future__ import annotations

from pathlib import Path

from stubmatch.config import load_config, validate_config_file
from stubmatch.exceptions.validation import ValidationError, sort_errors
from stubmatch.predicates.validation import validate_rule_sources


def preflight_validate(
    root: Path,
    config_path: Path | None = None,
    *,
    rules_dir: Path | None = None,
    rule_files: tuple[Path, ...] | None = None,
) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid. Rule sources fall back
    to the config's ``rules_dir`` when none are given explicitly.
    """
    errors = validate_config_file(root, config_path)
    if errors:
        return sort_errors(errors)

    config = load_config(root, config_path)

    if rules_dir is None and rule_files is None:
        rules_dir = config.rules_dir

    errors.extend(
        validate_rule_sources(
            rules_dir=rules_dir,
            rule_files=rule_files,
            allow_injection=config.allow_injection,
            default_encoding=config.encoding,
        )
    )
    return sort_errors(errors)
