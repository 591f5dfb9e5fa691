"""Collect-all validation for rule sources.

Returns a list of :class:`ValidationError` instances rather than raising,
so callers can report every problem in one pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from stubmatch.constants.config import DEFAULT_ENCODING, VALID_ENCODINGS
from stubmatch.constants.predicates import (
    BINARY_MATCHES_MESSAGE,
    ENCODING_BASE64,
    LIST_COMBINATORS,
    OP_INJECT,
    OP_MATCHES,
    OP_NOT,
)
from stubmatch.constants.rule_schema import ALLOWED_TOP_KEYS, REQUIRED_TOP_KEYS, RULE_FILE_SUFFIX, RULE_VERSION
from stubmatch.constants.validation import (
    RULE001,
    RULE002,
    RULE003,
    RULE004,
    RULE005,
    RULE006,
    RULE007,
    RULE008,
    RULE009,
    RULE010,
)
from stubmatch.exceptions.validation import ValidationError
from stubmatch.predicates.schema import iter_predicate_problems


def validate_rule_sources(
    rules_dir: Path | None = None,
    rule_files: tuple[Path, ...] | None = None,
    *,
    allow_injection: bool = True,
    default_encoding: str = DEFAULT_ENCODING,
) -> list[ValidationError]:
    """Validate rule sources and return all validation errors."""
    errors: list[ValidationError] = []

    if rules_dir is not None and rule_files is not None:
        errors.append(
            ValidationError(
                code=RULE009,
                path="",
                field="",
                message="rules source conflict: choose either --rules-dir or --rule-file, not both",
            )
        )
        return errors

    if rule_files is not None:
        paths = _resolve_explicit_files(rule_files, errors)
    elif rules_dir is not None:
        paths = _resolve_rules_dir(rules_dir, errors)
    else:
        return errors

    loaded_sources: dict[str, str] = {}  # rule_id -> first source path
    for path in paths:
        _validate_single_rule(path, errors, loaded_sources, allow_injection, default_encoding)

    return errors


def _resolve_explicit_files(
    rule_files: tuple[Path, ...],
    errors: list[ValidationError],
) -> list[Path]:
    paths: list[Path] = []
    for rf in rule_files:
        resolved = rf.resolve()
        if not resolved.is_file():
            errors.append(
                ValidationError(
                    code=RULE001,
                    path=str(resolved),
                    field="",
                    message=f"rule file not found: {resolved}",
                )
            )
            continue
        if resolved.suffix.lower() != RULE_FILE_SUFFIX:
            errors.append(
                ValidationError(
                    code=RULE002,
                    path=str(resolved),
                    field="",
                    message=f"rule file must use {RULE_FILE_SUFFIX} extension: {resolved.name}",
                    hint=f"rename the file to use a {RULE_FILE_SUFFIX} extension",
                )
            )
            continue
        paths.append(resolved)
    return paths


def _resolve_rules_dir(
    rules_dir: Path,
    errors: list[ValidationError],
) -> list[Path]:
    resolved = rules_dir.resolve()
    if not resolved.is_dir():
        errors.append(
            ValidationError(
                code=RULE001,
                path=str(resolved),
                field="",
                message=f"rules directory not found: {resolved}",
            )
        )
        return []
    return sorted(resolved.glob(f"*{RULE_FILE_SUFFIX}"))


def _validate_single_rule(
    path: Path,
    errors: list[ValidationError],
    loaded_sources: dict[str, str],
    allow_injection: bool,
    default_encoding: str,
) -> None:
    path_str = str(path)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        errors.append(
            ValidationError(code=RULE001, path=path_str, field="", message=f"failed to read rule file: {exc}")
        )
        return
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=RULE003, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=RULE004,
                path=path_str,
                field="",
                message=f"rule must be a mapping, got {type(raw).__name__}",
            )
        )
        return

    for key in sorted(set(map(str, raw)) - ALLOWED_TOP_KEYS):
        errors.append(
            ValidationError(code=RULE005, path=path_str, field=key, message=f"unknown top-level key `{key}`")
        )

    for key in sorted(REQUIRED_TOP_KEYS):
        if key not in raw:
            errors.append(
                ValidationError(code=RULE006, path=path_str, field=key, message=f"missing required field `{key}`")
            )

    if "rule_id" in raw:
        rule_id = raw["rule_id"]
        if not isinstance(rule_id, str) or not rule_id.strip():
            errors.append(
                ValidationError(
                    code=RULE007,
                    path=path_str,
                    field="rule_id",
                    message="`rule_id` must be a non-empty string",
                )
            )
        elif rule_id in loaded_sources:
            errors.append(
                ValidationError(
                    code=RULE008,
                    path=path_str,
                    field="rule_id",
                    message=f"duplicate rule_id `{rule_id}`",
                    hint=f"first defined in {loaded_sources[rule_id]}",
                )
            )
        else:
            loaded_sources[rule_id] = path_str

    if "version" in raw:
        version = raw["version"]
        if isinstance(version, bool) or not isinstance(version, int) or version != RULE_VERSION:
            errors.append(
                ValidationError(
                    code=RULE007,
                    path=path_str,
                    field="version",
                    message=f"`version` must be {RULE_VERSION}, got {version!r}",
                )
            )

    if "encoding" in raw and (not isinstance(raw["encoding"], str) or raw["encoding"] not in VALID_ENCODINGS):
        errors.append(
            ValidationError(
                code=RULE007,
                path=path_str,
                field="encoding",
                message="invalid encoding",
                hint=f"expected one of: {', '.join(sorted(VALID_ENCODINGS))}; got: {raw['encoding']!r}",
            )
        )

    if "predicates" in raw:
        encoding = raw.get("encoding", default_encoding)
        _validate_rule_predicates(raw["predicates"], path_str, errors, allow_injection, encoding)


def _validate_rule_predicates(
    predicates: Any,
    path_str: str,
    errors: list[ValidationError],
    allow_injection: bool,
    encoding: Any,
) -> None:
    if not isinstance(predicates, dict) or not predicates:
        errors.append(
            ValidationError(
                code=RULE007,
                path=path_str,
                field="predicates",
                message="`predicates` must be a non-empty mapping of field path to predicate",
            )
        )
        return

    for field, definition in predicates.items():
        location = f"predicates.{field}"
        problems = list(iter_predicate_problems(definition, location))
        for problem_location, message in problems:
            errors.append(ValidationError(code=RULE010, path=path_str, field=problem_location, message=message))
        if not problems and encoding == ENCODING_BASE64 and _mentions_operator(definition, OP_MATCHES):
            errors.append(
                ValidationError(
                    code=RULE010,
                    path=path_str,
                    field=location,
                    message=BINARY_MATCHES_MESSAGE,
                    hint="use text encoding for rules with `matches` predicates",
                )
            )
        if not allow_injection and _mentions_operator(definition, OP_INJECT):
            errors.append(
                ValidationError(
                    code=RULE010,
                    path=path_str,
                    field=location,
                    message="`inject` predicates are disabled",
                    hint="set allow_injection: true in stubmatch.yaml",
                )
            )


def _mentions_operator(definition: Any, operator: str) -> bool:
    """Whether *operator* is used anywhere in a well-formed wire-form tree."""
    if not isinstance(definition, dict) or len(definition) != 1:
        return False
    ((key, operand),) = definition.items()
    if key == operator:
        return True
    if key == OP_NOT:
        return _mentions_operator(operand, operator)
    if key in LIST_COMBINATORS and isinstance(operand, list):
        return any(_mentions_operator(child, operator) for child in operand)
    return False
