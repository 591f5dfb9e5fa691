"""Shared fixtures and helpers for predicate test modules."""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Any

import pytest
import yaml


class RecordingLogger:
    """Error logger that keeps every formatted message."""

    def __init__(self) -> None:
        self.errors: list[str] = []

    def error(self, msg: str, *args: Any) -> None:
        self.errors.append(msg % args if args else msg)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


def _b64(*values: int) -> str:
    """Base64 text for a byte sequence."""
    return base64.b64encode(bytes(values)).decode("ascii")


def _minimal_rule(**overrides: Any) -> dict[str, Any]:
    """Return a minimal valid rule dict, merged with *overrides*."""
    base: dict[str, Any] = {
        "rule_id": "TEST_RULE",
        "version": 1,
        "predicates": {
            "path": {"is": "/"},
            "method": {"is": "GET"},
        },
    }
    base.update(overrides)
    return base


def _write_rule_file(path: Path, **overrides: Any) -> Path:
    """Write a minimal rule YAML file to *path*."""
    payload = _minimal_rule(**overrides)
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path
