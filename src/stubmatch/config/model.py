"""Config data model for the predicate engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from stubmatch.constants.config import DEFAULT_ALLOW_INJECTION, DEFAULT_ENCODING, DEFAULT_LOG_LEVEL
from stubmatch.types.common import Encoding


@dataclass(frozen=True)
class EngineConfig:
    """Resolved engine config."""

    encoding: Encoding = DEFAULT_ENCODING  # type: ignore[assignment]
    allow_injection: bool = DEFAULT_ALLOW_INJECTION
    rules_dir: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        """Numeric ``logging`` level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)
