"""Schema constants for rule files."""

from __future__ import annotations

RULE_FILE_SUFFIX: str = ".yaml"
RULE_VERSION: int = 1

REQUIRED_TOP_KEYS: frozenset[str] = frozenset({"rule_id", "version", "predicates"})
ALLOWED_TOP_KEYS: frozenset[str] = REQUIRED_TOP_KEYS | {"description", "encoding"}
