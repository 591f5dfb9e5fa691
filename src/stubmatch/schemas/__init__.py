"""Published JSON schemas for stubmatch file formats."""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

RULE_SCHEMA_FILENAME: str = "rule.schema.json"


def load_rule_schema() -> dict[str, Any]:
    """Return the JSON schema describing rule files."""
    return json.loads(files(__name__).joinpath(RULE_SCHEMA_FILENAME).read_text(encoding="utf-8"))
