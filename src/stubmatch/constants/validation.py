"""Stable validation error codes for config and rule validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value

RULE001: str = "RULE001"  # rule file not found / unreadable
RULE002: str = "RULE002"  # invalid file extension
RULE003: str = "RULE003"  # invalid YAML parse
RULE004: str = "RULE004"  # top-level value is not a mapping
RULE005: str = "RULE005"  # unknown top-level key
RULE006: str = "RULE006"  # missing required field
RULE007: str = "RULE007"  # invalid value / enum
RULE008: str = "RULE008"  # duplicate rule_id
RULE009: str = "RULE009"  # source conflict (--rules-dir + --rule-file)
RULE010: str = "RULE010"  # malformed predicate definition
