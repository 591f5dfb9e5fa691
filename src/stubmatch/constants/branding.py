"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "STUBMATCH"
CLI_DESCRIPTION: str = f"{BRAND_NAME} request predicate evaluator"
