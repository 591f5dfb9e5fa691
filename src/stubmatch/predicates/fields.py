"""Dotted-path field resolution into nested request data."""

from __future__ import annotations

from collections.abc import Mapping

from stubmatch.types.common import FieldPath, RequestValue


def resolve(path: FieldPath, request: RequestValue) -> RequestValue:
    """Return the value at *path* in *request*, or ``""`` if it is not there.

    Each dot-separated segment is looked up case-insensitively against the
    keys of the current mapping; the first key in iteration order wins.
    Walking into a missing key or a non-mapping value yields ``""``.
    """
    current = request
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return ""
        key = _find_key(current, segment)
        if key is None:
            return ""
        current = current[key]
    return current


def _find_key(mapping: Mapping[str, RequestValue], segment: str) -> str | None:
    wanted = segment.lower()
    for key in mapping:
        if isinstance(key, str) and key.lower() == wanted:
            return key
    return None
