"""Helpers shared by the comparison operations."""

from __future__ import annotations

import base64
import binascii

from stubmatch.constants.predicates import ENCODING_BASE64
from stubmatch.types.common import Encoding


def normalize_encoding(encoding: str | None) -> Encoding:
    """Map an encoding token to ``"base64"`` or ``"text"``.

    Anything other than the literal ``base64`` token (``None``, ``utf8``,
    ...) means text comparison.
    """
    if encoding == ENCODING_BASE64:
        return "base64"
    return "text"


def decode_base64(value: str) -> bytes | None:
    """Strictly decode a base64 string, or ``None`` if it is not valid base64."""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return None


def comparable_pair(actual: object, expected: object, encoding: str | None) -> tuple[str, str] | tuple[bytes, bytes] | None:
    """Return ``(actual, expected)`` ready for a structural comparison.

    Text mode lowercases both sides; base64 mode decodes both to bytes.
    ``None`` means the pair cannot match: a side is not a string or fails
    to decode.
    """
    if not isinstance(actual, str) or not isinstance(expected, str):
        return None
    if normalize_encoding(encoding) == "base64":
        actual_bytes = decode_base64(actual)
        expected_bytes = decode_base64(expected)
        if actual_bytes is None or expected_bytes is None:
            return None
        return actual_bytes, expected_bytes
    return actual.lower(), expected.lower()
