"""Cross-module type aliases."""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

Encoding: TypeAlias = Literal["text", "base64"]
FieldPath: TypeAlias = str

# str, a mapping of str to RequestValue, or any other scalar.
RequestValue: TypeAlias = Any
