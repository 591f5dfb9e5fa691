"""Frozen dataclasses for compiled predicate trees and rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Protocol, TypeAlias

from stubmatch.constants.predicates import OP_EXISTS, OP_INJECT, OP_NOT
from stubmatch.types.common import Encoding

ComparisonOperator: TypeAlias = Literal["is", "contains", "startsWith", "endsWith", "matches"]
CombinatorKind: TypeAlias = Literal["not", "and", "or"]


class ErrorLogger(Protocol):
    """Anything with a printf-style ``error`` method, e.g. ``logging.Logger``."""

    def error(self, msg: str, *args: Any) -> None: ...


@dataclass(frozen=True)
class Comparison:
    """``is``/``contains``/``startsWith``/``endsWith``/``matches`` against an expected value."""

    operator: ComparisonOperator
    expected: Any

    @property
    def operand(self) -> Any:
        return self.expected


@dataclass(frozen=True)
class Existence:
    """``exists``: whether the field resolves to a non-empty value."""

    desired: bool

    @property
    def operator(self) -> str:
        return OP_EXISTS

    @property
    def operand(self) -> bool:
        return self.desired


@dataclass(frozen=True)
class Combinator:
    """``not``/``and``/``or`` over child predicates. ``not`` holds exactly one child."""

    kind: CombinatorKind
    children: tuple[PredicateDefinition, ...]

    @property
    def operator(self) -> str:
        return self.kind

    @property
    def operand(self) -> PredicateDefinition | tuple[PredicateDefinition, ...]:
        if self.kind == OP_NOT:
            return self.children[0]
        return self.children


@dataclass(frozen=True)
class Injection:
    """``inject``: host-supplied predicate code or a registered callable name."""

    code: str

    @property
    def operator(self) -> str:
        return OP_INJECT

    @property
    def operand(self) -> str:
        return self.code


PredicateDefinition: TypeAlias = Comparison | Existence | Combinator | Injection

COMPILED_PREDICATE_TYPES: tuple[type, ...] = (Comparison, Existence, Combinator, Injection)


@dataclass(frozen=True)
class CompiledRule:
    """A validated rule file: every field predicate must hold for a match."""

    source_path: str
    rule_id: str
    version: int
    encoding: Encoding
    predicates: tuple[tuple[str, PredicateDefinition], ...]
    description: str = ""
