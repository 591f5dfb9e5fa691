"""Rule runtime: load YAML rule files and evaluate them against requests.

Each rule file is validated and compiled once at construction; matching a
request then only walks the compiled predicate trees.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from stubmatch.config import EngineConfig
from stubmatch.constants.rule_schema import RULE_FILE_SUFFIX
from stubmatch.exceptions import ConfigError, ConfigurationError, RuleNotFoundError
from stubmatch.predicates.compiler import compile_rule
from stubmatch.predicates.dispatch import evaluate
from stubmatch.types.common import RequestValue
from stubmatch.types.predicates import CompiledRule, ErrorLogger

logger = logging.getLogger(__name__)


class PredicateEngine:
    """Compiled set of request-matching rules.

    A rule matches when every one of its field predicates holds. Rules are
    kept sorted by ``rule_id``, which is also the order ``first_match``
    tries them in.
    """

    def __init__(
        self,
        rules_dir: Path | None = None,
        rule_files: tuple[Path, ...] | None = None,
        config: EngineConfig | None = None,
        error_logger: ErrorLogger | None = None,
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._rules_dir = rules_dir
        self._rule_files = rule_files
        self._error_logger = error_logger
        self._compiled: list[CompiledRule] = []
        self._by_id: dict[str, CompiledRule] = {}
        self._load()

    def _load(self) -> None:
        loaded_sources: dict[str, Path] = {}
        for rule_path in self._collect_rule_paths():
            raw = self._load_rule(rule_path)
            try:
                compiled = compile_rule(
                    raw,
                    str(rule_path),
                    default_encoding=self._config.encoding,
                    allow_injection=self._config.allow_injection,
                )
            except ConfigurationError as exc:
                raise ConfigError(f"{rule_path}: [{exc.code}] {exc.message}") from exc

            previous_source = loaded_sources.get(compiled.rule_id)
            if previous_source is not None:
                raise ConfigError(
                    f"Duplicate rule_id '{compiled.rule_id}' loaded from {previous_source} and {rule_path}"
                )
            loaded_sources[compiled.rule_id] = rule_path
            self._compiled.append(compiled)
            logger.debug("Loaded rule: %s v%d", compiled.rule_id, compiled.version)

        self._compiled.sort(key=lambda r: r.rule_id)
        self._by_id = {rule.rule_id: rule for rule in self._compiled}

    def _collect_rule_paths(self) -> tuple[Path, ...]:
        if self._rules_dir is not None and self._rule_files is not None:
            raise ConfigError("Rules source conflict: choose either rules_dir or rule_files, not both.")
        if self._rule_files is not None:
            return self._collect_explicit_rule_files(self._rule_files)

        selected_dir = self._rules_dir if self._rules_dir is not None else self._config.rules_dir
        if selected_dir is None:
            return ()
        rules_dir = selected_dir.resolve()
        if not rules_dir.exists():
            raise ConfigError(f"Rules directory does not exist: {rules_dir}")
        if not rules_dir.is_dir():
            raise ConfigError(f"Rules directory is not a directory: {rules_dir}")
        return tuple(sorted(path.resolve() for path in rules_dir.glob(f"*{RULE_FILE_SUFFIX}")))

    @staticmethod
    def _collect_explicit_rule_files(rule_files: tuple[Path, ...]) -> tuple[Path, ...]:
        if len(rule_files) == 0:
            raise ConfigError("At least one --rule-file path must be provided.")

        resolved_files: list[Path] = []
        seen_paths: set[Path] = set()
        for rule_file in rule_files:
            resolved = rule_file.resolve()
            if resolved in seen_paths:
                raise ConfigError(f"Duplicate rule file path provided: {resolved}")
            seen_paths.add(resolved)

            if not resolved.exists():
                raise ConfigError(f"Rule file does not exist: {resolved}")
            if not resolved.is_file():
                raise ConfigError(f"Rule file path is not a file: {resolved}")
            if resolved.suffix.lower() != RULE_FILE_SUFFIX:
                raise ConfigError(f"Rule file must use {RULE_FILE_SUFFIX} extension: {resolved}")
            resolved_files.append(resolved)

        return tuple(sorted(resolved_files))

    @staticmethod
    def _load_rule(path: Path) -> dict[str, Any]:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Failed to read rule file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise ConfigError(f"Rule file {path} must contain a mapping")
        return raw

    @property
    def rule_ids(self) -> list[str]:
        """Return sorted list of loaded rule IDs."""
        return [r.rule_id for r in self._compiled]

    @property
    def rule_count(self) -> int:
        """Number of loaded rules."""
        return len(self._compiled)

    def get_rule(self, rule_id: str) -> CompiledRule:
        """Return a loaded rule by ID."""
        rule = self._by_id.get(rule_id)
        if rule is None:
            raise RuleNotFoundError(f"Rule '{rule_id}' not loaded")
        return rule

    def evaluate_rule(self, rule: CompiledRule, request: RequestValue) -> bool:
        """Whether every field predicate of *rule* holds, checked in file order."""
        for field, predicate in rule.predicates:
            if not evaluate(predicate, field, request, rule.encoding, self._error_logger):
                return False
        return True

    def matches(self, rule_id: str, request: RequestValue) -> bool:
        """Evaluate a single rule by ID."""
        return self.evaluate_rule(self.get_rule(rule_id), request)

    def matching_rules(self, request: RequestValue) -> list[str]:
        """IDs of every rule the request satisfies, in rule order."""
        return [rule.rule_id for rule in self._compiled if self.evaluate_rule(rule, request)]

    def first_match(self, request: RequestValue) -> str | None:
        """ID of the first rule the request satisfies, or ``None``."""
        for rule in self._compiled:
            if self.evaluate_rule(rule, request):
                return rule.rule_id
        return None

    def fingerprint(self) -> str:
        """Return a stable hash of all loaded rules."""
        payload = [
            {
                "rule_id": r.rule_id,
                "source_path": r.source_path,
                "version": r.version,
                "encoding": r.encoding,
                "predicates": [[field, repr(predicate)] for field, predicate in r.predicates],
            }
            for r in self._compiled
        ]
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()
