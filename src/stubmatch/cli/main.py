"""CLI entrypoint for stubmatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from stubmatch import __version__
from stubmatch.config import load_config
from stubmatch.constants.branding import CLI_DESCRIPTION
from stubmatch.exceptions import ConfigError, ConfigurationError, StubmatchError
from stubmatch.exceptions.validation import format_errors
from stubmatch.io import load_request_file
from stubmatch.predicates import PredicateEngine
from stubmatch.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="stubmatch",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Evaluate rules against a request document")
    check.add_argument("-q", "--request", type=Path, required=True, help="Request document (JSON, or YAML by suffix)")
    check.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding stubmatch.yaml")
    check.add_argument("-c", "--config", type=Path, help="Explicit config file")
    _add_rule_source_arguments(check)
    check.add_argument("--first", action="store_true", help="Report only the first matching rule")
    check.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    validate = subparsers.add_parser("validate", help="Validate configuration and rule files")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding stubmatch.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    _add_rule_source_arguments(validate)

    return parser


def _add_rule_source_arguments(subparser: argparse.ArgumentParser) -> None:
    rules_source = subparser.add_mutually_exclusive_group()
    rules_source.add_argument(
        "-R",
        "--rules-dir",
        type=Path,
        default=None,
        help="Rules directory (loads *.yaml files from this folder)",
    )
    rules_source.add_argument(
        "-f",
        "--rule-file",
        type=Path,
        action="append",
        default=None,
        help="Rule file path (repeat for multiple files)",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    ``check`` exits 0 when a rule matches, 1 when none does or evaluation
    fails, 2 on configuration errors.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate":
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
        return _handle_validate(args)

    if args.command != "check":
        parser.error(f"Unsupported command: {args.command}")

    rule_files = tuple(args.rule_file) if args.rule_file else None
    try:
        config = load_config(args.root, args.config)
        level = logging.DEBUG if args.verbose else config.log_level_value
        logging.basicConfig(level=level, format="%(levelname)s %(message)s")
        engine = PredicateEngine(rules_dir=args.rules_dir, rule_files=rule_files, config=config)
        request = load_request_file(args.request)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.first:
            first = engine.first_match(request)
            matched = [first] if first is not None else []
        else:
            matched = engine.matching_rules(request)
    except ConfigurationError as exc:
        print(f"Configuration error: [{exc.code}] {exc.message}", file=sys.stderr)
        return 2
    except StubmatchError as exc:
        print(f"Evaluation error: {exc}", file=sys.stderr)
        return 1

    for rule_id in matched:
        print(rule_id)
    return 0 if matched else 1


def _handle_validate(args: argparse.Namespace) -> int:
    """Run config + rule validation and report results."""
    errors = preflight_validate(
        root=args.root,
        config_path=args.config,
        rules_dir=args.rules_dir,
        rule_files=(tuple(args.rule_file) if args.rule_file else None),
    )
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
