"""Command-line interface for stubmatch."""

from stubmatch.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
