"""Root exception for stubmatch."""

from __future__ import annotations


class StubmatchError(Exception):
    """Base class for all errors raised by stubmatch."""
