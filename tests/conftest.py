"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from stubmatch.predicates import registered_injections, unregister_injection


@pytest.fixture(autouse=True)
def _clear_registered_injections() -> Iterator[None]:
    """Keep the injection callback registry empty between tests."""
    yield
    for name in registered_injections():
        unregister_injection(name)
