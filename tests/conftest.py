"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest

from type_checker.utils.logging import reset_logging


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "properties: invariants checked over a table of sample values")


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Each test starts with logging unconfigured (structlog defaults, no handler)."""
    reset_logging()
    yield
    reset_logging()
