"""Pytest configuration and shared fixtures."""

import pytest

# The napclock testing plugin is registered via a ``pytest11`` entry
# point (pyproject.toml) for external consumers.  In our own test
# suite we disable it (``-p no:napclock``) and load explicitly here
# instead, so the napclock import chain happens after ``pytest-cov``
# starts tracing.
pytest_plugins = ["napclock.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Tests exercising the public API end to end"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that block on the real clock"
    )
