"""
Pytest configuration for test suite

Markers:
- unit: Fast unit tests (no external dependencies)
- integration: Tests against live Redis/ClickHouse (requires Docker services)
"""

import pytest

from config.settings import reset_settings


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Fast unit tests (no dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (requires Docker)"
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from freshly loaded YAML settings"""
    reset_settings()
    yield
    reset_settings()
