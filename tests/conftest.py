"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (fakes, no network)
    ├── integration/       # In-process HTTP API tests via TestClient
    └── shared/            # Shared fixtures and utilities
"""

import pytest

from beststories_config import Settings, clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings for tests: small concurrency, no retry delays."""
    return Settings(
        fetch_concurrency=3,
        cache_ttl_seconds=600,
        instance_name="test-node",
        hn_retry_delay=0.0,
    )
