"""
Shared test fixtures for pytest.

- _clear_settings_cache: reset the cached Settings between tests so
  environment overrides take effect
"""

import pytest

from research_agent.config import get_reasoning_settings, get_settings


# ------------------------------------------------------------------ #
# Clear settings cache so test overrides take effect
# ------------------------------------------------------------------ #

@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    """Clear the lru_caches on the settings getters and pin the test environment."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    get_reasoning_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_reasoning_settings.cache_clear()
