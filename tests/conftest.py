from __future__ import annotations

import pytest

from wgraph.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """get_settings() is cached; every test starts from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
