"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def reset_settings():
    """Restore size bounds after tests that tweak them."""
    from facegen import config

    original = (
        config.settings.DEFAULT_SIZE,
        config.settings.MIN_SIZE,
        config.settings.MAX_SIZE,
        config.settings.CACHE_CONTROL,
    )

    yield

    (
        config.settings.DEFAULT_SIZE,
        config.settings.MIN_SIZE,
        config.settings.MAX_SIZE,
        config.settings.CACHE_CONTROL,
    ) = original


@pytest.fixture
def client():
    from facegen.main import app

    return TestClient(app)
