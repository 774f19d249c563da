# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

import catalog.api.dependencies as _deps
from catalog.core.config import Settings, get_settings
from catalog.core.rate_limit import limiter
from catalog.main import app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_catalog=False, app_version="9.9.9")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    # Reset the repository singleton so each test starts from the catalog
    # described by test_settings, and clear rate limit counters.
    _deps._repository = None
    limiter.reset()
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)
        _deps._repository = None


@pytest.fixture
def product_payload() -> dict:
    return {"name": "A", "price": 1, "description": "d", "image": "u"}

