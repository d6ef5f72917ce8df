"""Shared test configuration, pytest markers and API fixtures."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture
def store():
    from services.profile_store import ProfileStore

    return ProfileStore()


@pytest.fixture
def client(store):
    """TestClient with rate limiting off and an isolated profile store."""
    from fastapi.testclient import TestClient

    from api.dependencies import get_store
    from api.router import limiter
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    previous = limiter.enabled
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        limiter.enabled = previous
        app.dependency_overrides.clear()
