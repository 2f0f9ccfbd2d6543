"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from match_feed_api.app.core.config import Settings
from match_feed_api.app.core.store import DataStore
from match_feed_api.app.main import create_app

ALLOWED_ORIGIN = "http://localhost:3000"
FOREIGN_ORIGIN = "http://evil.example"


@pytest.fixture
def store() -> DataStore:
    """Freshly seeded store for each test."""
    return DataStore.with_seed_data()


@pytest.fixture
def app(store):
    """Application instance owning the per-test store."""
    return create_app(Settings(cors_origin=ALLOWED_ORIGIN), store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
