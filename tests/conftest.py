"""
Pytest fixtures shared by the API tests.

Each test gets a fresh app wired to its own FakeKeyValueStore, so stored
workouts never leak between tests.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_key_value_store
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeKeyValueStore


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def kv_backend() -> FakeKeyValueStore:
    """Fresh fake key-value backend for the app under test."""
    return FakeKeyValueStore()


@pytest.fixture
def app(test_settings: Settings, kv_backend: FakeKeyValueStore) -> Generator[FastAPI, None, None]:
    """Create test application instance backed by kv_backend."""
    application = create_app(settings=test_settings)
    application.dependency_overrides[get_key_value_store] = lambda: kv_backend
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def api_client(app: FastAPI) -> TestClient:
    """FastAPI TestClient for the workout endpoints."""
    return TestClient(app)
