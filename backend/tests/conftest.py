"""Shared fixtures: a fresh app and store for every test."""

import pytest
from fastapi.testclient import TestClient

from todoapp.client import MemoryStorage, TodoApiClient, TodoView
from todoapp.core.config import Settings
from todoapp.core.store import Store
from todoapp.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(api_prefix="/api", auth_token="valid-token", cors_origins=["*"], log_level="INFO")


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def app(settings: Settings, store: Store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app) -> TestClient:
    """Provide a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers(client: TestClient, valid_user: dict) -> dict:
    response = client.post("/api/login", json=valid_user)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def api_client(app) -> TodoApiClient:
    """An API client talking to the in-process app."""
    http = TestClient(app, base_url="http://testserver/api")
    return TodoApiClient(storage=MemoryStorage(), http_client=http)


@pytest.fixture
def view(api_client: TodoApiClient) -> TodoView:
    return TodoView(api_client)


@pytest.fixture
def valid_user() -> dict:
    return {"username": "testuser", "password": "password123"}


@pytest.fixture
def auth_header() -> dict:
    """The header the fixed demo token produces, without logging in."""
    return {"Authorization": "Bearer valid-token"}
