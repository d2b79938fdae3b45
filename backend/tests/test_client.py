"""API client tests against the in-process app."""

import httpx
import pytest

from todoapp.client import ApiError, ApiUnauthorizedError, MemoryStorage, TodoApiClient
from todoapp.client.storage import FileStorage, clear_credentials, load_credentials, save_credentials


def login(api_client: TodoApiClient) -> dict:
    data = api_client.login("testuser", "password123")
    save_credentials(api_client.storage, data["token"], data["user"])
    return data


def test_health(api_client: TodoApiClient) -> None:
    assert api_client.health()["status"] == "OK"


def test_login_returns_token_and_user(api_client: TodoApiClient) -> None:
    data = api_client.login("testuser", "password123")
    assert data == {"token": "valid-token", "user": {"id": 1, "username": "testuser"}}


def test_login_failure_carries_server_message(api_client: TodoApiClient) -> None:
    with pytest.raises(ApiUnauthorizedError) as exc_info:
        api_client.login("testuser", "nope")
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid credentials"


def test_stored_token_is_attached(api_client: TodoApiClient) -> None:
    login(api_client)
    todos = api_client.list_todos()
    assert [t["title"] for t in todos] == ["Learn React", "Build Todo App", "Write Tests"]


def test_crud_round(api_client: TodoApiClient) -> None:
    login(api_client)
    created = api_client.create_todo("  Buy milk  ")
    assert created["title"] == "Buy milk"
    assert api_client.update_todo(created["id"], completed=True)["completed"] is True
    assert api_client.get_todo(created["id"])["completed"] is True
    assert api_client.delete_todo(created["id"])["id"] == created["id"]

    with pytest.raises(ApiError) as exc_info:
        api_client.get_todo(created["id"])
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Todo not found"


def test_unauthorized_response_clears_credentials(api_client: TodoApiClient) -> None:
    calls = []
    api_client.on_unauthorized = lambda: calls.append("reload")
    save_credentials(api_client.storage, "stale-token", {"id": 1, "username": "testuser"})

    with pytest.raises(ApiUnauthorizedError):
        api_client.list_todos()

    assert calls == ["reload"]
    assert load_credentials(api_client.storage) is None


def test_failed_login_does_not_force_reload(api_client: TodoApiClient) -> None:
    calls = []
    api_client.on_unauthorized = lambda: calls.append("reload")
    with pytest.raises(ApiUnauthorizedError):
        api_client.login("wronguser", "wrongpass")
    assert calls == []


def test_transport_error_has_no_status() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://localhost:5000/api", transport=httpx.MockTransport(refuse))
    with TodoApiClient(storage=MemoryStorage(), http_client=http) as api_client:
        with pytest.raises(ApiError) as exc_info:
            api_client.list_todos()
    assert exc_info.value.status_code == 0
    assert exc_info.value.message is None


def test_error_without_json_body() -> None:
    http = httpx.Client(
        base_url="http://localhost:5000/api",
        transport=httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway")),
    )
    api_client = TodoApiClient(http_client=http)
    with pytest.raises(ApiError) as exc_info:
        api_client.list_todos()
    assert exc_info.value.status_code == 502
    assert exc_info.value.message is None


def test_file_storage_survives_reopen(tmp_path) -> None:
    path = tmp_path / "storage.json"
    storage = FileStorage(path)
    save_credentials(storage, "valid-token", {"id": 1, "username": "testuser"})

    reopened = FileStorage(path)
    assert load_credentials(reopened) == ("valid-token", {"id": 1, "username": "testuser"})

    clear_credentials(reopened)
    assert load_credentials(FileStorage(path)) is None
