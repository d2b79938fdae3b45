"""HTTP client for the todo API."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, List, Optional

import httpx

from todoapp.client.storage import TOKEN_KEY, MemoryStorage, clear_credentials

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.getenv("TODO_API_URL", "http://localhost:5000/api")


class ApiError(Exception):
    """A failed API call.

    ``status_code`` is 0 when no response arrived. ``message`` is the
    server's ``error`` text, or None when the response carried none.
    """

    def __init__(self, status_code: int, message: Optional[str], detail: Optional[str] = None):
        super().__init__(message or detail or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message


class ApiUnauthorizedError(ApiError):
    pass


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class TodoApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        storage: Optional[MemoryStorage] = None,
        http_client: Optional[httpx.Client] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        timeout: float = 10.0,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.on_unauthorized = on_unauthorized
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url or DEFAULT_API_URL, timeout=timeout)

        hooks = self._http.event_hooks
        self._http.event_hooks = {
            "request": [*hooks.get("request", []), self._attach_token],
            "response": [*hooks.get("response", []), self._handle_unauthorized],
        }

    def __enter__(self) -> "TodoApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _attach_token(self, request: httpx.Request) -> None:
        token = self.storage.get_item(TOKEN_KEY)
        if token and "Authorization" not in request.headers:
            request.headers["Authorization"] = f"Bearer {token}"

    def _handle_unauthorized(self, response: httpx.Response) -> None:
        # A rejected login carries no token and is reported inline instead.
        if response.status_code != 401 or "Authorization" not in response.request.headers:
            return
        logger.info("Session rejected by server, clearing stored credentials")
        clear_credentials(self.storage)
        if self.on_unauthorized:
            self.on_unauthorized()

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.TransportError as exc:
            raise ApiError(0, None, str(exc)) from exc

        if response.is_success:
            return response.json()

        message = _error_message(response)
        if response.status_code == 401:
            raise ApiUnauthorizedError(401, message)
        raise ApiError(response.status_code, message)

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    def login(self, username: str, password: str) -> Dict[str, Any]:
        return self._request("POST", "/login", json={"username": username, "password": password})

    def logout(self) -> Dict[str, Any]:
        return self._request("POST", "/logout")

    def list_todos(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/todos")

    def get_todo(self, todo_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/todos/{todo_id}")

    def create_todo(self, title: str) -> Dict[str, Any]:
        return self._request("POST", "/todos", json={"title": title})

    def update_todo(self, todo_id: int, **changes: Any) -> Dict[str, Any]:
        return self._request("PUT", f"/todos/{todo_id}", json=changes)

    def delete_todo(self, todo_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/todos/{todo_id}")
