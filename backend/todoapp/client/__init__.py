from todoapp.client.api import ApiError, ApiUnauthorizedError, TodoApiClient
from todoapp.client.storage import FileStorage, MemoryStorage
from todoapp.client.view import TodoView, ViewState, count_todos, filter_todos, render

__all__ = [
    "ApiError",
    "ApiUnauthorizedError",
    "TodoApiClient",
    "FileStorage",
    "MemoryStorage",
    "TodoView",
    "ViewState",
    "count_todos",
    "filter_todos",
    "render",
]
