"""Client-side view state and the handlers that drive it.

``TodoView`` holds a ``ViewState`` and exposes one method per user action.
Each action calls the API, then updates the state from the response. The
list shown to the user is derived from the state by pure functions, so it
can be rendered or asserted on without any UI toolkit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from todoapp.client.api import ApiError, ApiUnauthorizedError, TodoApiClient
from todoapp.client.storage import clear_credentials, load_credentials, save_credentials

logger = logging.getLogger(__name__)

FILTERS = ("all", "active", "completed")

EMPTY_MESSAGES = {
    "all": "No todos yet. Add one above!",
    "active": "No active todos!",
    "completed": "No completed todos!",
}

Todo = Dict[str, Any]


@dataclass
class ViewState:
    user: Optional[Dict[str, Any]] = None
    todos: List[Todo] = field(default_factory=list)
    new_todo: str = ""
    editing_id: Optional[int] = None
    edit_title: str = ""
    filter: str = "all"
    loading: bool = False
    error: str = ""
    username: str = ""
    password: str = ""


def filter_todos(todos: List[Todo], filter_name: str) -> List[Todo]:
    if filter_name == "active":
        return [todo for todo in todos if not todo["completed"]]
    if filter_name == "completed":
        return [todo for todo in todos if todo["completed"]]
    return list(todos)


def count_todos(todos: List[Todo]) -> Tuple[int, int, int]:
    """Return ``(total, active, completed)``."""
    completed = sum(1 for todo in todos if todo["completed"])
    return len(todos), len(todos) - completed, completed


def empty_message(filter_name: str) -> str:
    return EMPTY_MESSAGES.get(filter_name, EMPTY_MESSAGES["all"])


def render(state: ViewState) -> List[str]:
    if state.user is None:
        lines = ["Login"]
        if state.error:
            lines.append(f"! {state.error}")
        return lines

    lines = [f"Welcome, {state.user['username']}!"]
    if state.error:
        lines.append(f"! {state.error}")

    total, active, completed = count_todos(state.todos)
    labels = {"all": f"All ({total})", "active": f"Active ({active})", "completed": f"Completed ({completed})"}
    lines.append(" ".join(f"[{labels[name]}]" if name == state.filter else labels[name] for name in FILTERS))

    visible = filter_todos(state.todos, state.filter)
    if state.loading and not state.todos:
        lines.append("Loading todos...")
    elif not visible:
        lines.append(empty_message(state.filter))
    else:
        for todo in visible:
            mark = "x" if todo["completed"] else " "
            title = state.edit_title if todo["id"] == state.editing_id else todo["title"]
            suffix = " (editing)" if todo["id"] == state.editing_id else ""
            lines.append(f"[{mark}] {title}{suffix}")

    if state.todos:
        lines.append(f"Total: {total} | Active: {active} | Completed: {completed}")
    return lines


class TodoView:
    def __init__(self, api: TodoApiClient, confirm: Optional[Callable[[str], bool]] = None) -> None:
        self.api = api
        self.state = ViewState()
        self.confirm = confirm or (lambda message: True)
        api.on_unauthorized = self.reset

    @property
    def visible_todos(self) -> List[Todo]:
        return filter_todos(self.state.todos, self.state.filter)

    def render(self) -> List[str]:
        return render(self.state)

    def reset(self) -> None:
        """Drop back to the login screen, as a page reload would."""
        self.state = ViewState()

    def _fail(self, exc: ApiError, fallback: str) -> None:
        if isinstance(exc, ApiUnauthorizedError) and self.state.user is None:
            return
        self.state.error = exc.message or fallback

    def mount(self) -> None:
        stored = load_credentials(self.api.storage)
        if stored:
            _, user = stored
            self.state.user = user
            self.fetch_todos()

    def login(self, username: Optional[str] = None, password: Optional[str] = None) -> None:
        username = self.state.username if username is None else username
        password = self.state.password if password is None else password
        self.state.loading = True
        self.state.error = ""
        try:
            data = self.api.login(username, password)
            save_credentials(self.api.storage, data["token"], data["user"])
            self.state.user = data["user"]
            self.state.username = ""
            self.state.password = ""
            self.fetch_todos()
        except ApiError as exc:
            self.state.error = exc.message or "Login failed"
        finally:
            self.state.loading = False

    def logout(self) -> None:
        try:
            self.api.logout()
        except ApiError as exc:
            logger.warning("Logout error: %s", exc)
        finally:
            clear_credentials(self.api.storage)
            self.state.user = None
            self.state.todos = []

    def fetch_todos(self) -> None:
        self.state.loading = True
        try:
            self.state.todos = self.api.list_todos()
        except ApiError as exc:
            if not isinstance(exc, ApiUnauthorizedError):
                self.state.error = "Failed to fetch todos"
        finally:
            self.state.loading = False

    def add_todo(self, title: Optional[str] = None) -> None:
        if title is not None:
            self.state.new_todo = title
        if not self.state.new_todo.strip():
            return

        self.state.loading = True
        try:
            created = self.api.create_todo(self.state.new_todo)
            self.state.todos = [*self.state.todos, created]
            self.state.new_todo = ""
            self.state.error = ""
        except ApiError as exc:
            self._fail(exc, "Failed to add todo")
        finally:
            self.state.loading = False

    def update_todo(self, todo_id: int, **changes: Any) -> None:
        try:
            updated = self.api.update_todo(todo_id, **changes)
            self.state.todos = [updated if todo["id"] == todo_id else todo for todo in self.state.todos]
            self.state.error = ""
        except ApiError as exc:
            self._fail(exc, "Failed to update todo")

    def delete_todo(self, todo_id: int) -> None:
        if not self.confirm("Are you sure you want to delete this todo?"):
            return
        try:
            self.api.delete_todo(todo_id)
            self.state.todos = [todo for todo in self.state.todos if todo["id"] != todo_id]
            self.state.error = ""
        except ApiError as exc:
            self._fail(exc, "Failed to delete todo")

    def start_edit(self, todo: Todo) -> None:
        self.state.editing_id = todo["id"]
        self.state.edit_title = todo["title"]

    def save_edit(self, title: Optional[str] = None) -> None:
        if title is not None:
            self.state.edit_title = title
        if not self.state.edit_title.strip():
            self.state.error = "Title cannot be empty"
            return

        self.update_todo(self.state.editing_id, title=self.state.edit_title)
        self.state.editing_id = None
        self.state.edit_title = ""

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self.state.edit_title = ""

    def toggle_complete(self, todo: Todo) -> None:
        self.update_todo(todo["id"], completed=not todo["completed"])

    def set_filter(self, filter_name: str) -> None:
        if filter_name not in FILTERS:
            raise ValueError(f"Unknown filter: {filter_name}")
        self.state.filter = filter_name
