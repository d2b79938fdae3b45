"""Business logic for todos, scoped to the owning user."""

import logging
import re
from typing import Any, List, Optional

from todoapp.core.errors import BadRequestError, NotFoundError
from todoapp.core.store import Store
from todoapp.models import Todo
from todoapp.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)

# ASCII digits only; Unicode digits are not part of an id.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_todo_id(raw: str) -> Optional[int]:
    """Read the leading integer of a path segment; ``"12abc"`` gives 12."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # longer than the interpreter's int conversion limit
        return None


def coerce_completed(value: Any) -> bool:
    """Only null, false, zero and the empty string count as not completed."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


class TodoService:
    def __init__(self, store: Store, user_id: int) -> None:
        self._store = store
        self._user_id = user_id

    def list_todos(self) -> List[Todo]:
        return [todo for todo in self._store.todos if todo.user_id == self._user_id]

    def get_todo(self, raw_id: str) -> Todo:
        todo_id = parse_todo_id(raw_id)
        todo = self._store.find_todo(todo_id, self._user_id) if todo_id is not None else None
        if not todo:
            raise NotFoundError("Todo not found")
        return todo

    def create_todo(self, data: TodoCreate) -> Todo:
        title = (data.title or "").strip()
        if not title:
            raise BadRequestError("Title is required")
        todo = self._store.add_todo(title, self._user_id)
        logger.info("Created todo id=%s user_id=%s", todo.id, self._user_id)
        return todo

    def update_todo(self, raw_id: str, data: TodoUpdate) -> Todo:
        todo = self.get_todo(raw_id)
        provided = data.model_fields_set

        title = None
        if "title" in provided:
            title = (data.title or "").strip()
            if not title:
                raise BadRequestError("Title cannot be empty")

        if title is not None:
            todo.title = title
        if "completed" in provided:
            todo.completed = coerce_completed(data.completed)

        logger.info("Updated todo id=%s fields=%s", todo.id, sorted(provided))
        return todo

    def delete_todo(self, raw_id: str) -> Todo:
        todo = self.get_todo(raw_id)
        removed = self._store.remove_todo(todo)
        logger.info("Deleted todo id=%s", removed.id)
        return removed
