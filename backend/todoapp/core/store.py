"""In-memory store for users and todos.

One ``Store`` belongs to one application instance and lives for the life of
the process. Nothing is persisted; ``reset()`` brings back the seed data.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from todoapp.models import Todo, User


def seed_users() -> List[User]:
    return [
        User(id=1, username="testuser", password="password123"),
        User(id=2, username="admin", password="admin123"),
    ]


def seed_todos() -> List[Todo]:
    return [
        Todo(id=1, title="Learn React", completed=False, user_id=1),
        Todo(id=2, title="Build Todo App", completed=False, user_id=1),
        Todo(id=3, title="Write Tests", completed=True, user_id=1),
    ]


@dataclass
class Store:
    users: List[User] = field(default_factory=seed_users)
    todos: List[Todo] = field(default_factory=seed_todos)
    next_todo_id: int = 4
    current_user_id: Optional[int] = None

    @classmethod
    def empty(cls) -> "Store":
        """A store with the seed users but no todos."""
        return cls(todos=[], next_todo_id=1)

    def reset(self) -> None:
        self.users = seed_users()
        self.todos = seed_todos()
        self.next_todo_id = 4
        self.current_user_id = None

    def find_user(self, username: str, password: str) -> Optional[User]:
        for user in self.users:
            if user.username == username and user.password == password:
                return user
        return None

    def find_todo(self, todo_id: int, user_id: int) -> Optional[Todo]:
        for todo in self.todos:
            if todo.id == todo_id and todo.user_id == user_id:
                return todo
        return None

    def add_todo(self, title: str, user_id: int) -> Todo:
        todo = Todo(id=self.next_todo_id, title=title, completed=False, user_id=user_id)
        self.next_todo_id += 1
        self.todos.append(todo)
        return todo

    def remove_todo(self, todo: Todo) -> Todo:
        self.todos.remove(todo)
        return todo
