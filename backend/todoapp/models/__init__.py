from todoapp.models.user import User
from todoapp.models.todo import Todo

__all__ = ["User", "Todo"]
