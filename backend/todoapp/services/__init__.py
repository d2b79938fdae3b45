from todoapp.services.todos import TodoService, coerce_completed, parse_todo_id

__all__ = ["TodoService", "coerce_completed", "parse_todo_id"]
