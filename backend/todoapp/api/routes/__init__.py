from todoapp.api.routes.auth import router as auth_router
from todoapp.api.routes.health import router as health_router
from todoapp.api.routes.todos import router as todos_router

__all__ = ["auth_router", "health_router", "todos_router"]
