from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from typing import Optional

from todoapp.core.config import Settings
from todoapp.core.errors import UnauthorizedError
from todoapp.core.security import DEMO_USER_ID, is_authorized
from todoapp.core.store import Store
from todoapp.models import User
from todoapp.services.todos import TodoService

# The raw header is compared as-is, so the scheme is case sensitive.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_current_user(
    authorization: Optional[str] = Depends(authorization_header),
    settings: Settings = Depends(get_settings),
    store: Store = Depends(get_store),
) -> User:
    if not is_authorized(authorization, settings.auth_token):
        raise UnauthorizedError()

    user = next((u for u in store.users if u.id == DEMO_USER_ID), None)
    if not user:
        raise UnauthorizedError()
    return user


def get_todo_service(
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
) -> TodoService:
    return TodoService(store, user.id)
