import logging
from typing import Optional

from fastapi import APIRouter, Depends

from todoapp.api.deps import get_current_user, get_settings, get_store
from todoapp.core.config import Settings
from todoapp.core.errors import BadRequestError, UnauthorizedError
from todoapp.core.security import issue_token
from todoapp.core.store import Store
from todoapp.models import User
from todoapp.schemas.auth import LoginIn, MessageOut, TokenOut, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenOut)
async def login(
    payload: Optional[LoginIn] = None,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    payload = payload or LoginIn()
    if not payload.username or not payload.password:
        raise BadRequestError("Username and password required")

    user = store.find_user(payload.username, payload.password)
    if not user:
        logger.warning("Rejected login for username=%s", payload.username)
        raise UnauthorizedError("Invalid credentials")

    store.current_user_id = user.id
    logger.info("User id=%s logged in", user.id)

    return TokenOut(
        token=issue_token(settings.auth_token),
        user=UserOut(id=user.id, username=user.username),
    )


@router.post("/logout", response_model=MessageOut)
async def logout(
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    store.current_user_id = None
    logger.info("User id=%s logged out", user.id)
    return MessageOut(message="Logged out successfully")
