"""Account endpoints: register, login, logout, current user."""

import logging

from fastapi import APIRouter, Depends, Request, status

from backend.app.api.deps import (
    get_user_service,
    login_session,
    logout_session,
    require_user,
)
from backend.app.models.user import User
from backend.app.schemas.user import MessageResponse, UserLogin, UserRegister, UserResponse
from backend.app.services.users import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserRegister,
    request: Request,
    users: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create an account and log it in."""
    user = await users.register(data.username, data.password)
    login_session(request, user)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(
    data: UserLogin,
    request: Request,
    users: UserService = Depends(get_user_service),
) -> UserResponse:
    """Check credentials and start a session."""
    user = await users.authenticate(data.username, data.password)
    login_session(request, user)
    logger.info(f"[AUTH] User {user.id} logged in")
    return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request) -> MessageResponse:
    """End the current session. Always succeeds."""
    logout_session(request)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(require_user)) -> UserResponse:
    """Return the logged-in user."""
    return UserResponse.model_validate(user)
