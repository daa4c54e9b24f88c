"""Shared request dependencies: database-backed services and the current user."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import UnauthorizedError
from backend.app.db.base import get_db
from backend.app.models.user import User
from backend.app.services.authorization import OwnershipGuard
from backend.app.services.comments import CommentService
from backend.app.services.ideas import IdeaService
from backend.app.services.upvotes import UpvoteService
from backend.app.services.users import UserService

SESSION_USER_KEY = "user_id"


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_idea_service(db: AsyncSession = Depends(get_db)) -> IdeaService:
    return IdeaService(db, OwnershipGuard.from_settings())


def get_upvote_service(db: AsyncSession = Depends(get_db)) -> UpvoteService:
    return UpvoteService(db)


def get_comment_service(db: AsyncSession = Depends(get_db)) -> CommentService:
    return CommentService(db)


async def get_current_user(
    request: Request,
    users: UserService = Depends(get_user_service),
) -> User | None:
    """
    Resolve the session cookie to a user.

    Returns None for anonymous requests and for sessions whose user no
    longer exists.
    """
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    user = await users.get_user(int(user_id))
    if user is None:
        request.session.pop(SESSION_USER_KEY, None)
    return user


async def require_user(user: User | None = Depends(get_current_user)) -> User:
    """Reject anonymous requests with 401."""
    if user is None:
        raise UnauthorizedError()
    return user


def login_session(request: Request, user: User) -> None:
    request.session[SESSION_USER_KEY] = user.id


def logout_session(request: Request) -> None:
    request.session.clear()
