"""Account registration and credential checks."""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import InvalidCredentialsError, UsernameTakenError
from backend.app.core.security import hash_password, verify_password
from backend.app.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Authentication provider backed by the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, username: str, password: str) -> User:
        """
        Create a new account.

        Username uniqueness is enforced by the table's unique constraint,
        so two concurrent registrations cannot both succeed.

        Raises:
            UsernameTakenError: If the username is already registered
        """
        username = username.strip()
        user = User(username=username, password_hash=await asyncio.to_thread(hash_password, password))
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise UsernameTakenError(username)
        await self.db.refresh(user)

        logger.info(f"[AUTH] Registered user {user.id} ({username})")
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """
        Return the user matching the credentials.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.get_user_by_username(username.strip())
        if user is None or not await asyncio.to_thread(verify_password, password, user.password_hash):
            logger.info(f"[AUTH] Failed login for {username!r}")
            raise InvalidCredentialsError()
        return user

    async def get_user(self, user_id: int) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()
