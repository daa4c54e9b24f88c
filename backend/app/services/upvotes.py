"""Per-user upvote toggling."""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import DuplicateUpvoteError, IdeaNotFoundError
from backend.app.models.idea import Idea
from backend.app.models.upvote import Upvote

logger = logging.getLogger(__name__)


class UpvoteService:
    """
    Add and remove ``(idea, user)`` upvotes.

    Adding is strict: a second upvote by the same user is rejected. The
    rejection comes from the table's unique constraint rather than from a
    prior read, so concurrent duplicate requests leave exactly one row.
    Removing is idempotent: removing a missing upvote is a no-op.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def require_idea(self, idea_id: int) -> None:
        """
        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        result = await self.db.execute(select(Idea.id).where(Idea.id == idea_id))
        if result.scalar_one_or_none() is None:
            raise IdeaNotFoundError(idea_id)

    async def add_upvote(self, idea_id: int, user_id: int) -> Upvote:
        """
        Record an upvote.

        Raises:
            IdeaNotFoundError: If the idea does not exist
            DuplicateUpvoteError: If the user has already upvoted the idea
        """
        await self.require_idea(idea_id)

        upvote = Upvote(idea_id=idea_id, user_id=user_id)
        self.db.add(upvote)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # The idea may have been deleted since the check above
            await self.require_idea(idea_id)
            logger.info(f"[UPVOTE] Duplicate upvote by user {user_id} on idea {idea_id}")
            raise DuplicateUpvoteError(idea_id, user_id)
        await self.db.refresh(upvote)

        logger.info(f"[UPVOTE] User {user_id} upvoted idea {idea_id}")
        return upvote

    async def remove_upvote(self, idea_id: int, user_id: int) -> bool:
        """Delete the user's upvote if present. Returns whether a row was removed."""
        result = await self.db.execute(
            delete(Upvote).where(
                Upvote.idea_id == idea_id,
                Upvote.user_id == user_id,
            )
        )
        await self.db.commit()

        removed = result.rowcount > 0
        if removed:
            logger.info(f"[UPVOTE] User {user_id} removed upvote from idea {idea_id}")
        return removed

    async def get_upvote_count(self, idea_id: int) -> int:
        """Number of upvotes for an idea; 0 for unknown ideas."""
        result = await self.db.execute(
            select(func.count(Upvote.id)).where(Upvote.idea_id == idea_id)
        )
        return result.scalar_one()

    async def has_upvoted(self, idea_id: int, user_id: int | None) -> bool:
        if user_id is None:
            return False
        result = await self.db.execute(
            select(Upvote.id).where(
                Upvote.idea_id == idea_id,
                Upvote.user_id == user_id,
            )
        )
        return result.first() is not None
