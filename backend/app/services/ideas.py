"""Idea persistence and viewer-relative aggregation."""

import logging

from sqlalchemy import Select, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import IdeaNotFoundError
from backend.app.models.idea import Idea
from backend.app.models.upvote import Upvote
from backend.app.models.user import User
from backend.app.schemas.idea import IdeaCreate, IdeaResponse, IdeaUpdate
from backend.app.services.authorization import OwnershipGuard

logger = logging.getLogger(__name__)


def _aggregate_query(viewer_id: int | None, idea_id: int | None = None) -> Select:
    """
    Build one statement returning ``(Idea, author username, upvote count, has upvoted)`` rows.

    Counts come from a single grouped subquery joined to the ideas, so the
    cost of listing grows with the number of ideas rather than once per idea.
    """
    count_query = select(
        Upvote.idea_id,
        func.count(Upvote.id).label("upvote_count"),
    ).group_by(Upvote.idea_id)
    if idea_id is not None:
        count_query = count_query.where(Upvote.idea_id == idea_id)
    counts = count_query.subquery()

    if viewer_id is None:
        has_upvoted = literal(False)
    else:
        has_upvoted = (
            select(Upvote.id)
            .where(Upvote.idea_id == Idea.id, Upvote.user_id == viewer_id)
            .exists()
        )

    stmt = (
        select(
            Idea,
            User.username,
            func.coalesce(counts.c.upvote_count, 0).label("upvote_count"),
            has_upvoted.label("has_upvoted"),
        )
        .select_from(Idea)
        .outerjoin(User, User.id == Idea.author_user_id)
        .outerjoin(counts, counts.c.idea_id == Idea.id)
        .order_by(Idea.id)
    )
    if idea_id is not None:
        stmt = stmt.where(Idea.id == idea_id)
    return stmt


def _to_response(idea: Idea, author_username: str | None, upvote_count: int, has_upvoted) -> IdeaResponse:
    return IdeaResponse(
        id=idea.id,
        what=idea.what,
        who=idea.who,
        features=idea.features,
        done_criteria=idea.done_criteria,
        inspiration=idea.inspiration,
        author_user_id=idea.author_user_id,
        author_username=author_username,
        upvote_count=int(upvote_count or 0),
        has_upvoted=bool(has_upvoted),
        created_at=idea.created_at,
    )


class IdeaService:
    """Idea CRUD plus the derived ``upvoteCount`` / ``hasUpvoted`` fields."""

    def __init__(self, db: AsyncSession, guard: OwnershipGuard | None = None):
        self.db = db
        self.guard = guard or OwnershipGuard.from_settings()

    async def list_ideas(self, viewer_id: int | None = None) -> list[IdeaResponse]:
        """Return every idea in ascending id (creation) order."""
        result = await self.db.execute(_aggregate_query(viewer_id))
        return [_to_response(*row) for row in result.all()]

    async def get_idea(self, idea_id: int, viewer_id: int | None = None) -> IdeaResponse:
        """
        Return a single idea relative to ``viewer_id``.

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        result = await self.db.execute(_aggregate_query(viewer_id, idea_id))
        row = result.first()
        if row is None:
            raise IdeaNotFoundError(idea_id)
        return _to_response(*row)

    async def create_idea(self, data: IdeaCreate, author_user_id: int | None) -> IdeaResponse:
        idea = Idea(
            what=data.what,
            who=data.who,
            features=data.features,
            done_criteria=data.done_criteria,
            inspiration=data.inspiration,
            author_user_id=author_user_id,
        )
        self.db.add(idea)
        await self.db.commit()
        await self.db.refresh(idea)

        logger.info(f"[IDEA] User {author_user_id} created idea {idea.id}")
        return await self.get_idea(idea.id, author_user_id)

    async def update_idea(self, idea_id: int, changes: IdeaUpdate, acting_user_id: int) -> IdeaResponse:
        """
        Apply the supplied fields to an idea.

        Raises:
            IdeaNotFoundError: If the idea does not exist
            ForbiddenError: If the acting user may not modify the idea
        """
        idea = await self._load(idea_id)
        self.guard.ensure_can_mutate(acting_user_id, idea.author_user_id)

        for field, value in changes.changes().items():
            setattr(idea, field, value)
        await self.db.commit()

        logger.info(f"[IDEA] User {acting_user_id} updated idea {idea_id}")
        return await self.get_idea(idea_id, acting_user_id)

    async def delete_idea(self, idea_id: int, acting_user_id: int) -> None:
        """
        Delete an idea together with its comments and upvotes.

        Deleting an idea that does not exist is an error every time.

        Raises:
            IdeaNotFoundError: If the idea does not exist
            ForbiddenError: If the acting user may not delete the idea
        """
        idea = await self._load(idea_id)
        self.guard.ensure_can_mutate(acting_user_id, idea.author_user_id)

        await self.db.delete(idea)
        await self.db.commit()

        logger.info(f"[IDEA] User {acting_user_id} deleted idea {idea_id}")

    async def count_ideas(self) -> int:
        result = await self.db.execute(select(func.count(Idea.id)))
        return result.scalar_one()

    async def _load(self, idea_id: int) -> Idea:
        result = await self.db.execute(select(Idea).where(Idea.id == idea_id))
        idea = result.scalar_one_or_none()
        if idea is None:
            raise IdeaNotFoundError(idea_id)
        return idea
