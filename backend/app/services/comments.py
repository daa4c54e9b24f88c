"""Section-scoped comment threads."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.exceptions import IdeaNotFoundError, ValidationFailedError
from backend.app.models.comment import Comment
from backend.app.models.idea import Idea, IdeaSection
from backend.app.models.user import User
from backend.app.schemas.comment import CommentResponse

logger = logging.getLogger(__name__)


def _to_response(comment: Comment, author_username: str | None) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        idea_id=comment.idea_id,
        section=comment.section,
        content=comment.content,
        author_user_id=comment.author_user_id,
        author_username=author_username,
        created_at=comment.created_at,
    )


class CommentService:
    """Append-only comment threads keyed by ``(idea_id, section)``."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_comments(self, idea_id: int, section: str) -> list[CommentResponse]:
        """Comments for one section of an idea, oldest first."""
        result = await self.db.execute(
            select(Comment, User.username)
            .outerjoin(User, User.id == Comment.author_user_id)
            .where(Comment.idea_id == idea_id, Comment.section == section)
            .order_by(Comment.id)
        )
        return [_to_response(comment, username) for comment, username in result.all()]

    async def create_comment(
        self,
        idea_id: int,
        section: str,
        content: str,
        author_user_id: int | None,
    ) -> CommentResponse:
        """
        Add a comment to one section of an idea.

        Raises:
            ValidationFailedError: If the section is unknown or the content is blank
            IdeaNotFoundError: If the idea does not exist
        """
        if section not in IdeaSection.values():
            raise ValidationFailedError(
                f"section must be one of {IdeaSection.values()}",
                field="section",
            )
        if not content or not content.strip():
            raise ValidationFailedError("content must not be empty", field="content")

        idea_result = await self.db.execute(select(Idea.id).where(Idea.id == idea_id))
        if idea_result.scalar_one_or_none() is None:
            raise IdeaNotFoundError(idea_id)

        comment = Comment(
            idea_id=idea_id,
            section=section,
            content=content,
            author_user_id=author_user_id,
        )
        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)

        author_username = None
        if author_user_id is not None:
            user_result = await self.db.execute(select(User.username).where(User.id == author_user_id))
            author_username = user_result.scalar_one_or_none()

        logger.info(f"[COMMENT] User {author_user_id} commented on idea {idea_id} ({section})")
        return _to_response(comment, author_username)
