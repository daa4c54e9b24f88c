"""Upvote model."""

from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base

if TYPE_CHECKING:
    from backend.app.models.idea import Idea
    from backend.app.models.user import User


class Upvote(Base):
    """
    Upvote model representing a user's endorsement of an idea.

    Attributes:
        id: Unique upvote identifier
        idea_id: Associated idea ID
        user_id: Associated user ID
        created_at: Creation timestamp
    """

    __tablename__ = "upvotes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    idea_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ideas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
    )

    # Relationships
    idea: Mapped["Idea"] = relationship("Idea", back_populates="upvotes")
    user: Mapped["User"] = relationship("User", back_populates="upvotes")

    # One upvote per user per idea
    __table_args__ = (
        UniqueConstraint("idea_id", "user_id", name="uix_upvote_idea_user"),
    )

    def __repr__(self) -> str:
        return f"<Upvote(id={self.id}, idea_id={self.idea_id}, user_id={self.user_id})>"
