"""Idea model."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional
from sqlalchemy import Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base

if TYPE_CHECKING:
    from backend.app.models.comment import Comment
    from backend.app.models.upvote import Upvote
    from backend.app.models.user import User


class IdeaSection(str, Enum):
    """The five idea fields that comments can be attached to."""
    WHAT = "what"
    WHO = "who"
    FEATURES = "features"
    DONE_CRITERIA = "doneCriteria"
    INSPIRATION = "inspiration"

    @classmethod
    def values(cls) -> list[str]:
        return [section.value for section in cls]


class Idea(Base):
    """
    Idea model representing a five-field concept record.

    Attributes:
        id: Unique idea identifier
        what: What is being built
        who: Who it is for
        features: Key features
        done_criteria: What "done" looks like
        inspiration: Existing products or references
        author_user_id: Creating user (nullable for legacy ideas)
        created_at: Creation timestamp
    """

    __tablename__ = "ideas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    what: Mapped[str] = mapped_column(Text, nullable=False)
    who: Mapped[str] = mapped_column(Text, nullable=False)
    features: Mapped[str] = mapped_column(Text, nullable=False)
    done_criteria: Mapped[str] = mapped_column(Text, nullable=False)
    inspiration: Mapped[str] = mapped_column(Text, nullable=False)
    author_user_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
    )

    # Relationships
    author: Mapped[Optional["User"]] = relationship("User")
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="idea",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    upvotes: Mapped[list["Upvote"]] = relationship(
        "Upvote",
        back_populates="idea",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Idea(id={self.id}, what={self.what[:50]}...)>"
