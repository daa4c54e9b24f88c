"""Comment model."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base

if TYPE_CHECKING:
    from backend.app.models.idea import Idea
    from backend.app.models.user import User


class Comment(Base):
    """
    Comment model representing a note on one section of an idea.

    Attributes:
        id: Unique comment identifier
        idea_id: Commented idea
        section: Idea field name the comment belongs to (stored as plain text)
        content: Comment body
        author_user_id: Commenting user (nullable)
        created_at: Creation timestamp
    """

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    idea_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ideas.id", ondelete="CASCADE"),
        nullable=False,
    )
    section: Mapped[str] = mapped_column(String(32), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_user_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
    )

    # Relationships
    idea: Mapped["Idea"] = relationship("Idea", back_populates="comments")
    author: Mapped[Optional["User"]] = relationship("User")

    __table_args__ = (
        Index("idx_comment_idea_section", "idea_id", "section"),
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, idea_id={self.idea_id}, section={self.section})>"
