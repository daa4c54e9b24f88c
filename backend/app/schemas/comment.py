"""Comment-related schemas."""

from datetime import datetime
from pydantic import Field

from backend.app.schemas.base import CamelModel


class CommentCreate(CamelModel):
    """Schema for posting a comment on one section of an idea."""

    section: str = Field(..., description="Idea field name")
    content: str = Field(..., description="Comment body")


class CommentResponse(CamelModel):
    """Schema for comment data in responses."""

    id: int
    idea_id: int
    section: str
    content: str
    author_user_id: int | None = None
    author_username: str | None = None
    created_at: datetime
