"""Upvote-related schemas."""

from pydantic import Field

from backend.app.schemas.base import CamelModel


class UpvoteResponse(CamelModel):
    """Upvote count of an idea after an upvote was added or removed."""

    id: int = Field(..., description="Idea ID")
    upvote_count: int = Field(..., ge=0, description="Number of upvotes")
