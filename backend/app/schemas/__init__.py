"""Pydantic schemas for API request/response validation."""

from backend.app.schemas.user import (
    UserRegister,
    UserLogin,
    UserResponse,
    MessageResponse,
)
from backend.app.schemas.idea import IdeaCreate, IdeaUpdate, IdeaResponse
from backend.app.schemas.comment import CommentCreate, CommentResponse
from backend.app.schemas.upvote import UpvoteResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "MessageResponse",
    "IdeaCreate",
    "IdeaUpdate",
    "IdeaResponse",
    "CommentCreate",
    "CommentResponse",
    "UpvoteResponse",
]
