"""Database models."""

from backend.app.models.user import User
from backend.app.models.idea import Idea, IdeaSection
from backend.app.models.comment import Comment
from backend.app.models.upvote import Upvote

__all__ = ["User", "Idea", "IdeaSection", "Comment", "Upvote"]
