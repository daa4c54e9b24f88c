"""Comment API endpoints."""

from fastapi import APIRouter, Depends, status

from backend.app.api.deps import get_comment_service, require_user
from backend.app.models.user import User
from backend.app.schemas.comment import CommentCreate, CommentResponse
from backend.app.services.comments import CommentService

router = APIRouter(prefix="/ideas", tags=["comments"])


@router.get("/{idea_id}/comments/{section}", response_model=list[CommentResponse])
async def list_comments(
    idea_id: int,
    section: str,
    comments: CommentService = Depends(get_comment_service),
) -> list[CommentResponse]:
    """List comments on one section of an idea, oldest first."""
    return await comments.list_comments(idea_id, section)


@router.post(
    "/{idea_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    idea_id: int,
    data: CommentCreate,
    user: User = Depends(require_user),
    comments: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    """Comment on one section of an idea."""
    return await comments.create_comment(idea_id, data.section, data.content, user.id)
