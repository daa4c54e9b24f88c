"""Upvote API endpoints."""

from fastapi import APIRouter, Depends

from backend.app.api.deps import get_upvote_service, require_user
from backend.app.models.user import User
from backend.app.schemas.upvote import UpvoteResponse
from backend.app.services.upvotes import UpvoteService

router = APIRouter(prefix="/ideas", tags=["upvotes"])


@router.post("/{idea_id}/upvote", response_model=UpvoteResponse)
async def upvote_idea(
    idea_id: int,
    user: User = Depends(require_user),
    upvotes: UpvoteService = Depends(get_upvote_service),
) -> UpvoteResponse:
    """
    Upvote an idea.

    Upvoting twice is rejected with 400; clients should send DELETE to undo.
    """
    await upvotes.add_upvote(idea_id, user.id)
    return UpvoteResponse(id=idea_id, upvote_count=await upvotes.get_upvote_count(idea_id))


@router.delete("/{idea_id}/upvote", response_model=UpvoteResponse)
async def remove_upvote(
    idea_id: int,
    user: User = Depends(require_user),
    upvotes: UpvoteService = Depends(get_upvote_service),
) -> UpvoteResponse:
    """
    Remove the user's upvote from an idea.

    Removing an upvote that does not exist succeeds (idempotent).
    """
    await upvotes.require_idea(idea_id)
    await upvotes.remove_upvote(idea_id, user.id)
    return UpvoteResponse(id=idea_id, upvote_count=await upvotes.get_upvote_count(idea_id))
