"""Idea management API endpoints."""

from fastapi import APIRouter, Depends, Response, status

from backend.app.api.deps import get_current_user, get_idea_service, require_user
from backend.app.models.user import User
from backend.app.schemas.idea import IdeaCreate, IdeaResponse, IdeaUpdate
from backend.app.services.ideas import IdeaService

router = APIRouter(prefix="/ideas", tags=["ideas"])


@router.get("", response_model=list[IdeaResponse])
async def list_ideas(
    viewer: User | None = Depends(get_current_user),
    ideas: IdeaService = Depends(get_idea_service),
) -> list[IdeaResponse]:
    """List all ideas, oldest first, with upvote data relative to the viewer."""
    return await ideas.list_ideas(viewer.id if viewer else None)


@router.get("/{idea_id}", response_model=IdeaResponse)
async def get_idea(
    idea_id: int,
    viewer: User | None = Depends(get_current_user),
    ideas: IdeaService = Depends(get_idea_service),
) -> IdeaResponse:
    """Get one idea."""
    return await ideas.get_idea(idea_id, viewer.id if viewer else None)


@router.post("", response_model=IdeaResponse, status_code=status.HTTP_201_CREATED)
async def create_idea(
    data: IdeaCreate,
    user: User = Depends(require_user),
    ideas: IdeaService = Depends(get_idea_service),
) -> IdeaResponse:
    """Create an idea owned by the logged-in user."""
    return await ideas.create_idea(data, author_user_id=user.id)


@router.put("/{idea_id}", response_model=IdeaResponse)
async def update_idea(
    idea_id: int,
    data: IdeaUpdate,
    user: User = Depends(require_user),
    ideas: IdeaService = Depends(get_idea_service),
) -> IdeaResponse:
    """Update some or all of an idea's fields."""
    return await ideas.update_idea(idea_id, data, acting_user_id=user.id)


@router.delete("/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_idea(
    idea_id: int,
    user: User = Depends(require_user),
    ideas: IdeaService = Depends(get_idea_service),
) -> Response:
    """Delete an idea and its comments and upvotes."""
    await ideas.delete_idea(idea_id, acting_user_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
