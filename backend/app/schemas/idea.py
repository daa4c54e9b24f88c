"""Idea-related schemas."""

from datetime import datetime
from pydantic import Field, field_validator

from backend.app.schemas.base import CamelModel


def _reject_blank(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class IdeaCreate(CamelModel):
    """Schema for creating a new idea."""

    what: str = Field(..., min_length=1, description="What is being built")
    who: str = Field(..., min_length=1, description="Who it is for")
    features: str = Field(..., min_length=1, description="Key features")
    done_criteria: str = Field(..., min_length=1, description="What done looks like")
    inspiration: str = Field(..., min_length=1, description="Existing products or references")

    @field_validator("what", "who", "features", "done_criteria", "inspiration")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class IdeaUpdate(CamelModel):
    """Schema for a partial idea update. Omitted fields are left unchanged."""

    what: str | None = Field(None, min_length=1)
    who: str | None = Field(None, min_length=1)
    features: str | None = Field(None, min_length=1)
    done_criteria: str | None = Field(None, min_length=1)
    inspiration: str | None = Field(None, min_length=1)

    @field_validator("what", "who", "features", "done_criteria", "inspiration")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        return _reject_blank(v)

    def changes(self) -> dict[str, str]:
        """Fields supplied by the client, keyed by model attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class IdeaResponse(CamelModel):
    """Schema for idea data in responses, relative to the requesting viewer."""

    id: int = Field(..., description="Idea ID")
    what: str
    who: str
    features: str
    done_criteria: str
    inspiration: str
    author_user_id: int | None = Field(None, description="Creating user ID")
    author_username: str | None = Field(None, description="Creating user's name")
    upvote_count: int = Field(0, ge=0, description="Number of upvotes")
    has_upvoted: bool = Field(False, description="Whether the viewer has upvoted")
    created_at: datetime = Field(..., description="Creation timestamp")
