"""User-related schemas."""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from backend.app.core.security import MAX_PASSWORD_BYTES, password_too_long
from backend.app.schemas.base import CamelModel


class UserRegister(BaseModel):
    """Schema for account registration."""

    username: str = Field(..., min_length=3, max_length=50, description="Login name")
    password: str = Field(..., min_length=6, description="Plain password")

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        if password_too_long(v):
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserLogin(BaseModel):
    """Schema for logging in."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User data safe to return to clients (no password hash)."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Login name")
    created_at: datetime = Field(..., description="Registration timestamp")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
