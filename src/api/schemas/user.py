"""Pydantic schemas for the Users API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    """Registration payload. Field rules are enforced by the register validator."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password2: str | None = None


class LoginRequest(BaseModel):
    """Login payload."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public user record. Credential material is never serialised."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Jane Doe",
                "email": "jane@example.com",
                "avatar": "//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf?s=200&r=pg&d=mm",
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    name: str
    email: str
    avatar: str
    created_at: datetime


class TokenResponse(BaseModel):
    """Login result. ``token`` already carries the scheme tag."""

    success: bool = True
    token: str


class CurrentUserResponse(BaseModel):
    """Identity of the token's account."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str
