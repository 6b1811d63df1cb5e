"""Pydantic schemas for the Posts API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class PostCreate(BaseModel):
    """Post payload. ``name``/``avatar`` default to the caller's identity."""

    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class CommentCreate(BaseModel):
    """Comment payload. ``name``/``avatar`` default to the caller's identity."""

    text: str | None = None
    name: str | None = None
    avatar: str | None = None


class LikeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    text: str
    name: str
    avatar: str
    created_at: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e4567-e89b-12d3-a456-426614174000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "text": "Shipping the new profile page today",
                "name": "Jane Doe",
                "avatar": "//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf",
                "likes": [],
                "comments": [],
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user_id: UUID
    text: str
    name: str
    avatar: str
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    created_at: datetime
