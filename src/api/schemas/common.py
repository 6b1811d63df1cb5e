"""Common Pydantic schemas shared across the API."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Standardized error response.

    ``details`` holds the field -> message map for validation and domain errors.
    """

    error_code: str
    message: str
    details: Any | None = None


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes."""

    success: bool = True


class UserSummaryResponse(BaseModel):
    """Owner summary embedded next to profiles."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    avatar: str
