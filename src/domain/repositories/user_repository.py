"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        ...

    async def get_many(self, ids: list[UUID]) -> dict[UUID, User]:
        """Get several users in a single query, keyed by ID."""
        ...

    async def create(self, user: User) -> User:
        """Create a new user."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a user and return success status."""
        ...
