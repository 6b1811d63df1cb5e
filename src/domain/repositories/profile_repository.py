"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every profile."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist the whole profile document, embedded lists included."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete a user's profile and return success status."""
        ...
