"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post entities."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        ...

    async def get_all(self) -> list[Post]:
        """Get all posts, most recent first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def update(self, post: Post) -> Post:
        """Persist the post's likes and comments."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post and return success status."""
        ...

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post authored by a user; returns the count removed."""
        ...
