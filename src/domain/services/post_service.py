"""Post service layer: posts, likes and comments."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    CommentNotFoundError,
    NotAuthorizedError,
    NotLikedError,
    PostNotFoundError,
    ValidationFailedError,
)
from domain.entities.post import Comment, Post
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.user_service import require_account
from domain.validators import validate_post_input

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[Post]:
        """All posts, most recent first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: UUID) -> Post:
        async with self._uow_factory() as uow:
            return await self._require_post(uow, post_id)

    async def create(self, user_id: UUID, text: str | None, name: str, avatar: str) -> Post:
        """Create a post authored by ``user_id``."""
        result = validate_post_input({"text": text})
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        async with self._uow_factory() as uow:
            await require_account(uow, user_id)
            created = await uow.posts.create(
                Post(user_id=user_id, text=text or "", name=name, avatar=avatar)
            )
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
        return created

    async def delete(self, post_id: UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.is_owned_by(user_id):
                logger.warning(
                    "post_delete_denied", post_id=str(post_id), user_id=str(user_id)
                )
                raise NotAuthorizedError()

            await uow.posts.delete(post_id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id))

    async def like(self, post_id: UUID, user_id: UUID) -> Post:
        """not-liked -> liked. Liking twice is rejected."""
        async with self._uow_factory() as uow:
            await require_account(uow, user_id)
            post = await self._require_post(uow, post_id)
            if post.is_liked_by(user_id):
                raise AlreadyLikedError(str(post_id))

            post.add_like(user_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def unlike(self, post_id: UUID, user_id: UUID) -> Post:
        """liked -> not-liked. Unliking without a like is rejected."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            if not post.remove_like(user_id):
                raise NotLikedError(str(post_id))

            updated = await uow.posts.update(post)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def add_comment(
        self,
        post_id: UUID,
        user_id: UUID,
        text: str | None,
        name: str,
        avatar: str,
    ) -> Post:
        """Prepend a comment to a post."""
        result = validate_post_input({"text": text})
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        async with self._uow_factory() as uow:
            await require_account(uow, user_id)
            post = await self._require_post(uow, post_id)
            post.add_comment(
                Comment(user_id=user_id, text=text or "", name=name, avatar=avatar)
            )
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def delete_comment(self, post_id: UUID, comment_id: UUID, user_id: UUID) -> Post:
        """Remove a comment. Allowed for the comment's author and the post's author."""
        async with self._uow_factory() as uow:
            post = await self._require_post(uow, post_id)
            comment = post.find_comment(comment_id)
            if not comment:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != user_id and not post.is_owned_by(user_id):
                raise NotAuthorizedError()

            post.remove_comment(comment_id)
            updated = await uow.posts.update(post)
            await uow.commit()
            return updated  # type: ignore[no-any-return]

    async def _require_post(self, uow: IUnitOfWork, post_id: UUID) -> Post:
        post = await uow.posts.get(post_id)
        if not post:
            raise PostNotFoundError(str(post_id))
        return post
