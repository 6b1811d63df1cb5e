"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Post]:
        """Get all posts, most recent first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Overwrite the post's likes and comments."""
        stmt = select(PostModel).where(PostModel.id == post.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Post {post.id} not found")

        model.likes = [self._like_to_doc(like) for like in post.likes]
        model.comments = [self._comment_to_doc(c) for c in post.comments]

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID) -> bool:
        """Delete a post."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post authored by a user."""
        stmt = delete(PostModel).where(PostModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    @staticmethod
    def _like_to_doc(like: Like) -> dict[str, Any]:
        return {"id": str(like.id), "user_id": str(like.user_id)}

    @staticmethod
    def _comment_to_doc(comment: Comment) -> dict[str, Any]:
        return {
            "id": str(comment.id),
            "user_id": str(comment.user_id),
            "text": comment.text,
            "name": comment.name,
            "avatar": comment.avatar,
            "created_at": comment.created_at.isoformat(),
        }

    @staticmethod
    def _comment_from_doc(doc: dict[str, Any]) -> Comment:
        return Comment(
            id=UUID(doc["id"]),
            user_id=UUID(doc["user_id"]),
            text=doc["text"],
            name=doc["name"],
            avatar=doc.get("avatar") or "",
            created_at=datetime.fromisoformat(doc["created_at"]),
        )

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[
                Like(id=UUID(doc["id"]), user_id=UUID(doc["user_id"]))
                for doc in model.likes or []
            ],
            comments=[self._comment_from_doc(doc) for doc in model.comments or []],
            created_at=model.created_at,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Convert domain entity to ORM model."""
        return PostModel(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            name=entity.name,
            avatar=entity.avatar,
            likes=[self._like_to_doc(like) for like in entity.likes],
            comments=[self._comment_to_doc(c) for c in entity.comments],
            created_at=entity.created_at,
        )
