"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """A user's like on a post."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)


@dataclass
class Comment:
    """A comment left on a post, with the author's name/avatar snapshot."""

    user_id: UUID
    text: str
    name: str
    avatar: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post.

    ``likes`` and ``comments`` are embedded lists kept most-recent-first.
    A user appears at most once in ``likes``.
    """

    user_id: UUID
    text: str
    name: str
    avatar: str
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> Like:
        like = Like(user_id=user_id)
        self.likes.insert(0, like)
        return like

    def remove_like(self, user_id: UUID) -> bool:
        """Remove ``user_id``'s like; False (and no change) if there is none."""
        for index, like in enumerate(self.likes):
            if like.user_id == user_id:
                del self.likes[index]
                return True
        return False

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def find_comment(self, comment_id: UUID) -> Comment | None:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def remove_comment(self, comment_id: UUID) -> bool:
        """Remove the comment with ``comment_id``; False (and no change) if absent."""
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                del self.comments[index]
                return True
        return False
