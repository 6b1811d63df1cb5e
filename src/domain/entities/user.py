"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for an account holder."""

    name: str
    email: str
    password_hash: str
    avatar: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True, slots=True)
class UserSummary:
    """Read-only value object: the public face of a user shown next to content."""

    id: UUID
    name: str
    avatar: str
