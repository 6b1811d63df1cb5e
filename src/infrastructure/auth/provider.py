"""Identity carried by authentication tokens."""

from dataclasses import asdict, dataclass
from typing import Any
from uuid import UUID


@dataclass
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: UUID
    name: str
    avatar: str = ""

    def to_claims(self) -> dict[str, Any]:
        """Identity claims carried inside the token payload."""
        claims = asdict(self)
        claims["id"] = str(self.id)
        return claims

