"""JWT authentication provider implementation.

Tokens are signed with a shared secret (HS256 by default) and carry the
caller's public identity so protected routes never need a user lookup:

    {
        "id": "user-uuid",
        "name": "Jane Doe",
        "avatar": "//www.gravatar.com/avatar/...",
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider.

    Issues tokens on login and validates them on every protected request.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        scheme: str = settings.token_scheme,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._scheme = scheme

    @property
    def expire_minutes(self) -> int:
        return self._expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract user info.

        Args:
            token: The JWT to validate (without the scheme tag)

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )
        except ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except JWTError:
            return None

        user_id = payload.get("id")
        name = payload.get("name")

        if not user_id or not name:
            return None

        try:
            parsed_id = UUID(str(user_id))
        except ValueError:
            return None

        return TokenUser(
            id=parsed_id,
            name=name,
            avatar=payload.get("avatar") or "",
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The identity to embed in the token

        Returns:
            The generated JWT string (no scheme tag)
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            **user.to_claims(),
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def create_bearer_token(self, user: TokenUser) -> str:
        """Create a token prefixed with the scheme tag, ready for an Authorization header."""
        return f"{self._scheme} {self.create_token(user)}"
