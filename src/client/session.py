"""Explicit client session: the bearer token and where it is persisted.

The session is handed to ``ApiClient`` which reads the token for every
outgoing request; nothing mutates shared request defaults.
"""

import time
from pathlib import Path
from typing import Any, Protocol

import structlog
from jose import JWTError, jwt

logger = structlog.get_logger()


class TokenStorage(Protocol):
    """Persistence for the bearer token."""

    def load(self) -> str | None: ...

    def save(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStorage:
    """Keeps the token for the lifetime of the process."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def load(self) -> str | None:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStorage:
    """Keeps the token in a user-only readable file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> str | None:
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(token, encoding="utf-8")
        self._path.chmod(0o600)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


def strip_scheme(token: str) -> str:
    """``"Bearer abc"`` -> ``"abc"``."""
    scheme, _, credentials = token.partition(" ")
    return credentials if credentials else scheme


def decode_token(token: str) -> dict[str, Any]:
    """Read the token's claims without verifying the signature (the server does that)."""
    return jwt.get_unverified_claims(strip_scheme(token))


def is_expired(claims: dict[str, Any], now: float | None = None) -> bool:
    exp = claims.get("exp")
    if exp is None:
        return False
    return float(exp) < (time.time() if now is None else now)


class Session:
    """The authenticated state threaded through the client's request layer."""

    def __init__(self, storage: TokenStorage) -> None:
        self._storage = storage
        self._token: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def authorize(self, token: str) -> None:
        """Adopt and persist a scheme-tagged token returned by login."""
        self._token = token
        self._storage.save(token)

    def clear(self) -> None:
        self._token = None
        self._storage.clear()

    def restore(self) -> dict[str, Any] | None:
        """Load a persisted token; returns its claims, or None if absent, unreadable or expired."""
        token = self._storage.load()
        if not token:
            return None
        try:
            claims = decode_token(token)
        except JWTError:
            logger.warning("stored_token_unreadable")
            self.clear()
            return None
        if is_expired(claims):
            logger.info("stored_token_expired")
            self.clear()
            return None
        self._token = token
        return claims

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": self._token} if self._token else {}
