"""Password hashing with bcrypt via passlib."""

from passlib.context import CryptContext

from core.config import settings

# bcrypt embeds a random per-hash salt in its output
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# bcrypt only looks at the first 72 bytes
_BCRYPT_MAX_BYTES = 72


def _truncate(password: str) -> str:
    encoded = password.encode("utf-8")
    if len(encoded) > _BCRYPT_MAX_BYTES:
        return encoded[:_BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore")
    return password


def hash_password(password: str) -> str:
    """Hash a plain password with a freshly generated salt."""
    return pwd_context.hash(_truncate(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash."""
    return pwd_context.verify(_truncate(plain_password), hashed_password)
