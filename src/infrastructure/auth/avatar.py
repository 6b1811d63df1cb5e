"""Gravatar URL derivation."""

import hashlib
from urllib.parse import urlencode

from core.config import settings

GRAVATAR_BASE = "//www.gravatar.com/avatar/"


def gravatar_url(
    email: str,
    size: int = settings.gravatar_size,
    rating: str = settings.gravatar_rating,
    default: str = settings.gravatar_default,
) -> str:
    """Build the protocol-relative Gravatar URL for an email address."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": size, "r": rating, "d": default})
    return f"{GRAVATAR_BASE}{digest}?{query}"
