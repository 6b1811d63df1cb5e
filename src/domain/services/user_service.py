"""User service layer: registration and login."""

from collections.abc import Callable
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    AuthenticationError,
    EmailExistsError,
    ErrorCode,
    PasswordIncorrectError,
    UserNotFoundError,
    ValidationFailedError,
)
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validators import validate_login_input, validate_register_input
from infrastructure.auth.avatar import gravatar_url
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.passwords import hash_password, verify_password
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()


def is_unique_violation(exc: IntegrityError) -> bool:
    """True for unique-constraint failures; NOT NULL and FK failures are not."""
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig


async def require_account(uow: IUnitOfWork, user_id: UUID) -> User:
    """Load the token's user. A token outliving its account is rejected as 401."""
    user = await uow.users.get(user_id)
    if not user:
        raise AuthenticationError(
            message="User no longer exists",
            error_code=ErrorCode.INVALID_TOKEN,
        )
    return user  # type: ignore[no-any-return]


class UserService:
    """Service layer for account business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        auth_provider: JWTAuthProvider,
    ) -> None:
        self._uow_factory = uow_factory
        self._auth_provider = auth_provider

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        password2: str | None,
    ) -> User:
        """Create an account. The email must not already be on file.

        A concurrent registration of the same email loses at the unique
        index and is reported as ``EmailExistsError`` as well.
        """
        result = validate_register_input(
            {"name": name, "email": email, "password": password, "password2": password2}
        )
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        name, email, password = str(name), str(email), str(password)

        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise EmailExistsError(email)

            user = User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                avatar=gravatar_url(email),
            )
            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                if is_unique_violation(exc):
                    raise EmailExistsError(email) from exc
                raise

        logger.info("user_registered", user_id=str(created.id))
        return created

    async def login(self, email: str | None, password: str | None) -> str:
        """Check credentials and return a scheme-tagged bearer token."""
        result = validate_login_input({"email": email, "password": password})
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        email, password = str(email), str(password)

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)

        if not user:
            raise UserNotFoundError()

        if not verify_password(password, user.password_hash):
            logger.info("login_failed", user_id=str(user.id))
            raise PasswordIncorrectError()

        logger.info("login_succeeded", user_id=str(user.id))
        return self._auth_provider.create_bearer_token(
            TokenUser(id=user.id, name=user.name, avatar=user.avatar)
        )

    async def get_current(self, user_id: UUID) -> User:
        """The stored account behind a validated token."""
        async with self._uow_factory() as uow:
            return await require_account(uow, user_id)
