"""Users API routes: register, login, current identity."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_user_service
from api.schemas.user import (
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from core.rate_limit import AUTH_LIMIT, READ_LIMIT, limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Validation failed or email already exists"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def register(
    request: Request,
    body: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create an account. The avatar is derived from the email's Gravatar."""
    user = await service.register(
        name=body.name,
        email=body.email,
        password=body.password,
        password2=body.password2,
    )
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in and obtain a bearer token",
    responses={
        200: {"description": "Token issued"},
        400: {"description": "Validation failed or password incorrect"},
        404: {"description": "No user with that email"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange email and password for a `Bearer <jwt>` token."""
    token = await service.login(email=body.email, password=body.password)
    return TokenResponse(success=True, token=token)


@router.get(
    "/current",
    response_model=CurrentUserResponse,
    summary="Current user",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def current_user(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> CurrentUserResponse:
    """Return the account behind the bearer token; 401 once it has been deleted."""
    return CurrentUserResponse.model_validate(await service.get_current(user.id))
