"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_profile_service
from api.schemas.common import SuccessResponse
from api.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])

_NOT_FOUND = {404: {"description": "No profile"}}


@router.get(
    "",
    response_model=ProfileResponse,
    summary="Get own profile",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_own_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the authenticated user's profile."""
    return ProfileResponse.from_view(await service.get_own(user.id))


@router.get(
    "/all",
    response_model=list[ProfileResponse],
    summary="List all profiles",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    """Get every profile."""
    return [ProfileResponse.from_view(view) for view in await service.get_all()]


@router.get(
    "/handle/{handle}",
    response_model=ProfileResponse,
    summary="Get profile by handle",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_handle(
    request: Request,
    handle: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_view(await service.get_by_handle(handle))


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get profile by user ID",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_view(await service.get_by_user(user_id))


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or edit own profile",
    responses={
        200: {"description": "Profile created or updated"},
        400: {"description": "Validation failed or handle already exists"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Create the profile, or update only the fields sent. Skills are comma-separated."""
    view = await service.upsert(user.id, body.model_dump(exclude_unset=True))
    return ProfileResponse.from_view(view)


@router.post(
    "/experience",
    response_model=ProfileResponse,
    summary="Add experience",
    responses={400: {"description": "Validation failed"}, **_NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an experience entry to the top of the list."""
    view = await service.add_experience(user.id, body.model_dump())
    return ProfileResponse.from_view(view)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Delete experience",
    responses={404: {"description": "No profile or no such experience"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_experience(
    request: Request,
    exp_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_view(await service.delete_experience(user.id, exp_id))


@router.post(
    "/education",
    response_model=ProfileResponse,
    summary="Add education",
    responses={400: {"description": "Validation failed"}, **_NOT_FOUND},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an education entry to the top of the list."""
    view = await service.add_education(user.id, body.model_dump())
    return ProfileResponse.from_view(view)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Delete education",
    responses={404: {"description": "No profile or no such education"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_education(
    request: Request,
    edu_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    return ProfileResponse.from_view(await service.delete_education(user.id, edu_id))


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete account",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Delete the caller's profile, user record and posts."""
    await service.delete_account(user.id)
    return SuccessResponse(success=True)
