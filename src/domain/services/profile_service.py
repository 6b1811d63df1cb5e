"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    EducationNotFoundError,
    ExperienceNotFoundError,
    HandleExistsError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import (
    SOCIAL_NETWORKS,
    Education,
    Experience,
    Profile,
    ProfileView,
)
from domain.entities.user import User, UserSummary
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.user_service import is_unique_violation, require_account
from domain.validators import (
    is_empty,
    parse_skills,
    validate_education_input,
    validate_experience_input,
    validate_profile_input,
)

logger = structlog.get_logger()

# Scalar profile fields copied from the payload when present
PROFILE_FIELDS = (
    "handle",
    "status",
    "company",
    "website",
    "location",
    "bio",
    "github_username",
)


def _summary(user: User | None) -> UserSummary | None:
    if user is None:
        return None
    return UserSummary(id=user.id, name=user.name, avatar=user.avatar)


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    # --- Lookups ---

    async def get_own(self, user_id: UUID) -> ProfileView:
        """Get the caller's profile."""
        return await self.get_by_user(user_id)

    async def get_by_user(self, user_id: UUID) -> ProfileView:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)
            if not profile:
                raise ProfileNotFoundError()
            return await self._view(uow, profile)

    async def get_by_handle(self, handle: str) -> ProfileView:
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_handle(handle)
            if not profile:
                raise ProfileNotFoundError()
            return await self._view(uow, profile)

    async def get_all(self) -> list[ProfileView]:
        """Get every profile with its owner summary (batch-fetched)."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            if not profiles:
                raise ProfileNotFoundError("There are no profiles")
            users = await uow.users.get_many([p.user_id for p in profiles])
            return [
                ProfileView(profile=p, user=_summary(users.get(p.user_id)))
                for p in profiles
            ]

    # --- Create / edit ---

    async def upsert(self, user_id: UUID, data: Mapping[str, Any]) -> ProfileView:
        """Create the caller's profile, or update the fields present in ``data``."""
        result = validate_profile_input(data)
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        fields = {
            name: data[name] for name in PROFILE_FIELDS if not is_empty(data.get(name))
        }
        if not is_empty(data.get("skills")):
            fields["skills"] = parse_skills(data["skills"])
        # Social links are always rewritten as a whole, possibly empty
        fields["social"] = {
            network: data[network]
            for network in SOCIAL_NETWORKS
            if not is_empty(data.get(network))
        }

        async with self._uow_factory() as uow:
            await require_account(uow, user_id)
            holder = await uow.profiles.get_by_handle(fields["handle"])
            if holder and holder.user_id != user_id:
                raise HandleExistsError(fields["handle"])

            profile = await uow.profiles.get_by_user(user_id)
            try:
                if profile:
                    for name, value in fields.items():
                        setattr(profile, name, value)
                    profile.updated_at = datetime.utcnow()
                    saved = await uow.profiles.update(profile)
                else:
                    saved = await uow.profiles.create(Profile(user_id=user_id, **fields))
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # Lost a race for the handle between the check above and the write
                if is_unique_violation(exc) and "handle" in str(exc.orig).lower():
                    raise HandleExistsError(fields["handle"]) from exc
                raise

            logger.info(
                "profile_updated" if profile else "profile_created",
                user_id=str(user_id),
                handle=saved.handle,
            )
            return await self._view(uow, saved)

    # --- Experience / education ---

    async def add_experience(self, user_id: UUID, data: Mapping[str, Any]) -> ProfileView:
        """Prepend an experience entry to the caller's profile."""
        result = validate_experience_input(data)
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_experience(
                Experience(
                    title=data["title"],
                    company=data["company"],
                    location=data.get("location"),
                    from_date=data["from_date"],
                    to_date=data.get("to_date"),
                    current=bool(data.get("current", False)),
                    description=data.get("description"),
                )
            )
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return await self._view(uow, saved)

    async def delete_experience(self, user_id: UUID, exp_id: UUID) -> ProfileView:
        """Remove an experience entry by ID; unknown IDs leave the list untouched."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.remove_experience(exp_id):
                raise ExperienceNotFoundError(str(exp_id))
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return await self._view(uow, saved)

    async def add_education(self, user_id: UUID, data: Mapping[str, Any]) -> ProfileView:
        """Prepend an education entry to the caller's profile."""
        result = validate_education_input(data)
        if not result.is_valid:
            raise ValidationFailedError(result.errors)

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.add_education(
                Education(
                    school=data["school"],
                    degree=data["degree"],
                    field_of_study=data["field_of_study"],
                    from_date=data["from_date"],
                    to_date=data.get("to_date"),
                    current=bool(data.get("current", False)),
                    description=data.get("description"),
                )
            )
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return await self._view(uow, saved)

    async def delete_education(self, user_id: UUID, edu_id: UUID) -> ProfileView:
        """Remove an education entry by ID; unknown IDs leave the list untouched."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.remove_education(edu_id):
                raise EducationNotFoundError(str(edu_id))
            saved = await uow.profiles.update(profile)
            await uow.commit()
            return await self._view(uow, saved)

    # --- Account removal ---

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the caller's posts, profile and user record in one transaction."""
        async with self._uow_factory() as uow:
            removed_posts = await uow.posts.delete_by_user(user_id)
            await uow.profiles.delete_by_user(user_id)
            await uow.users.delete(user_id)
            await uow.commit()

        logger.info("account_deleted", user_id=str(user_id), removed_posts=removed_posts)

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError()
        return profile

    async def _view(self, uow: IUnitOfWork, profile: Profile) -> ProfileView:
        owner = await uow.users.get(profile.user_id)
        return ProfileView(profile=profile, user=_summary(owner))
