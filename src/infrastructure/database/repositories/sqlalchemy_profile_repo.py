"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Education, Experience, Profile
from infrastructure.database.models import ProfileModel


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        stmt = select(ProfileModel).where(ProfileModel.handle == handle)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get every profile, ordered by handle."""
        stmt = select(ProfileModel).order_by(ProfileModel.handle)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Overwrite the stored profile document."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.handle = profile.handle
        model.status = profile.status
        model.company = profile.company
        model.website = profile.website
        model.location = profile.location
        model.bio = profile.bio
        model.github_username = profile.github_username
        # Fresh containers so the JSON columns are flagged dirty
        model.skills = list(profile.skills)
        model.social = dict(profile.social)
        model.experience = [self._experience_to_doc(e) for e in profile.experience]
        model.education = [self._education_to_doc(e) for e in profile.education]

        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete a user's profile."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    @staticmethod
    def _experience_to_doc(entry: Experience) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "title": entry.title,
            "company": entry.company,
            "location": entry.location,
            "from_date": entry.from_date.isoformat(),
            "to_date": entry.to_date.isoformat() if entry.to_date else None,
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _experience_from_doc(doc: dict[str, Any]) -> Experience:
        return Experience(
            id=UUID(doc["id"]),
            title=doc["title"],
            company=doc["company"],
            location=doc.get("location"),
            from_date=date.fromisoformat(doc["from_date"]),
            to_date=_date_or_none(doc.get("to_date")),
            current=bool(doc.get("current", False)),
            description=doc.get("description"),
        )

    @staticmethod
    def _education_to_doc(entry: Education) -> dict[str, Any]:
        return {
            "id": str(entry.id),
            "school": entry.school,
            "degree": entry.degree,
            "field_of_study": entry.field_of_study,
            "from_date": entry.from_date.isoformat(),
            "to_date": entry.to_date.isoformat() if entry.to_date else None,
            "current": entry.current,
            "description": entry.description,
        }

    @staticmethod
    def _education_from_doc(doc: dict[str, Any]) -> Education:
        return Education(
            id=UUID(doc["id"]),
            school=doc["school"],
            degree=doc["degree"],
            field_of_study=doc["field_of_study"],
            from_date=date.fromisoformat(doc["from_date"]),
            to_date=_date_or_none(doc.get("to_date")),
            current=bool(doc.get("current", False)),
            description=doc.get("description"),
        )

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            handle=model.handle,
            status=model.status,
            company=model.company,
            website=model.website,
            location=model.location,
            bio=model.bio,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=dict(model.social or {}),
            experience=[self._experience_from_doc(d) for d in model.experience or []],
            education=[self._education_from_doc(d) for d in model.education or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            handle=entity.handle,
            status=entity.status,
            company=entity.company,
            website=entity.website,
            location=entity.location,
            bio=entity.bio,
            github_username=entity.github_username,
            skills=list(entity.skills),
            social=dict(entity.social),
            experience=[self._experience_to_doc(e) for e in entity.experience],
            education=[self._education_to_doc(e) for e in entity.education],
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
