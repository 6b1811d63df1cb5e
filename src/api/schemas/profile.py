"""Pydantic schemas for the Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from api.schemas.common import UserSummaryResponse
from domain.entities.profile import ProfileView


class ProfileUpsert(BaseModel):
    """Create/edit payload. Only fields present are written; social links are flat."""

    handle: str | None = None
    status: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: str | list[str] | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceCreate(BaseModel):
    """Experience entry payload."""

    title: str | None = None
    company: str | None = None
    location: str | None = None
    from_date: date | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class EducationCreate(BaseModel):
    """Education entry payload."""

    school: str | None = None
    degree: str | None = None
    field_of_study: str | None = None
    from_date: date | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    school: str
    degree: str
    field_of_study: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class SocialLinks(BaseModel):
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user: UserSummaryResponse | None = None
    handle: str
    status: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str]
    social: SocialLinks
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: ProfileView) -> "ProfileResponse":
        profile = view.profile
        return cls(
            id=profile.id,
            user=UserSummaryResponse.model_validate(view.user) if view.user else None,
            handle=profile.handle,
            status=profile.status,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            github_username=profile.github_username,
            skills=profile.skills,
            social=SocialLinks(**profile.social),
            experience=[ExperienceResponse.model_validate(e) for e in profile.experience],
            education=[EducationResponse.model_validate(e) for e in profile.education],
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )
