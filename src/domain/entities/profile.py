"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from domain.entities.user import UserSummary

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


@dataclass
class Experience:
    """A job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """A course of study completed or in progress."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Profile:
    """Domain entity for a developer profile (one per user)."""

    user_id: UUID
    handle: str
    status: str
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: dict[str, str] = field(default_factory=dict)
    # Most recent first
    experience: list[Experience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def add_experience(self, entry: Experience) -> None:
        self.experience.insert(0, entry)

    def remove_experience(self, exp_id: UUID) -> bool:
        """Remove the entry with ``exp_id``; False (and no change) if absent."""
        for index, entry in enumerate(self.experience):
            if entry.id == exp_id:
                del self.experience[index]
                return True
        return False

    def add_education(self, entry: Education) -> None:
        self.education.insert(0, entry)

    def remove_education(self, edu_id: UUID) -> bool:
        """Remove the entry with ``edu_id``; False (and no change) if absent."""
        for index, entry in enumerate(self.education):
            if entry.id == edu_id:
                del self.education[index]
                return True
        return False


@dataclass(frozen=True, slots=True)
class ProfileView:
    """Read-only value object: a Profile bundled with its owner's summary."""

    profile: Profile
    user: UserSummary | None
