"""Unit tests for ProfileService."""

from datetime import date
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    AuthenticationError,
    EducationNotFoundError,
    ErrorCode,
    ExperienceNotFoundError,
    HandleExistsError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import Education, Experience, Profile
from domain.entities.user import User
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    return ProfileService(lambda: uow)


@pytest.fixture
def owner(user_id: UUID) -> User:
    return User(
        name="Jane Doe",
        email="jane@example.com",
        password_hash="hash",
        avatar="//avatar",
        id=user_id,
    )


def _payload(**overrides):
    data = {"handle": "jane", "status": "Developer", "skills": "python, go ,,rust"}
    data.update(overrides)
    return data


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_own_includes_owner_summary(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        uow.profiles.get_by_user.return_value = Profile(
            user_id=user_id, handle="jane", status="Dev"
        )
        uow.users.get.return_value = owner

        view = await service.get_own(user_id)

        assert view.profile.handle == "jane"
        assert view.user is not None
        assert view.user.name == "Jane Doe"
        assert view.user.avatar == "//avatar"

    @pytest.mark.asyncio
    async def test_get_own_missing(self, service: ProfileService, uow: FakeUnitOfWork, user_id):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError) as exc:
            await service.get_own(user_id)

        assert exc.value.status_code == 404
        assert exc.value.details == {"no_profile": "There is no profile for this user"}

    @pytest.mark.asyncio
    async def test_get_by_handle_missing(self, service: ProfileService, uow: FakeUnitOfWork):
        uow.profiles.get_by_handle.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.get_by_handle("ghost")

    @pytest.mark.asyncio
    async def test_get_all_empty(self, service: ProfileService, uow: FakeUnitOfWork):
        uow.profiles.get_all.return_value = []

        with pytest.raises(ProfileNotFoundError) as exc:
            await service.get_all()

        assert exc.value.details == {"no_profile": "There are no profiles"}

    @pytest.mark.asyncio
    async def test_get_all_batches_owner_lookup(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        orphan_id = uuid4()
        uow.profiles.get_all.return_value = [
            Profile(user_id=user_id, handle="jane", status="Dev"),
            Profile(user_id=orphan_id, handle="ghost", status="Dev"),
        ]
        uow.users.get_many.return_value = {user_id: owner}

        views = await service.get_all()

        uow.users.get_many.assert_called_once_with([user_id, orphan_id])
        assert views[0].user is not None
        assert views[1].user is None


class TestUpsert:
    @pytest.mark.asyncio
    async def test_creates_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        uow.profiles.get_by_handle.return_value = None
        uow.profiles.get_by_user.return_value = None
        uow.profiles.create.side_effect = lambda profile: profile
        uow.users.get.return_value = owner

        view = await service.upsert(
            user_id, _payload(twitter="https://twitter.com/jane", website="example.com")
        )

        created = uow.profiles.create.call_args.args[0]
        assert created.user_id == user_id
        assert created.skills == ["python", "go", "rust"]
        assert created.social == {"twitter": "https://twitter.com/jane"}
        assert created.website == "example.com"
        assert view.profile is created
        assert uow.committed

    @pytest.mark.asyncio
    async def test_updates_only_supplied_fields(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        existing = Profile(
            user_id=user_id,
            handle="jane",
            status="Junior",
            company="Acme",
            social={"youtube": "https://youtube.com/jane"},
        )
        uow.profiles.get_by_handle.return_value = existing
        uow.profiles.get_by_user.return_value = existing
        uow.profiles.update.side_effect = lambda profile: profile
        uow.users.get.return_value = owner

        view = await service.upsert(user_id, _payload(status="Senior"))

        uow.profiles.create.assert_not_called()
        assert view.profile.status == "Senior"
        assert view.profile.company == "Acme"
        # Social links are rewritten from the payload
        assert view.profile.social == {}

    @pytest.mark.asyncio
    async def test_handle_taken_by_someone_else(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        uow.profiles.get_by_handle.return_value = Profile(
            user_id=other_user_id, handle="jane", status="Dev"
        )

        with pytest.raises(HandleExistsError) as exc:
            await service.upsert(user_id, _payload())

        assert exc.value.details == {"handle": "That handle already exists"}
        uow.profiles.create.assert_not_called()
        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_handle_taken_on_edit(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, other_user_id: UUID
    ):
        uow.profiles.get_by_handle.return_value = Profile(
            user_id=other_user_id, handle="taken", status="Dev"
        )
        uow.profiles.get_by_user.return_value = Profile(
            user_id=user_id, handle="jane", status="Dev"
        )

        with pytest.raises(HandleExistsError):
            await service.upsert(user_id, _payload(handle="taken"))

        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_payload(self, service: ProfileService, uow: FakeUnitOfWork, user_id):
        with pytest.raises(ValidationFailedError) as exc:
            await service.upsert(user_id, {"handle": "j", "website": "nope"})

        assert set(exc.value.details) == {"handle", "status", "skills", "website"}
        uow.profiles.get_by_handle.assert_not_called()

    @pytest.mark.asyncio
    async def test_skills_with_no_items(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        with pytest.raises(ValidationFailedError) as exc:
            await service.upsert(user_id, _payload(skills=" , ,,"))

        assert exc.value.details == {"skills": "Skills field is required"}
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_deleted_account_rejected(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get.return_value = None

        with pytest.raises(AuthenticationError) as exc:
            await service.upsert(user_id, _payload())

        assert exc.value.status_code == 401
        assert exc.value.error_code == ErrorCode.INVALID_TOKEN
        uow.profiles.create.assert_not_called()
        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_handle_claim(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_handle.return_value = None
        uow.profiles.get_by_user.return_value = None
        uow.profiles.create.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("UNIQUE constraint failed: profiles.handle")
        )

        with pytest.raises(HandleExistsError):
            await service.upsert(user_id, _payload())

        assert uow.rolled_back
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_handle.return_value = None
        uow.profiles.get_by_user.return_value = None
        uow.profiles.create.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("FOREIGN KEY constraint failed")
        )

        with pytest.raises(IntegrityError):
            await service.upsert(user_id, _payload())

        assert uow.rolled_back


class TestExperience:
    @pytest.mark.asyncio
    async def test_add_prepends(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        old = Experience(title="Junior", company="Acme", from_date=date(2018, 1, 1))
        profile = Profile(user_id=user_id, handle="jane", status="Dev", experience=[old])
        uow.profiles.get_by_user.return_value = profile
        uow.profiles.update.side_effect = lambda p: p
        uow.users.get.return_value = owner

        view = await service.add_experience(
            user_id, {"title": "Senior", "company": "Acme", "from_date": date(2021, 1, 1)}
        )

        assert [e.title for e in view.profile.experience] == ["Senior", "Junior"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_add_without_profile(self, service: ProfileService, uow: FakeUnitOfWork, user_id):
        uow.profiles.get_by_user.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.add_experience(
                user_id, {"title": "Dev", "company": "Acme", "from_date": date(2021, 1, 1)}
            )

    @pytest.mark.asyncio
    async def test_add_invalid(self, service: ProfileService, uow: FakeUnitOfWork, user_id):
        with pytest.raises(ValidationFailedError):
            await service.add_experience(user_id, {"title": "Dev"})

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, service: ProfileService, uow: FakeUnitOfWork, user_id):
        entry = Experience(title="Dev", company="Acme", from_date=date(2018, 1, 1))
        uow.profiles.get_by_user.return_value = Profile(
            user_id=user_id, handle="jane", status="Dev", experience=[entry]
        )

        with pytest.raises(ExperienceNotFoundError):
            await service.delete_experience(user_id, uuid4())

        uow.profiles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        entry = Experience(title="Dev", company="Acme", from_date=date(2018, 1, 1))
        uow.profiles.get_by_user.return_value = Profile(
            user_id=user_id, handle="jane", status="Dev", experience=[entry]
        )
        uow.profiles.update.side_effect = lambda p: p
        uow.users.get.return_value = owner

        view = await service.delete_experience(user_id, entry.id)

        assert view.profile.experience == []


class TestEducation:
    @pytest.mark.asyncio
    async def test_add(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID, owner: User
    ):
        uow.profiles.get_by_user.return_value = Profile(user_id=user_id, handle="j", status="D")
        uow.profiles.update.side_effect = lambda p: p
        uow.users.get.return_value = owner

        view = await service.add_education(
            user_id,
            {
                "school": "MIT",
                "degree": "BSc",
                "field_of_study": "CS",
                "from_date": date(2014, 9, 1),
                "current": True,
            },
        )

        assert view.profile.education[0].school == "MIT"
        assert view.profile.education[0].current is True

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, service: ProfileService, uow: FakeUnitOfWork, user_id):
        entry = Education(
            school="MIT", degree="BSc", field_of_study="CS", from_date=date(2014, 9, 1)
        )
        uow.profiles.get_by_user.return_value = Profile(
            user_id=user_id, handle="jane", status="Dev", education=[entry]
        )

        with pytest.raises(EducationNotFoundError):
            await service.delete_education(user_id, uuid4())


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_removes_posts_profile_and_user(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.posts.delete_by_user.return_value = 2

        await service.delete_account(user_id)

        uow.posts.delete_by_user.assert_called_once_with(user_id)
        uow.profiles.delete_by_user.assert_called_once_with(user_id)
        uow.users.delete.assert_called_once_with(user_id)
        assert uow.committed
