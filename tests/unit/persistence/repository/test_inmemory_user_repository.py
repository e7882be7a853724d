"""Unit tests for InMemoryUserRepository."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from signin.domain.error import UserAlreadyExistsError, UserNotFoundError
from signin.domain.value import Email, Profile, UserId
from signin.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestSave:
    """Tests for save()."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self):
        repo = InMemoryUserRepository()
        user = make_user()

        await repo.save(user)
        found = await repo.find_by_id(UserId("google-123"))

        assert found.id == user.id
        assert found.email.value == "alice@example.com"
        assert found.profile.name == "Alice"

    @pytest.mark.asyncio
    async def test_save_overwrites_existing_user(self):
        repo = InMemoryUserRepository()
        user = make_user()
        await repo.save(user)

        user.update_profile(Profile(name="Alicia"))
        await repo.save(user)

        found = await repo.find_by_id(user.id)
        assert found.profile.name == "Alicia"
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_email_bound_to_other_user_fails_without_mutation(self):
        repo = InMemoryUserRepository()
        first = make_user(user_id="first", email="shared@example.com", name="First")
        await repo.save(first)

        second = make_user(user_id="second", email="shared@example.com", name="Second")
        with pytest.raises(UserAlreadyExistsError) as exc_info:
            await repo.save(second)

        assert exc_info.value.existing_user_id == "first"
        assert not await repo.exists(UserId("second"))
        owner = await repo.find_by_email(Email(value="shared@example.com"))
        assert owner.id == UserId("first")
        assert owner.profile.name == "First"
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_changing_email_releases_old_address(self):
        repo = InMemoryUserRepository()
        user = make_user(email="old@example.com")
        await repo.save(user)

        user.update_email(Email(value="new@example.com", verified=True))
        await repo.save(user)

        assert not await repo.exists_by_email(Email(value="old@example.com"))
        assert await repo.exists_by_email(Email(value="new@example.com"))

        # The old address is free for someone else
        await repo.save(make_user(user_id="other", email="old@example.com"))
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_stored_user_is_isolated_from_caller(self):
        repo = InMemoryUserRepository()
        user = make_user()
        await repo.save(user)

        user.update_profile(Profile(name="Not Saved"))
        found = await repo.find_by_id(user.id)
        found.update_profile(Profile(name="Also Not Saved"))

        stored = await repo.find_by_id(user.id)
        assert stored.profile.name == "Alice"


class TestFind:
    """Tests for lookups."""

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self):
        repo = InMemoryUserRepository()
        with pytest.raises(UserNotFoundError):
            await repo.find_by_id(UserId("missing"))

    @pytest.mark.asyncio
    async def test_find_by_email_normalizes(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user(email="alice@example.com"))

        found = await repo.find_by_email(Email(value="  ALICE@example.com"))

        assert found.id == UserId("google-123")

    @pytest.mark.asyncio
    async def test_find_by_email_missing(self):
        repo = InMemoryUserRepository()
        with pytest.raises(UserNotFoundError):
            await repo.find_by_email(Email(value="nobody@example.com"))

    @pytest.mark.asyncio
    async def test_find_by_email_with_stale_index_entry(self):
        repo = InMemoryUserRepository()
        repo._emails["ghost@example.com"] = UserId("ghost")

        with pytest.raises(UserNotFoundError):
            await repo.find_by_email(Email(value="ghost@example.com"))

    @pytest.mark.asyncio
    async def test_found_user_keeps_pending_events(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user())

        found = await repo.find_by_id(UserId("google-123"))

        assert [e.event_type for e in found.domain_events] == ["user.registered"]


class TestDelete:
    """Tests for delete()."""

    @pytest.mark.asyncio
    async def test_delete_removes_both_entries(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user())

        await repo.delete(UserId("google-123"))

        assert not await repo.exists(UserId("google-123"))
        assert not await repo.exists_by_email(Email(value="alice@example.com"))
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        repo = InMemoryUserRepository()
        with pytest.raises(UserNotFoundError):
            await repo.delete(UserId("missing"))


class TestMembership:
    """Tests for exists() and exists_by_email()."""

    @pytest.mark.asyncio
    async def test_empty_repository(self):
        repo = InMemoryUserRepository()
        assert await repo.exists(UserId("anyone")) is False
        assert await repo.exists_by_email(Email(value="a@example.com")) is False
        assert await repo.count() == 0


class TestConcurrency:
    """Tests for concurrent access."""

    @pytest.mark.asyncio
    async def test_concurrent_tasks_claiming_same_email(self):
        repo = InMemoryUserRepository()
        users = [
            make_user(user_id=f"user-{i}", email="contested@example.com")
            for i in range(20)
        ]

        results = await asyncio.gather(
            *(repo.save(u) for u in users), return_exceptions=True
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        failures = [r for r in results if isinstance(r, UserAlreadyExistsError)]
        assert len(successes) == 1
        assert len(failures) == 19
        assert await repo.count() == 1

    def test_threads_keep_indices_consistent(self):
        repo = InMemoryUserRepository()

        def worker(n: int) -> None:
            async def run() -> None:
                user = make_user(user_id=f"user-{n}", email=f"user{n}@example.com")
                for i in range(20):
                    user.update_email(
                        Email(value=f"user{n}.{i % 3}@example.com", verified=True)
                    )
                    await repo.save(user)
                    await repo.find_by_email(user.email)
                if n % 2:
                    await repo.delete(user.id)

            asyncio.run(run())

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(worker, range(16)))

        assert len(repo._users) == 8
        assert len(repo._emails) == len(repo._users)
        for email, user_id in repo._emails.items():
            assert repo._users[user_id].email.value == email
