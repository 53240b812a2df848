"""Unit tests for UserRepository."""

import pytest
from catalog.repositories.user import UserRepository

from tests.factories.user import UserFactory


class TestUserRepository:
    """Ensure ``UserRepository`` performs core persistence operations."""

    @pytest.fixture()
    def repo(self):
        return UserRepository()

    def test_get_by_email_is_case_insensitive(self, repo, session):
        u = UserFactory(email="alice@example.com")

        fetched = repo.get_by_email("  ALICE@Example.com")
        assert fetched is not None
        assert fetched.id == u.id

    def test_exists_by_email(self, repo, session):
        u = UserFactory(email="bob@example.com")

        assert repo.exists_by_email("Bob@Example.com")
        assert not repo.exists_by_email("nonexistent@example.com")
        assert not repo.exists_by_email("bob@example.com", exclude_id=u.id)

    def test_get_active_skips_deactivated(self, repo, session):
        active = UserFactory()
        inactive = UserFactory(is_active=False)

        assert repo.get_active(active.id) is not None
        assert repo.get_active(inactive.id) is None

    def test_deactivate(self, repo, session):
        u = UserFactory()
        repo.deactivate(u)
        assert repo.get_active(u.id) is None

    def test_safe_update_fields(self, repo, session):
        """Assign whitelisted fields and reject disallowed keys."""
        u = UserFactory()

        updated = repo.assign_updates(u, {"name": "New Name"})
        assert updated.name == "New Name"

        with pytest.raises(ValueError):
            repo.assign_updates(u, {"password_hash": "x"})
