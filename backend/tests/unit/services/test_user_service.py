# tests/unit/services/test_user_service.py
from __future__ import annotations

import pytest
from catalog.services._shared.base import ServiceContext
from catalog.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
)
from catalog.services.users import UserService, UserUpdateIn

from tests.factories.product import ProductFactory
from tests.factories.user import UserFactory


def _service_for(user) -> UserService:
    return UserService(ctx=ServiceContext(actor_id=user.id))


class TestResolveActiveUser:
    def test_returns_profile(self, session):
        user = UserFactory()
        profile = UserService().resolve_active_user(str(user.id))
        assert profile.id == user.id
        assert profile.email == user.email

    @pytest.mark.parametrize("subject", ["abc", None, "999999"])
    def test_rejects_bad_subjects(self, session, subject):
        with pytest.raises(AuthenticationError, match="Invalid or expired token"):
            UserService().resolve_active_user(subject)

    def test_rejects_inactive_user(self, session):
        user = UserFactory(is_active=False)
        with pytest.raises(AuthenticationError):
            UserService().resolve_active_user(user.id)


class TestProfile:
    def test_get_profile_requires_actor(self, session):
        with pytest.raises(AuthenticationError, match="Access token not provided"):
            UserService().get_profile()

    def test_update_profile_partial(self, session):
        user = UserFactory(name="Old", avatar=None)
        out = _service_for(user).update_profile(
            UserUpdateIn(name="New Name", avatar="https://cdn.example.com/me.png")
        )
        assert out.name == "New Name"
        assert out.avatar == "https://cdn.example.com/me.png"
        assert out.email == user.email

    def test_update_email_normalizes(self, session):
        user = UserFactory()
        out = _service_for(user).update_profile(UserUpdateIn(email="Fresh@Example.com"))
        assert out.email == "fresh@example.com"

    def test_update_email_conflict(self, session):
        UserFactory(email="taken@example.com")
        user = UserFactory()
        with pytest.raises(ConflictError, match="User with this email already exists"):
            _service_for(user).update_profile(UserUpdateIn(email="TAKEN@example.com"))

    def test_keeping_own_email_is_not_a_conflict(self, session):
        user = UserFactory(email="mine@example.com")
        out = _service_for(user).update_profile(UserUpdateIn(email="mine@example.com"))
        assert out.email == "mine@example.com"

    def test_deactivate_then_profile_is_gone(self, session):
        user = UserFactory()
        service = _service_for(user)
        service.deactivate()

        with pytest.raises(NotFoundError, match="User not found"):
            service.get_profile()
        with pytest.raises(AuthenticationError):
            UserService().resolve_active_user(user.id)


def test_stats_counts_products(session):
    user = UserFactory()
    ProductFactory(owner=user)
    ProductFactory(owner=user, is_active=False)
    ProductFactory(owner=UserFactory())

    stats = _service_for(user).stats()

    assert stats.total_products == 2
    assert stats.active_products == 1
    assert stats.member_since is not None
