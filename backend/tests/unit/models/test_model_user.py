"""Unit tests for :class:`catalog.models.user.User`."""

from __future__ import annotations

import pytest
from catalog.models.user import User

from tests.factories.user import DEFAULT_PASSWORD, UserFactory


class TestUserModel:
    def test_email_is_normalized(self, session):
        user = UserFactory(email="  Mixed.Case@Example.COM ")
        assert user.email == "mixed.case@example.com"

    def test_password_is_hashed_with_bcrypt(self, session):
        user = UserFactory()
        assert user.password_hash.startswith("$2")
        assert DEFAULT_PASSWORD not in user.password_hash
        assert user.verify_password(DEFAULT_PASSWORD)
        assert not user.verify_password("wrong-password")

    def test_password_is_write_only(self, session):
        user = UserFactory.build()
        with pytest.raises(AttributeError):
            _ = user.password

    def test_rejects_empty_password(self, session):
        with pytest.raises(ValueError):
            User(name="Ann", email="ann@example.com", password="")

    @pytest.mark.parametrize("email", ["", "no-at-sign", "user@localhost"])
    def test_rejects_malformed_email(self, session, email):
        with pytest.raises(ValueError):
            User(name="Ann", email=email, password="secret1")

    def test_defaults_after_insert(self, session):
        user = UserFactory()
        assert user.is_active is True
        assert user.is_email_verified is False
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_public_view_never_exposes_hash(self, session):
        view = UserFactory(name="  Ann  ").to_public_view()
        assert "password_hash" not in view
        assert view["name"] == "Ann"
        assert set(view) == {
            "id",
            "name",
            "email",
            "avatar",
            "is_active",
            "is_email_verified",
            "created_at",
            "updated_at",
        }
