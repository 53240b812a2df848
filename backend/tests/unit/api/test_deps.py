"""Unit tests for request helpers and auth decorators."""

from __future__ import annotations

import pytest
from catalog.api.deps import (
    ACCESS_TOKEN_INVALID,
    ACCESS_TOKEN_MISSING,
    bearer_token,
    parse_list_query,
    require_auth,
    require_role,
    success_response,
)
from catalog.core.errors import Unauthorized

from tests.factories.user import UserFactory


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer   abc ", "abc"),
        ("Basic abc", None),
        ("Bearer", None),
        ("", None),
    ],
)
def test_bearer_token(app, header, expected):
    with app.test_request_context(headers={"Authorization": header}):
        assert bearer_token() == expected


def test_parse_list_query(app):
    with app.test_request_context(query_string={"page": "2", "limit": "5", "search": "mug"}):
        pagination, search = parse_list_query()
    assert (pagination.page, pagination.limit) == (2, 5)
    assert pagination.sort_by == "createdAt"
    assert search == "mug"


@require_auth
def _whoami(ctx):
    return ctx.actor_id


@require_role("admin")
def _admin_only(ctx):
    return ctx.actor_id


def test_require_auth_missing_header(app):
    with app.test_request_context():
        with pytest.raises(Unauthorized) as exc:
            _whoami()
    assert exc.value.message == ACCESS_TOKEN_MISSING


def test_require_auth_invalid_token(app):
    with app.test_request_context(headers={"Authorization": "Bearer garbage"}):
        with pytest.raises(Unauthorized) as exc:
            _whoami()
    assert exc.value.message == ACCESS_TOKEN_INVALID


def test_require_auth_injects_context(app, auth_headers):
    user = UserFactory()
    with app.test_request_context(headers=auth_headers(user)):
        assert _whoami() == user.id


def test_require_auth_rejects_inactive_user(app, auth_headers):
    user = UserFactory(is_active=False)
    with app.test_request_context(headers=auth_headers(user)):
        with pytest.raises(Unauthorized):
            _whoami()


def test_require_role_admits_any_authenticated_user(app, auth_headers):
    user = UserFactory()
    with app.test_request_context(headers=auth_headers(user)):
        assert _admin_only() == user.id


def test_success_response_envelope(app):
    with app.test_request_context():
        response = success_response({"id": 1}, message="Done", status=201, meta={"page": 1})
    assert response.status_code == 201
    assert response.get_json() == {
        "success": True,
        "message": "Done",
        "data": {"id": 1},
        "meta": {"page": 1},
    }
