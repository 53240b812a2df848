"""Unit tests for request/response schemas."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
from catalog.schemas import (
    ListQuerySchema,
    ProductCreateSchema,
    ProductSchema,
    ProductUpdateSchema,
    RegisterSchema,
    UserUpdateSchema,
    build_meta,
)
from marshmallow import ValidationError


class TestListQuerySchema:
    def test_defaults(self):
        data = ListQuerySchema().load({})
        assert data == {
            "page": 1,
            "limit": 10,
            "search": None,
            "sort_by": "createdAt",
            "sort_order": "DESC",
        }

    def test_limit_is_clamped(self):
        assert ListQuerySchema(max_limit=100).load({"limit": "500"})["limit"] == 100

    @pytest.mark.parametrize("params", [{"limit": "0"}, {"page": "0"}, {"page": "x"}])
    def test_rejects_non_positive_numbers(self, params):
        with pytest.raises(ValidationError):
            ListQuerySchema().load(params)

    def test_sort_order_is_case_insensitive(self):
        assert ListQuerySchema().load({"sortOrder": "asc"})["sort_order"] == "ASC"

    def test_unknown_sort_field_rejected(self):
        with pytest.raises(ValidationError) as exc:
            ListQuerySchema().load({"sortBy": "password"})
        assert "sortBy" in exc.value.messages

    def test_blank_search_is_dropped(self):
        assert ListQuerySchema().load({"search": "   "})["search"] is None
        assert ListQuerySchema().load({"search": " mug "})["search"] == "mug"

    def test_unknown_params_ignored(self):
        assert "foo" not in ListQuerySchema().load({"foo": "bar"})


def test_build_meta_uses_camel_case():
    assert build_meta(total=21, page=2, limit=10, total_pages=3) == {
        "total": 21,
        "page": 2,
        "limit": 10,
        "totalPages": 3,
    }


class TestProductSchemas:
    def test_create_defaults(self):
        data = ProductCreateSchema().load({"name": "Mug", "price": "9.5"})
        assert data["price"] == Decimal("9.50")
        assert data["images"] == []
        assert data["description"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "M", "price": 1},
            {"name": "Mug", "price": -1},
            {"name": "Mug"},
            {"name": "Mug", "price": 1, "owner": 3},
        ],
    )
    def test_create_rejects_invalid(self, payload):
        with pytest.raises(ValidationError):
            ProductCreateSchema().load(payload)

    def test_update_requires_a_field(self):
        with pytest.raises(ValidationError) as exc:
            ProductUpdateSchema().load({})
        assert exc.value.messages == {"_schema": ["At least one field must be provided."]}

    def test_update_accepts_camel_case_flag(self):
        assert ProductUpdateSchema().load({"isActive": False}) == {"is_active": False}

    def test_dump_is_camel_case(self):
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        product = SimpleNamespace(
            id=1,
            name="Mug",
            description=None,
            price=Decimal("9.99"),
            images=["a.png"],
            user_id=7,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        dumped = ProductSchema().dump(product)
        assert dumped["price"] == 9.99
        assert dumped["userId"] == 7
        assert dumped["isActive"] is True
        assert dumped["createdAt"].startswith("2026-01-01")


class TestUserSchemas:
    def test_register_password_bounds(self):
        with pytest.raises(ValidationError) as exc:
            RegisterSchema().load({"name": "Ann", "email": "ann@example.com", "password": "123"})
        assert "password" in exc.value.messages

    def test_register_rejects_bad_email(self):
        with pytest.raises(ValidationError):
            RegisterSchema().load({"name": "Ann", "email": "nope", "password": "secret1"})

    def test_update_requires_a_field(self):
        with pytest.raises(ValidationError):
            UserUpdateSchema().load({})


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_names_rejected_everywhere(name):
    loads = [
        lambda: RegisterSchema().load(
            {"name": name, "email": "ann@example.com", "password": "secret1"}
        ),
        lambda: UserUpdateSchema().load({"name": name}),
        lambda: ProductCreateSchema().load({"name": name, "price": 1}),
        lambda: ProductUpdateSchema().load({"name": name}),
    ]
    for load in loads:
        with pytest.raises(ValidationError) as exc:
            load()
        assert "name" in exc.value.messages


def test_register_accepts_single_character_name():
    data = RegisterSchema().load({"name": "A", "email": "a@x.com", "password": "secret1"})
    assert data["name"] == "A"


def test_update_keeps_two_character_minimum():
    with pytest.raises(ValidationError):
        UserUpdateSchema().load({"name": "A"})


def test_password_limit_counts_utf8_bytes():
    ok = "a" * 72
    too_long = "é" * 40  # 80 bytes
    assert RegisterSchema().load({"name": "Ann", "email": "a@x.com", "password": ok})
    with pytest.raises(ValidationError) as exc:
        RegisterSchema().load({"name": "Ann", "email": "a@x.com", "password": too_long})
    assert exc.value.messages["password"] == ["Password must be at most 72 bytes."]


def test_page_upper_bound():
    assert ListQuerySchema().load({"page": str(2**31 - 1)})["page"] == 2**31 - 1
    with pytest.raises(ValidationError) as exc:
        ListQuerySchema().load({"page": str(10**20)})
    assert "page" in exc.value.messages
