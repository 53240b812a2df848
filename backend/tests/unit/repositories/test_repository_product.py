"""Unit tests for ProductRepository search, sorting and counters."""

from __future__ import annotations

from decimal import Decimal

import pytest
from catalog.repositories.base import MAX_PK, Pagination, parse_sort_tokens
from catalog.repositories.product import ProductRepository

from tests.factories.product import ProductFactory
from tests.factories.user import UserFactory


@pytest.fixture()
def repo():
    return ProductRepository()


@pytest.fixture()
def owner(session):
    return UserFactory()


def test_parse_sort_tokens():
    assert parse_sort_tokens(["-created_at", "name", " ", "-"]) == [
        ("created_at", True),
        ("name", False),
    ]


def test_search_scoped_to_owner_and_active(repo, owner, session):
    mine = ProductFactory(owner=owner, name="Desk Lamp")
    ProductFactory(owner=owner, name="Old Lamp", is_active=False)
    ProductFactory(owner=UserFactory(), name="Foreign Lamp")

    page = repo.search_for_owner(owner.id, Pagination(page=1, limit=10))

    assert [p.id for p in page.items] == [mine.id]
    assert page.total == 1


def test_search_matches_name_or_description_case_insensitively(repo, owner, session):
    by_name = ProductFactory(owner=owner, name="Blue CHAIR", description=None)
    by_desc = ProductFactory(owner=owner, name="Stool", description="a small chair for kids")
    ProductFactory(owner=owner, name="Table", description="wooden")

    page = repo.search_for_owner(
        owner.id, Pagination(page=1, limit=10, sort=["name"]), search="chair"
    )

    assert {p.id for p in page.items} == {by_name.id, by_desc.id}


def test_search_treats_wildcards_literally(repo, owner, session):
    literal = ProductFactory(owner=owner, name="100% cotton")
    ProductFactory(owner=owner, name="1000 cotton swabs")

    page = repo.search_for_owner(owner.id, Pagination(page=1, limit=10), search="100%")

    assert [p.id for p in page.items] == [literal.id]


def test_sorting_by_price_with_pk_tiebreaker(repo, owner, session):
    a = ProductFactory(owner=owner, price=Decimal("5.00"))
    b = ProductFactory(owner=owner, price=Decimal("5.00"))
    c = ProductFactory(owner=owner, price=Decimal("1.00"))

    asc = repo.search_for_owner(owner.id, Pagination(page=1, limit=10, sort=["price"]))
    desc = repo.search_for_owner(owner.id, Pagination(page=1, limit=10, sort=["-price"]))

    assert [p.id for p in asc.items] == [c.id, a.id, b.id]
    assert [p.id for p in desc.items] == [b.id, a.id, c.id]


def test_pagination_slices_and_counts(repo, owner, session):
    for _ in range(5):
        ProductFactory(owner=owner)

    page = repo.search_for_owner(owner.id, Pagination(page=3, limit=2, sort=["name"]))

    assert len(page.items) == 1
    assert page.total == 5
    assert page.total_pages == 3


def test_unknown_sort_tokens_are_ignored(repo, owner, session):
    ProductFactory(owner=owner)
    page = repo.search_for_owner(owner.id, Pagination(page=1, limit=10, sort=["-password"]))
    assert page.total == 1


def test_counters_and_soft_delete(repo, owner, session):
    keep = ProductFactory(owner=owner)
    drop = ProductFactory(owner=owner)

    repo.soft_delete(drop)

    assert repo.count_for_owner(owner.id) == 2
    assert repo.count_for_owner(owner.id, active=True) == 1
    assert repo.count_for_owner(owner.id, active=False) == 1
    assert repo.get_active(drop.id) is None
    assert repo.get_active(keep.id).id == keep.id


@pytest.mark.parametrize("product_id", [0, -1, MAX_PK + 1, 10**20])
def test_get_active_out_of_range_id_is_missing(repo, session, product_id):
    ProductFactory()
    assert repo.get_active(product_id) is None
    assert repo.get(product_id) is None
