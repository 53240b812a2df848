# comments in English; reST docstrings strict
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PaginationIn:
    """
    Input pagination contract.

    :param page: 1-based page number.
    :type page: int
    :param limit: Page size (> 0), already clamped by the API layer.
    :type limit: int
    :param sort_by: Public field name (``createdAt``, ``name``, ``price``...).
    :type sort_by: str
    :param sort_order: ``"ASC"`` or ``"DESC"``.
    :type sort_order: str
    """

    page: int = 1
    limit: int = 10
    sort_by: str = "createdAt"
    sort_order: str = "DESC"


@dataclass(frozen=True, slots=True)
class PageOut(Generic[T]):
    """
    Output page with metadata.

    :param items: Items in the current page.
    :param page: Current page (1-based).
    :param limit: Page size.
    :param total: Total rows matching the query.
    :param total_pages: ``ceil(total / limit)``.
    """

    items: Sequence[T]
    page: int
    limit: int
    total: int
    total_pages: int
