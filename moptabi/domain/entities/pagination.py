"""Pagination metadata shared by the administrative listings."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationInfo:
    current_page: int
    total_pages: int
    total_count: int
    limit: int
    has_next_page: bool
    has_prev_page: bool


def calculate_pagination(total_count: int, page: int, limit: int) -> PaginationInfo:
    """Return pagination metadata for ``total_count`` items split in pages of ``limit``."""

    total_pages = math.ceil(total_count / limit)
    return PaginationInfo(
        current_page=page,
        total_pages=total_pages,
        total_count=total_count,
        limit=limit,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )


def clamp_limit(limit: int) -> int:
    return min(limit, MAX_PAGE_LIMIT)


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def paginate(items: Sequence[T], page: int, limit: int) -> list[T]:
    """Return the slice of ``items`` shown on ``page``."""

    start = page_offset(page, limit)
    return list(items[start : start + limit])


__all__ = [
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "PaginationInfo",
    "calculate_pagination",
    "clamp_limit",
    "page_offset",
    "paginate",
]
