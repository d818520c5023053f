"""Pagination metadata returned by the administrative listings."""

from __future__ import annotations

from .base import CamelModel


class PaginationRead(CamelModel):
    current_page: int
    total_pages: int
    total_count: int
    limit: int
    has_next_page: bool
    has_prev_page: bool


__all__ = ["PaginationRead"]
