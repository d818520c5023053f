from datetime import datetime

from moptabi.domain.entities import (
    Notification,
    NotificationReadStats,
    NotificationType,
    calculate_pagination,
    compute_read_rate,
    paginate,
)
from moptabi.domain.entities.pagination import clamp_limit


def test_calculate_pagination_middle_page():
    info = calculate_pagination(45, 2, 20)

    assert info.total_pages == 3
    assert info.current_page == 2
    assert info.total_count == 45
    assert info.limit == 20
    assert info.has_next_page is True
    assert info.has_prev_page is True


def test_calculate_pagination_empty_result():
    info = calculate_pagination(0, 1, 20)

    assert info.total_pages == 0
    assert info.has_next_page is False
    assert info.has_prev_page is False


def test_calculate_pagination_last_page():
    info = calculate_pagination(40, 2, 20)

    assert info.total_pages == 2
    assert info.has_next_page is False


def test_paginate_slices_items():
    items = list(range(1, 8))

    assert paginate(items, 1, 3) == [1, 2, 3]
    assert paginate(items, 3, 3) == [7]
    assert paginate(items, 4, 3) == []


def test_clamp_limit():
    assert clamp_limit(20) == 20
    assert clamp_limit(500) == 100


def test_read_rate_rounds_half_up():
    assert compute_read_rate(1, 3) == 33
    assert compute_read_rate(2, 3) == 67
    assert compute_read_rate(1, 8) == 13
    assert compute_read_rate(1, 200) == 1
    assert compute_read_rate(5, 5) == 100


def test_read_rate_without_recipients_is_zero():
    assert compute_read_rate(0, 0) == 0


def test_read_stats_exposes_rate():
    notification = Notification(
        id=1,
        title="Maintenance",
        content="Tonight",
        type=NotificationType.SYSTEM,
        published_at=datetime(2025, 1, 1),
    )
    stats = NotificationReadStats(notification=notification, total_recipients=4, read_count=1)

    assert stats.read_rate == 25
