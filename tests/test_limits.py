import pytest

from moptabi.domain.limits import (
    APP_LIMITS,
    LIMIT_ERROR_MESSAGES,
    LimitType,
    get_limit_error_message,
    get_remaining_count,
    is_approaching_limit,
    is_plan_days_limit_reached,
    is_plan_limit_reached,
    is_spots_per_day_limit_reached,
    is_wishlist_limit_reached,
)


def test_app_limits_values():
    assert dict(APP_LIMITS) == {
        "MAX_WISHLIST_SPOTS": 100,
        "MAX_PLANS": 20,
        "MAX_SPOTS_PER_DAY": 10,
        "MAX_PLAN_DAYS": 7,
    }


@pytest.mark.parametrize(
    ("check", "limit"),
    [
        (is_wishlist_limit_reached, 100),
        (is_plan_limit_reached, 20),
        (is_spots_per_day_limit_reached, 10),
        (is_plan_days_limit_reached, 7),
    ],
)
def test_limit_is_reached_at_the_cap(check, limit):
    assert check(limit - 1) is False
    assert check(limit) is True
    assert check(limit + 1) is True


def test_remaining_count_never_negative():
    assert get_remaining_count(95, 100) == 5
    assert get_remaining_count(100, 100) == 0
    assert get_remaining_count(120, 100) == 0


def test_approaching_limit_threshold():
    assert is_approaching_limit(79, 100) is False
    assert is_approaching_limit(80, 100) is True
    assert is_approaching_limit(16, 20) is True
    assert is_approaching_limit(5, 0) is False


def test_error_messages_cover_every_limit():
    assert set(LIMIT_ERROR_MESSAGES) == set(LimitType)
    assert "100" in get_limit_error_message(LimitType.WISHLIST)
    assert get_limit_error_message("plan") == LIMIT_ERROR_MESSAGES[LimitType.PLAN]
