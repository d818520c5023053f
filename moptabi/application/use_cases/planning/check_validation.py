"""Validation of an itinerary draft before it is submitted as a trip."""

from __future__ import annotations

from datetime import timedelta

from moptabi.domain.entities import TransportNodeType
from moptabi.domain.planning import DateKey, PlanningStore

MAX_MEMO_LENGTH = 1000

TITLE_REQUIRED = "タイトルを入力してください"
DATE_REQUIRED = "プランの日付を入力してください"
DATE_RANGE_INVALID = "終了日は開始日以降の日付を選択してください"
SPOTS_REQUIRED = "観光地スポットは1つ以上選択してください"
MEMO_TOO_LONG = "メモは1000文字以内で入力してください。"


def dates_between(start: DateKey, end: DateKey) -> list[DateKey]:
    """Return every day from ``start`` to ``end`` inclusive."""

    days = (end.value - start.value).days
    return [DateKey(start.value + timedelta(days=offset)) for offset in range(days + 1)]


def check_validation(store: PlanningStore) -> bool:
    """Record every problem of the draft in ``store`` and return whether any was found.

    Checks accumulate instead of stopping at the first failure. When the date
    range is incomplete or reversed the days already present in the draft are
    checked.
    """

    is_error = False

    if not store.title.strip():
        store.set_errors({"title": TITLE_REQUIRED})
        is_error = True

    if store.start_date is None or store.end_date is None:
        store.set_errors({"startDate": DATE_REQUIRED})
        is_error = True
        days = sorted(plan.date for plan in store.plans)
    elif store.start_date > store.end_date:
        store.set_errors({"startDate": DATE_RANGE_INVALID})
        is_error = True
        days = sorted(plan.date for plan in store.plans)
    else:
        days = dates_between(store.start_date, store.end_date)

    for day in days:
        spots = store.get_spot_info(day, TransportNodeType.SPOT)
        info = store.get_trip_info(day)

        if info is not None and len(info.memo or "") > MAX_MEMO_LENGTH:
            store.set_trip_info_errors(day, {"memo": MEMO_TOO_LONG})
            is_error = True

        if not spots:
            store.set_plan_errors(day, {"spots": SPOTS_REQUIRED})
            is_error = True

        if any(len(spot.memo or "") > MAX_MEMO_LENGTH for spot in spots):
            store.set_spot_errors(day, {"memo": MEMO_TOO_LONG})
            is_error = True

    return is_error
