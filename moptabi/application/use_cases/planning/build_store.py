"""Build a :class:`PlanningStore` from a submitted itinerary draft."""

from __future__ import annotations

from collections.abc import Iterable

from moptabi.domain.planning import DayPlan, DraftTripInfo, PlanningStore


def build_planning_store(
    *,
    title: str,
    start_date: str | None,
    end_date: str | None,
    trip_info: Iterable[DraftTripInfo] = (),
    plans: Iterable[DayPlan] = (),
    image_url: str | None = None,
) -> PlanningStore:
    store = PlanningStore()
    store.title = title
    store.image_url = image_url
    store.set_range_date(start_date, end_date)
    for info in trip_info:
        store.set_trip_info(info.date, "genreId", info.genre_id)
        store.set_trip_info(info.date, "transportationMethod", info.transportation_method)
        store.set_trip_info(info.date, "memo", info.memo)
    for plan in plans:
        if store.get_plan(plan.date) is None:
            store.plans.append(DayPlan(date=plan.date))
        for spot in plan.spots:
            store.set_spots(plan.date, spot)
    return store
