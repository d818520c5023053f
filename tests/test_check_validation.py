from moptabi.application.use_cases.planning import (
    DATE_RANGE_INVALID,
    DATE_REQUIRED,
    MEMO_TOO_LONG,
    SPOTS_REQUIRED,
    TITLE_REQUIRED,
    check_validation,
    dates_between,
)
from moptabi.domain.entities import TransportNodeType
from moptabi.domain.planning import (
    DateKey,
    DayPlan,
    DraftLocation,
    DraftSpot,
    DraftTransport,
    PlanningStore,
)


def _spot(spot_id, *, memo=None, from_type=TransportNodeType.SPOT):
    return DraftSpot(
        id=spot_id,
        location=DraftLocation(name=spot_id, lat=35.0, lng=139.0),
        transports=DraftTransport(transport_method_ids=[1], from_type=from_type),
        memo=memo,
    )


def _store(start="2025-05-01", end="2025-05-02", title="Kyoto"):
    store = PlanningStore()
    store.title = title
    store.set_range_date(start, end)
    return store


def test_dates_between_is_inclusive():
    days = dates_between(DateKey.parse("2025-04-29"), DateKey.parse("2025-05-02"))

    assert [day.isoformat() for day in days] == [
        "2025-04-29",
        "2025-04-30",
        "2025-05-01",
        "2025-05-02",
    ]


def test_valid_draft_has_no_errors():
    store = _store()
    store.set_spots("2025-05-01", _spot("temple"))
    store.set_spots("2025-05-02", _spot("shrine"))

    assert check_validation(store) is False
    assert store.has_errors() is False


def test_every_problem_is_recorded():
    store = _store(title="  ")
    store.set_spots("2025-05-01", _spot("temple", memo="x" * 1001))
    store.set_trip_info("2025-05-02", "memo", "y" * 1001)

    assert check_validation(store) is True
    assert store.errors == {"title": TITLE_REQUIRED}
    assert store.spot_errors[DateKey.parse("2025-05-01")] == {"memo": MEMO_TOO_LONG}
    assert store.plan_errors == {DateKey.parse("2025-05-02"): {"spots": SPOTS_REQUIRED}}
    assert store.trip_info_errors == {DateKey.parse("2025-05-02"): {"memo": MEMO_TOO_LONG}}


def test_endpoint_spots_do_not_count_as_spots():
    store = _store(end="2025-05-01")
    store.set_spots("2025-05-01", _spot("departure-1", from_type=TransportNodeType.DEPARTURE))

    assert check_validation(store) is True
    assert store.plan_errors == {DateKey.parse("2025-05-01"): {"spots": SPOTS_REQUIRED}}


def test_missing_range_checks_days_in_store():
    store = _store(start=None, end=None)
    store.set_spots("2025-05-03", _spot("temple"))
    store.plans.append(DayPlan(date=DateKey.parse("2025-05-04")))

    assert check_validation(store) is True
    assert store.errors == {"startDate": DATE_REQUIRED}
    assert store.plan_errors == {DateKey.parse("2025-05-04"): {"spots": SPOTS_REQUIRED}}


def test_memo_at_limit_is_accepted():
    store = _store(end="2025-05-01")
    store.set_spots("2025-05-01", _spot("temple", memo="x" * 1000))

    assert check_validation(store) is False


def test_reversed_range_checks_the_drafted_days():
    store = _store(start="2025-05-03", end="2025-05-01")
    store.set_spots("2025-05-01", _spot("departure-1", from_type=TransportNodeType.DEPARTURE))

    assert check_validation(store) is True
    assert store.errors == {"startDate": DATE_RANGE_INVALID}
    assert store.plan_errors == {DateKey.parse("2025-05-01"): {"spots": SPOTS_REQUIRED}}
