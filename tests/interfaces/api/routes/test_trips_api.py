"""Integration tests for trip creation, retrieval and draft validation."""

from __future__ import annotations

from moptabi.application.use_cases.planning import (
    DATE_RANGE_INVALID,
    DATE_REQUIRED,
    MEMO_TOO_LONG,
    SPOTS_REQUIRED,
    TITLE_REQUIRED,
)
from moptabi.domain.limits import LIMIT_ERROR_MESSAGES, LimitType
from moptabi.infrastructure.models import (
    NearestStationModel,
    PlanModel,
    PlanSpotModel,
    SpotModel,
    TransportModel,
    TripModel,
    UserModel,
)


def _spot(spot_id: str, order: int, **overrides) -> dict:
    spot = {
        "id": spot_id,
        "location": {"name": f"Place {spot_id}", "lat": 35.68, "lng": 139.76},
        "stayStart": "10:00",
        "stayEnd": "11:30",
        "prefecture": "東京都",
        "category": ["museum"],
        "transports": {
            "transportMethodIds": [2, 3],
            "travelTime": "15分",
            "cost": 210,
            "fromType": "SPOT",
            "toType": "SPOT",
        },
        "order": order,
    }
    spot.update(overrides)
    return spot


def _trip(**overrides) -> dict:
    trip = {
        "title": "Tokyo weekend",
        "startDate": "2025-05-01",
        "endDate": "2025-05-02",
        "tripInfo": [
            {"date": "2025-05-01", "genreId": 2, "transportationMethod": [1, 2], "memo": "museums"}
        ],
        "plans": [
            {
                "date": "2025-05-01",
                "spots": [
                    _spot(
                        "spot-a",
                        0,
                        nearestStation={
                            "name": "Ueno",
                            "walkingTime": 5,
                            "lat": 35.71,
                            "lng": 139.77,
                        },
                        regularOpeningHours=[{"day": "Monday", "hours": "9:00-17:00"}],
                    ),
                    _spot("spot-b", 1),
                ],
            },
            {"date": "2025-05-02", "spots": [_spot("spot-c", 0)]},
        ],
    }
    trip.update(overrides)
    return trip


def _create(client, headers, **overrides) -> dict:
    response = client.post("/trips/create", json=_trip(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_trip_builds_plans_and_transports(client, make_headers, db_session):
    body = _create(client, make_headers("user-1"))

    assert body["title"] == "Tokyo weekend"
    assert body["userId"] == "user-1"
    assert body["tripInfo"][0]["transportationMethods"] == [1, 2]
    assert body["tripInfo"][0]["genreId"] == 2
    first_day, second_day = body["plans"]
    assert first_day["date"] == "2025-05-01"
    assert [ps["spotId"] for ps in first_day["planSpots"]] == ["spot-a", "spot-b"]

    spot_a = first_day["planSpots"][0]["spot"]
    assert spot_a["meta"]["name"] == "Place spot-a"
    assert spot_a["meta"]["categories"] == ["museum"]
    assert spot_a["meta"]["openingHours"] == [{"day": "Monday", "hours": "9:00-17:00"}]
    assert spot_a["nearestStations"][0]["name"] == "Ueno"

    legs = {(t["fromType"], t["toType"]): t for t in first_day["transports"]}
    assert set(legs) == {("SPOT", "SPOT"), ("DEPARTURE", "SPOT"), ("SPOT", "DESTINATION")}
    spot_leg = legs[("SPOT", "SPOT")]
    assert spot_leg["transportMethod"] == 2
    assert spot_leg["travelTime"] == "15分"
    assert spot_leg["cost"] == 210
    assert spot_leg["fromSpotId"] == first_day["planSpots"][0]["id"]
    assert spot_leg["toSpotId"] == first_day["planSpots"][1]["id"]
    assert legs[("DEPARTURE", "SPOT")]["travelTime"] == "出発"
    assert legs[("DEPARTURE", "SPOT")]["transportMethod"] == 1
    assert legs[("SPOT", "DESTINATION")]["travelTime"] == "帰宅"

    assert len(second_day["transports"]) == 2
    assert db_session.get(UserModel, "user-1") is not None
    assert db_session.query(SpotModel).count() == 3
    assert db_session.query(NearestStationModel).count() == 1


def test_missing_transport_details_use_defaults(client, make_headers):
    first = _spot("spot-a", 0)
    first["transports"] = {"transportMethodIds": [4], "fromType": "SPOT", "toType": "SPOT"}
    plans = [{"date": "2025-05-01", "spots": [first, _spot("spot-b", 1)]}]

    body = _create(client, make_headers("user-1"), plans=plans)

    leg = next(t for t in body["plans"][0]["transports"] if t["fromType"] == t["toType"])
    assert leg["travelTime"] == "不明"
    assert leg["cost"] == 0
    assert leg["transportMethod"] == 4


def test_plan_spots_are_returned_in_order(client, make_headers):
    headers = make_headers("user-1")
    plans = [{"date": "2025-05-01", "spots": [_spot("late", 2), _spot("early", 0)]}]
    created = _create(client, headers, plans=plans)

    response = client.get(f"/trips/{created['id']}", headers=headers)

    assert response.status_code == 200
    assert [ps["spotId"] for ps in response.json()["plans"][0]["planSpots"]] == ["early", "late"]


def test_list_and_count_trips(client, make_headers):
    headers = make_headers("user-1")
    _create(client, headers)
    _create(client, headers, title="Second")
    _create(client, make_headers("user-2"))

    listing = client.get("/trips/", headers=headers)

    assert listing.status_code == 200
    assert [trip["title"] for trip in listing.json()] == ["Tokyo weekend", "Second"]
    assert [plan["date"] for plan in listing.json()[0]["plans"]] == ["2025-05-01", "2025-05-02"]
    assert client.get("/trips/count", headers=headers).json() == {"count": 2, "limit": 20}


def test_trip_of_other_user_is_not_found(client, make_headers):
    created = _create(client, make_headers("user-1"))

    response = client.get(f"/trips/{created['id']}", headers=make_headers("user-2"))

    assert response.status_code == 404
    assert response.json() == {"detail": "No trip found"}


def test_delete_trip_cascades(client, make_headers, db_session):
    headers = make_headers("user-1")
    created = _create(client, headers)

    response = client.delete(f"/trips/{created['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Trip deleted successfully"}
    assert db_session.query(TripModel).count() == 0
    assert db_session.query(PlanModel).count() == 0
    assert db_session.query(PlanSpotModel).count() == 0
    assert db_session.query(TransportModel).count() == 0
    assert client.get(f"/trips/{created['id']}", headers=headers).status_code == 404
    assert client.delete(f"/trips/{created['id']}", headers=headers).status_code == 404


def test_plan_limit_blocks_creation(client, make_headers, db_session):
    db_session.add(UserModel(id="user-1"))
    for index in range(20):
        db_session.add(
            TripModel(
                user_id="user-1",
                title=f"Trip {index}",
                start_date="2025-01-01",
                end_date="2025-01-01",
            )
        )
    db_session.commit()

    response = client.post("/trips/create", json=_trip(), headers=make_headers("user-1"))

    assert response.status_code == 400
    assert response.json() == {"detail": LIMIT_ERROR_MESSAGES[LimitType.PLAN]}
    assert db_session.query(SpotModel).count() == 0


def test_too_many_days_or_spots_is_rejected(client, make_headers, db_session):
    headers = make_headers("user-1")
    days = [{"date": f"2025-05-0{day}", "spots": [_spot(f"s{day}", 0)]} for day in range(1, 9)]
    crowded = [{"date": "2025-05-01", "spots": [_spot(f"s{index}", index) for index in range(11)]}]

    too_long = client.post("/trips/create", json=_trip(plans=days), headers=headers)
    too_many = client.post("/trips/create", json=_trip(plans=crowded), headers=headers)

    assert too_long.status_code == 400
    assert too_long.json() == {"detail": LIMIT_ERROR_MESSAGES[LimitType.PLAN_DAYS]}
    assert too_many.status_code == 400
    assert too_many.json() == {"detail": LIMIT_ERROR_MESSAGES[LimitType.SPOTS_PER_DAY]}
    assert db_session.query(TripModel).count() == 0


def test_invalid_payload_is_rejected(client, make_headers):
    headers = make_headers("user-1")
    bad_title = client.post("/trips/create", json=_trip(title="x" * 51), headers=headers)
    bad_spot = _spot("spot-a", 0, location={"name": "Nowhere", "lat": 95.0, "lng": 0.0})
    bad_lat = client.post(
        "/trips/create",
        json=_trip(plans=[{"date": "2025-05-01", "spots": [bad_spot]}]),
        headers=headers,
    )

    assert bad_title.status_code == 400
    assert bad_title.json()["detail"] == "Invalid request body"
    assert bad_lat.status_code == 400


def test_validate_reports_every_problem(client, make_headers):
    draft = {
        "title": "",
        "tripInfo": [{"date": "2025/05/01", "memo": "m" * 1001}],
        "plans": [
            {
                "date": "2025/05/01",
                "spots": [
                    {
                        "id": "departure-1",
                        "transports": {
                            "transportMethodIds": [1],
                            "fromType": "DEPARTURE",
                            "toType": "SPOT",
                        },
                    }
                ],
            }
        ],
    }

    response = client.post("/trips/validate", json=draft, headers=make_headers("user-1"))

    assert response.status_code == 200
    assert response.json() == {
        "isError": True,
        "errors": {"title": TITLE_REQUIRED, "startDate": DATE_REQUIRED},
        "tripInfoErrors": {"2025-05-01": {"memo": MEMO_TOO_LONG}},
        "planErrors": {"2025-05-01": {"spots": SPOTS_REQUIRED}},
        "spotErrors": {},
    }


def test_validate_accepts_complete_draft(client, make_headers):
    draft = {
        "title": "Kyoto",
        "startDate": "2025-05-01",
        "endDate": "2025-05-01",
        "plans": [
            {
                "date": "2025-05-01",
                "spots": [{"id": "temple", "transports": {"transportMethodIds": [1]}}],
            }
        ],
    }

    response = client.post("/trips/validate", json=draft, headers=make_headers("user-1"))

    assert response.json() == {
        "isError": False,
        "errors": {},
        "tripInfoErrors": {},
        "planErrors": {},
        "spotErrors": {},
    }


def test_validate_flags_reversed_date_range(client, make_headers):
    draft = {
        "title": "Kyoto",
        "startDate": "2025-05-03",
        "endDate": "2025-05-01",
        "plans": [
            {
                "date": "2025-05-01",
                "spots": [{"id": "temple", "transports": {"transportMethodIds": [1]}}],
            }
        ],
    }

    response = client.post("/trips/validate", json=draft, headers=make_headers("user-1"))

    assert response.json() == {
        "isError": True,
        "errors": {"startDate": DATE_RANGE_INVALID},
        "tripInfoErrors": {},
        "planErrors": {},
        "spotErrors": {},
    }


def test_create_rejects_reversed_date_range(client, make_headers, db_session):
    response = client.post(
        "/trips/create",
        json=_trip(startDate="2025-05-02", endDate="2025-05-01"),
        headers=make_headers("user-1"),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"
    assert db_session.query(TripModel).count() == 0
