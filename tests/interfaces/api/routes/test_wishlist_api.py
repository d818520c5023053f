"""Integration tests for the wishlist endpoints."""

from __future__ import annotations

from moptabi.domain.limits import LIMIT_ERROR_MESSAGES, LimitType
from moptabi.infrastructure.models import SpotMetaModel, SpotModel, UserModel, WishlistModel


def _payload(spot_id: str = "spot-1", **overrides) -> dict:
    payload = {
        "spotId": spot_id,
        "spot": {
            "id": spot_id,
            "meta": {
                "name": "Kiyomizu-dera",
                "latitude": 34.9949,
                "longitude": 135.785,
                "categories": ["temple"],
                "prefecture": "京都府",
                "openingHours": [{"day": "Monday", "hours": "6:00-18:00"}],
            },
        },
        "memo": "Go early",
        "priority": 3,
    }
    payload.update(overrides)
    return payload


def test_create_registers_spot_and_user(client, make_headers, db_session):
    response = client.post("/wishlist/", json=_payload(), headers=make_headers("user-1"))

    assert response.status_code == 201, response.text
    body = response.json()
    assert body["spotId"] == "spot-1"
    assert body["userId"] == "user-1"
    assert body["priority"] == 3
    assert body["visited"] == 0
    assert body["spot"]["meta"]["name"] == "Kiyomizu-dera"
    assert body["spot"]["meta"]["openingHours"] == [{"day": "Monday", "hours": "6:00-18:00"}]

    assert db_session.get(UserModel, "user-1") is not None
    assert db_session.get(SpotModel, "spot-1") is not None
    assert db_session.query(SpotMetaModel).filter_by(spot_id="spot-1").count() == 1


def test_existing_spot_is_reused(client, make_headers, db_session):
    client.post("/wishlist/", json=_payload(), headers=make_headers("user-1"))
    response = client.post("/wishlist/", json=_payload(), headers=make_headers("user-2"))

    assert response.status_code == 201
    assert db_session.query(SpotModel).count() == 1


def test_duplicate_entry_is_rejected(client, make_headers):
    headers = make_headers("user-1")
    client.post("/wishlist/", json=_payload(), headers=headers)

    response = client.post("/wishlist/", json=_payload(), headers=headers)

    assert response.status_code == 400
    assert response.json() == {"detail": "Wishlist entry already exists for this spot"}


def test_mismatched_spot_id_is_invalid(client, make_headers):
    payload = _payload()
    payload["spotId"] = "other"

    response = client.post("/wishlist/", json=payload, headers=make_headers("user-1"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"


def test_priority_out_of_range_is_invalid(client, make_headers):
    response = client.post("/wishlist/", json=_payload(priority=6), headers=make_headers("user-1"))

    assert response.status_code == 400


def test_wishlist_limit_blocks_creation(client, make_headers, db_session):
    db_session.add(UserModel(id="user-1"))
    for index in range(100):
        db_session.add(SpotModel(id=f"spot-{index}"))
        db_session.add(WishlistModel(user_id="user-1", spot_id=f"spot-{index}"))
    db_session.commit()

    response = client.post("/wishlist/", json=_payload("new-spot"), headers=make_headers("user-1"))

    assert response.status_code == 400
    assert response.json() == {"detail": LIMIT_ERROR_MESSAGES[LimitType.WISHLIST]}
    assert db_session.get(SpotModel, "new-spot") is None

    count = client.get("/wishlist/count", headers=make_headers("user-1"))
    assert count.json() == {"count": 100, "limit": 100}


def test_list_orders_by_priority(client, make_headers):
    headers = make_headers("user-1")
    client.post("/wishlist/", json=_payload("a", priority=1), headers=headers)
    client.post("/wishlist/", json=_payload("b", priority=5), headers=headers)
    client.post("/wishlist/", json=_payload("c", priority=5), headers=headers)
    client.post("/wishlist/", json=_payload("d"), headers=make_headers("user-2"))

    response = client.get("/wishlist/", headers=headers)

    assert response.status_code == 200
    assert [entry["spotId"] for entry in response.json()] == ["b", "c", "a"]
    assert client.get("/wishlist/count", headers=headers).json() == {"count": 3, "limit": 100}


def test_update_entry(client, make_headers):
    headers = make_headers("user-1")
    created = client.post("/wishlist/", json=_payload(), headers=headers).json()

    response = client.patch(
        f"/wishlist/{created['id']}",
        json={"visited": 1, "visitedAt": "2025-04-01T10:00:00+09:00"},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["visited"] == 1
    assert body["visitedAt"] == "2025-04-01T01:00:00Z"
    assert body["memo"] == "Go early"
    assert body["priority"] == 3

    cleared = client.patch(f"/wishlist/{created['id']}", json={"memo": None}, headers=headers)
    assert cleared.json()["memo"] is None
    assert cleared.json()["visited"] == 1


def test_other_users_entry_is_not_found(client, make_headers):
    created = client.post("/wishlist/", json=_payload(), headers=make_headers("user-1")).json()

    update = client.patch(
        f"/wishlist/{created['id']}", json={"priority": 2}, headers=make_headers("user-2")
    )
    delete = client.delete(f"/wishlist/{created['id']}", headers=make_headers("user-2"))

    assert update.status_code == 404
    assert update.json() == {"detail": "Wishlist entry not found"}
    assert delete.status_code == 404


def test_delete_entry(client, make_headers):
    headers = make_headers("user-1")
    created = client.post("/wishlist/", json=_payload(), headers=headers).json()

    response = client.delete(f"/wishlist/{created['id']}", headers=headers)

    assert response.status_code == 204
    assert client.get("/wishlist/", headers=headers).json() == []
    assert client.delete(f"/wishlist/{created['id']}", headers=headers).status_code == 404
