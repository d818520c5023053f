"""Integration tests for sign in and the administrator user overview."""

from __future__ import annotations

from datetime import datetime

from moptabi.infrastructure.models import (
    PlanModel,
    SpotModel,
    TripModel,
    UserModel,
    WishlistModel,
)
from moptabi.utils import utc_now


def _add_trip(db_session, user_id: str, *, days: int = 1, created_at: datetime | None = None):
    trip = TripModel(
        user_id=user_id,
        title="Trip",
        start_date="2025-05-01",
        end_date="2025-05-01",
        created_at=created_at or utc_now(),
    )
    for index in range(days):
        trip.plans.append(PlanModel(date=f"2025-05-0{index + 1}"))
    db_session.add(trip)
    db_session.commit()


def _add_wishlist(db_session, user_id: str, spot_id: str):
    if db_session.get(SpotModel, spot_id) is None:
        db_session.add(SpotModel(id=spot_id))
    db_session.add(WishlistModel(user_id=user_id, spot_id=spot_id))
    db_session.commit()


def test_sync_requires_user_header(client):
    response = client.get("/auth/")

    assert response.status_code == 401
    assert response.json() == {"detail": "認証が必要です"}


def test_sync_registers_then_records_login(client, make_headers, db_session):
    headers = make_headers("user-1", name="山田 太郎", email="taro@example.com")

    first = client.get("/auth/", headers=headers)
    assert first.status_code == 201
    body = first.json()
    assert body["status"] == 201
    assert body["user"]["id"] == "user-1"
    assert body["user"]["name"] == "山田 太郎"
    assert body["user"]["email"] == "taro@example.com"
    assert body["user"]["role"] == "USER"
    assert body["user"]["createdAt"].endswith("Z")

    second = client.get("/auth/", headers=headers)
    assert second.status_code == 200
    assert second.json()["status"] == 200

    users = db_session.query(UserModel).all()
    assert len(users) == 1
    assert users[0].last_login_at is not None


def test_user_list_requires_admin(client, make_headers):
    client.get("/auth/", headers=make_headers("user-1"))

    response = client.get("/auth/list", headers=make_headers("user-1"))
    assert response.status_code == 403
    assert response.json() == {"detail": "Forbidden"}

    unknown = client.get("/auth/dashboard", headers=make_headers("nobody"))
    assert unknown.status_code == 403


def test_user_list_counts_search_and_pagination(client, make_headers, admin_headers, db_session):
    client.get("/auth/", headers=make_headers("user-1", name="Hanako Sato"))
    client.get("/auth/", headers=make_headers("user-2", name="Jiro Suzuki"))
    _add_trip(db_session, "user-1")
    _add_trip(db_session, "user-1")
    _add_wishlist(db_session, "user-2", "spot-1")

    response = client.get(
        "/auth/list",
        params={"sortBy": "planCount", "sortOrder": "desc"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["totalCount"] == 3
    first = body["users"][0]
    assert first["id"] == "user-1"
    assert first["firstName"] == "Hanako"
    assert first["lastName"] == "Sato"
    assert first["planCount"] == 2
    assert first["wishlistCount"] == 0
    assert isinstance(first["registeredAt"], int)
    assert isinstance(first["lastLoginAt"], int)

    search = client.get("/auth/list", params={"search": "suzuki"}, headers=admin_headers)
    assert [user["id"] for user in search.json()["users"]] == ["user-2"]
    assert search.json()["users"][0]["wishlistCount"] == 1

    paged = client.get("/auth/list", params={"page": 2, "limit": 2}, headers=admin_headers)
    pagination = paged.json()["pagination"]
    assert len(paged.json()["users"]) == 1
    assert pagination == {
        "currentPage": 2,
        "totalPages": 2,
        "totalCount": 3,
        "limit": 2,
        "hasNextPage": False,
        "hasPrevPage": True,
    }


def test_user_list_rejects_invalid_page(client, admin_headers):
    response = client.get("/auth/list", params={"page": 0}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"


def test_dashboard_statistics(client, make_headers, admin_headers, db_session):
    client.get("/auth/", headers=make_headers("user-1"))
    client.get("/auth/", headers=make_headers("user-2"))
    _add_trip(db_session, "user-1", days=3)
    _add_trip(db_session, "user-2", days=1)
    _add_trip(db_session, "user-2", days=2, created_at=datetime(2020, 1, 1))
    _add_wishlist(db_session, "user-1", "spot-1")

    response = client.get("/auth/dashboard", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "totalUsers": 3,
        "activeUserCountFromLastMonth": 2,
        "wishlistStats": {"totalWishlist": 1, "wishlistIncreaseFromLastMonth": 1},
        "tripStats": {
            "totalPlans": 3,
            "planIncreaseFromLastMonth": 2,
            "averageDatePerUserPlan": 2.0,
        },
    }
