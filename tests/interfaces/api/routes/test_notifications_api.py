"""Integration tests for notification publishing and read tracking."""

from __future__ import annotations

import pytest

from moptabi.infrastructure.models import NotificationModel, UserNotificationModel

PAST = "2024-01-01T00:00:00Z"
FUTURE = "2999-01-01T00:00:00Z"


@pytest.fixture()
def users(client, make_headers, admin_headers):
    """Register two regular users next to the administrator."""

    for user_id in ("user-1", "user-2"):
        client.get("/auth/", headers=make_headers(user_id))
    return {"user-1": make_headers("user-1"), "user-2": make_headers("user-2")}


def _publish(client, admin_headers, **overrides):
    payload = {
        "title": "Maintenance",
        "content": "The service will be down tonight.",
        "type": "SYSTEM",
        "publishedAt": PAST,
    }
    payload.update(overrides)
    response = client.post("/notification/", json=payload, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_publish_fans_out_to_every_user(client, admin_headers, users, db_session):
    created = _publish(client, admin_headers)

    assert created["title"] == "Maintenance"
    assert created["type"] == "SYSTEM"
    assert created["publishedAt"] == "2024-01-01T00:00:00Z"

    rows = db_session.query(UserNotificationModel).all()
    assert sorted(row.user_id for row in rows) == ["admin-user", "user-1", "user-2"]
    assert all(row.is_read is False for row in rows)


def test_publish_requires_admin(client, users):
    response = client.post(
        "/notification/",
        json={"title": "x", "content": "y", "type": "INFO", "publishedAt": PAST},
        headers=users["user-1"],
    )

    assert response.status_code == 403


def test_publish_rejects_invalid_body(client, admin_headers):
    response = client.post(
        "/notification/",
        json={"title": "x" * 101, "content": "y", "type": "INFO", "publishedAt": PAST},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"
    assert response.json()["errors"]


def test_user_sees_only_published_notifications(client, admin_headers, users):
    _publish(client, admin_headers, title="Visible")
    _publish(client, admin_headers, title="Scheduled", publishedAt=FUTURE)

    response = client.get("/notification/", headers=users["user-1"])

    assert response.status_code == 200
    items = response.json()
    assert [item["title"] for item in items] == ["Visible"]
    assert items[0]["isRead"] is False
    assert items[0]["readAt"] is None

    count = client.get("/notification/unread-count", headers=users["user-1"])
    assert count.json() == {"count": 1}


def test_user_endpoints_require_authentication(client):
    assert client.get("/notification/").status_code == 401
    assert client.get("/notification/unread-count").status_code == 401


def test_mark_one_and_all_as_read(client, admin_headers, users):
    first = _publish(client, admin_headers, title="First")
    _publish(client, admin_headers, title="Second")

    response = client.patch(f"/notification/{first['id']}/read", headers=users["user-1"])
    assert response.status_code == 200
    assert response.json() == {"success": True}

    listing = client.get("/notification/", headers=users["user-1"]).json()
    items = {item["title"]: item for item in listing}
    assert items["First"]["isRead"] is True
    assert items["First"]["readAt"].endswith("Z")
    assert items["Second"]["isRead"] is False

    read_all = client.patch("/notification/read-all", headers=users["user-1"])
    assert read_all.json() == {"success": True, "count": 1}
    assert client.get("/notification/unread-count", headers=users["user-1"]).json() == {"count": 0}

    other = client.get("/notification/unread-count", headers=users["user-2"])
    assert other.json() == {"count": 2}


def test_mark_unknown_notification_is_not_found(client, users):
    response = client.patch("/notification/999/read", headers=users["user-1"])

    assert response.status_code == 404
    assert response.json() == {"detail": "Notification not found"}


def test_update_resets_read_state_and_reaches_new_users(
    client, admin_headers, users, make_headers
):
    created = _publish(client, admin_headers)
    client.patch(f"/notification/{created['id']}/read", headers=users["user-1"])
    client.get("/auth/", headers=make_headers("user-3"))

    response = client.patch(
        f"/notification/{created['id']}",
        json={"title": "Maintenance extended"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["title"] == "Maintenance extended"
    assert response.json()["content"] == "The service will be down tonight."
    for user_id in ("user-1", "user-3"):
        count = client.get("/notification/unread-count", headers=make_headers(user_id))
        assert count.json() == {"count": 1}


def test_update_unknown_notification(client, admin_headers):
    response = client.patch("/notification/42", json={"title": "x"}, headers=admin_headers)

    assert response.status_code == 404


def test_delete_removes_recipient_rows(client, admin_headers, users, db_session):
    created = _publish(client, admin_headers)

    response = client.delete(f"/notification/{created['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert db_session.query(NotificationModel).count() == 0
    assert db_session.query(UserNotificationModel).count() == 0
    assert client.get("/notification/", headers=users["user-1"]).json() == []

    again = client.delete(f"/notification/{created['id']}", headers=admin_headers)
    assert again.status_code == 404


def test_admin_listing_read_rate_sorting_and_pagination(client, admin_headers, users):
    low = _publish(client, admin_headers, title="Low", publishedAt="2024-01-01T00:00:00Z")
    high = _publish(client, admin_headers, title="High", publishedAt="2024-02-01T00:00:00Z")
    _publish(client, admin_headers, title="Scheduled", publishedAt=FUTURE)
    client.patch(f"/notification/{low['id']}/read", headers=users["user-1"])
    client.patch(f"/notification/{high['id']}/read", headers=users["user-1"])
    client.patch(f"/notification/{high['id']}/read", headers=users["user-2"])

    response = client.get(
        "/notification/admin",
        params={"sortBy": "readRate", "sortOrder": "desc"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    rows = [
        (row["title"], row["readRate"], row["readCount"], row["totalRecipients"])
        for row in body["notifications"]
    ]
    assert rows == [("High", 67, 2, 3), ("Low", 33, 1, 3), ("Scheduled", 0, 0, 3)]
    assert body["pagination"]["totalCount"] == 3

    ascending = client.get(
        "/notification/admin",
        params={"sortBy": "readRate", "sortOrder": "asc", "limit": 1, "page": 2},
        headers=admin_headers,
    ).json()
    assert [row["title"] for row in ascending["notifications"]] == ["Low"]
    assert ascending["pagination"]["hasNextPage"] is True
    assert ascending["pagination"]["hasPrevPage"] is True
    assert ascending["pagination"]["totalPages"] == 3

    by_date = client.get("/notification/admin", headers=admin_headers).json()
    assert [row["title"] for row in by_date["notifications"]] == ["Scheduled", "High", "Low"]


def test_admin_listing_filters(client, admin_headers, users):
    _publish(
        client, admin_headers, title="Spring Campaign", type="INFO", publishedAt="2024-03-10T09:00:00Z"
    )
    _publish(client, admin_headers, title="Server maintenance", publishedAt="2024-03-15T23:30:00Z")
    _publish(
        client, admin_headers, title="campaign_100%", type="INFO", publishedAt="2024-04-01T00:00:00Z"
    )

    def titles(**params):
        response = client.get("/notification/admin", params=params, headers=admin_headers)
        assert response.status_code == 200
        return sorted(row["title"] for row in response.json()["notifications"])

    assert titles(title="CAMPAIGN") == ["Spring Campaign", "campaign_100%"]
    assert titles(title="100%") == ["campaign_100%"]
    assert titles(type="SYSTEM") == ["Server maintenance"]
    assert titles(publishedFrom="2024-03-11", publishedTo="2024-03-15") == ["Server maintenance"]
    assert titles(publishedTo="2024-03-10") == ["Spring Campaign"]


def test_admin_listing_requires_admin(client, users):
    response = client.get("/notification/admin", headers=users["user-1"])

    assert response.status_code == 403


def test_read_rate_sort_ranks_every_row_before_paging(client, admin_headers, users):
    ids = {
        title: _publish(client, admin_headers, title=title)["id"]
        for title in ("Zero A", "Zero B", "Third", "Everyone")
    }
    client.patch(f"/notification/{ids['Third']}/read", headers=users["user-1"])
    for headers in (users["user-1"], users["user-2"], admin_headers):
        client.patch(f"/notification/{ids['Everyone']}/read", headers=headers)

    def walk(sort_order):
        seen = []
        for page in range(1, 5):
            body = client.get(
                "/notification/admin",
                params={"sortBy": "readRate", "sortOrder": sort_order, "limit": 1, "page": page},
                headers=admin_headers,
            ).json()
            assert body["pagination"]["totalPages"] == 4
            seen.extend((row["title"], row["readRate"]) for row in body["notifications"])
        return seen

    assert walk("desc") == [("Everyone", 100), ("Third", 33), ("Zero A", 0), ("Zero B", 0)]
    assert walk("asc") == [("Zero A", 0), ("Zero B", 0), ("Third", 33), ("Everyone", 100)]
