"""Integration tests for uploading and serving trip cover images."""

from __future__ import annotations

import pytest

from moptabi.config import get_settings
from moptabi.infrastructure.image_storage import image_path

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture()
def image_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(get_settings(), "image_dir", str(tmp_path))
    return tmp_path


def _upload(client, headers, *, name="photo.png", content=PNG_BYTES):
    return client.post(
        "/trips/upload",
        files={"file": (name, content, "image/png")},
        headers=headers,
    )


def test_upload_stores_file_under_timestamped_name(client, make_headers, image_dir):
    response = _upload(client, make_headers("user-1"))

    assert response.status_code == 201, response.text
    file_name = response.json()["fileName"]
    prefix, _, original = file_name.partition("_")
    assert prefix.isdigit()
    assert original == "photo.png"
    assert (image_dir / file_name).read_bytes() == PNG_BYTES


def test_uploaded_image_is_served_back(client, make_headers, image_dir):
    file_name = _upload(client, make_headers("user-1")).json()["fileName"]

    response = client.get(f"/trips/{file_name}")

    assert response.status_code == 200
    assert response.content == PNG_BYTES
    assert response.headers["content-type"] == "image/png"


def test_missing_image_is_not_found(client, image_dir):
    response = client.get("/trips/1700000000000_missing.png")

    assert response.status_code == 404
    assert response.json() == {"detail": "Image not found"}


def test_upload_requires_authentication(client, image_dir):
    response = _upload(client, {})

    assert response.status_code == 401
    assert list(image_dir.iterdir()) == []


def test_empty_upload_is_rejected(client, make_headers, image_dir):
    response = _upload(client, make_headers("user-1"), content=b"")

    assert response.status_code == 400
    assert response.json() == {"detail": "An image file is required"}


def test_upload_drops_client_directories(client, make_headers, image_dir):
    response = _upload(client, make_headers("user-1"), name="../../etc/photo.png")

    file_name = response.json()["fileName"]
    assert file_name.endswith("_photo.png")
    assert "/" not in file_name
    assert (image_dir / file_name).is_file()


def test_names_outside_the_image_directory_are_missing(image_dir):
    (image_dir.parent / "outside.png").write_bytes(PNG_BYTES)

    assert image_path("../outside.png") is None
    assert image_path("absent.png") is None
