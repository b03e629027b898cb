# tests/test_media.py

"""
Tests for image uploads and the media library.
S3 is always mocked via routers.media.get_s3.
"""

from unittest.mock import MagicMock, patch

import pytest


BUCKET = "vbc-media"
REGION = "us-east-2"


@pytest.fixture
def s3():
    s3_client = MagicMock()
    with patch("routers.media.get_s3", return_value=(s3_client, BUCKET, REGION)):
        yield s3_client


def _upload(client, headers, filename="sunday.png", content=b"\x89PNG fake", data=None):
    return client.post(
        "/api/upload",
        headers=headers,
        files={"file": (filename, content, "image/png")},
        data=data or {},
    )


def test_upload_stores_object_and_row(client, fake_db, editor_headers, s3):
    response = _upload(client, editor_headers, data={"title": "Sunday Service", "category": "events"})

    assert response.status_code == 200
    data = response.json()

    key = s3.put_object.call_args.kwargs["Key"]
    assert key.startswith("uploads/") and key.endswith(".png")
    assert s3.put_object.call_args.kwargs["Bucket"] == BUCKET

    expected_url = f"https://{BUCKET}.s3.{REGION}.amazonaws.com/{key}"
    assert data["path"] == expected_url
    assert data["imageUrl"] == expected_url
    assert data["fullPath"] == data["thumbnailUrl"] == expected_url
    assert data["title"] == "Sunday Service"
    assert data["category"] == "events"
    assert data["size"] == len(b"\x89PNG fake")

    stored = fake_db.tables["media"][0]
    assert stored["originalName"] == "sunday.png"
    assert stored["filename"] == key.split("/", 1)[1]


def test_upload_title_defaults_to_filename(client, editor_headers, s3):
    data = _upload(client, editor_headers, filename="baptism day.jpg").json()
    assert data["title"] == "baptism day"
    assert data["category"] == "general"
    assert data["originalName"] == "baptism_day.jpg"


def test_upload_requires_file(client, editor_headers, s3):
    response = client.post("/api/upload", headers=editor_headers, data={"title": "x"})
    assert response.status_code == 400
    assert response.json()["detail"] == "No file uploaded"


def test_upload_rejects_non_images(client, editor_headers, s3):
    response = _upload(client, editor_headers, filename="notes.pdf")
    assert response.status_code == 400
    assert response.json()["detail"] == "Only image files are allowed!"
    s3.put_object.assert_not_called()


def test_upload_rejects_empty_file(client, editor_headers, s3):
    response = _upload(client, editor_headers, content=b"")
    assert response.status_code == 400


def test_upload_size_limit(client, editor_headers, s3):
    with patch("routers.media.settings.MAX_UPLOAD_BYTES", 4):
        response = _upload(client, editor_headers, content=b"12345")
    assert response.status_code == 413


def test_upload_without_storage(client, editor_headers):
    with patch("routers.media.get_s3", side_effect=RuntimeError("Missing AWS credentials")):
        response = _upload(client, editor_headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "File storage is not configured"


def test_upload_requires_staff(client, user_headers, s3):
    assert _upload(client, user_headers).status_code == 403


def test_list_media_newest_first(client, fake_db):
    fake_db.seed(
        "media",
        {"filename": "a.png", "path": "/a.png", "uploadDate": "2024-01-01T00:00:00+00:00"},
        {"filename": "b.png", "path": "/b.png", "uploadDate": "2024-02-01T00:00:00+00:00"},
    )
    assert [m["filename"] for m in client.get("/api/media").json()] == ["b.png", "a.png"]


def test_update_media_metadata(client, fake_db, editor_headers):
    media = fake_db.seed("media", {"filename": "a.png", "path": "/a.png", "title": "Old"})[0]

    response = client.put(f"/api/media/{media['id']}", headers=editor_headers, json={"title": "New"})

    assert response.json()["title"] == "New"
    assert response.json()["filename"] == "a.png"


def test_delete_media_removes_object(client, fake_db, editor_headers, s3):
    media = fake_db.seed("media", {"filename": "a.png", "path": "/a.png"})[0]

    response = client.delete(f"/api/media/{media['id']}", headers=editor_headers)

    assert response.json() == {"message": "Media deleted successfully"}
    s3.delete_object.assert_called_once_with(Bucket=BUCKET, Key="uploads/a.png")


def test_delete_media_survives_storage_errors(client, fake_db, editor_headers, s3):
    media = fake_db.seed("media", {"filename": "a.png", "path": "/a.png"})[0]
    s3.delete_object.side_effect = Exception("AccessDenied")

    response = client.delete(f"/api/media/{media['id']}", headers=editor_headers)

    assert response.status_code == 200
    assert fake_db.tables["media"] == []


def test_get_missing_media(client):
    assert client.get("/api/media/missing").json()["detail"] == "Media not found"
