import io
import re
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from app.api.files.services import service_file
from app.utils import minio_client

FILES = "/api/files/admin/files"
UPLOAD_IMAGES = "/api/uploads/images"
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_upload_document(auth_client, fake_storage):
    resp = auth_client.post(FILES, files={"file": ("menu.pdf", b"%PDF-1.4 data", "application/pdf")})
    assert resp.status_code == 201, resp.text
    record = resp.json()
    assert record["name"] == "menu.pdf"
    assert record["type"] == "document"
    assert record["size"] == len(b"%PDF-1.4 data")
    assert re.fullmatch(r"uploads/[0-9a-f]{32}\.pdf", record["path"])
    assert record["url"] == f"http://cdn.test/files/{record['path']}"

    assert ("files", record["path"]) in fake_storage.objects
    assert "files" in fake_storage.policies


def test_list_by_type_and_delete(auth_client, fake_storage):
    auth_client.post(FILES, files={"file": ("logo.png", PNG, "image/png")})
    doc = auth_client.post(FILES, files={"file": ("notes.txt", b"hello", "text/plain")}).json()

    images = auth_client.get(FILES, params={"type": "image"}).json()
    assert [f["name"] for f in images] == ["logo.png"]

    assert auth_client.delete(f"{FILES}/{doc['id']}").status_code == 200
    assert ("files", doc["path"]) not in fake_storage.objects
    assert [f["name"] for f in auth_client.get(FILES).json()] == ["logo.png"]


def test_storage_failure_is_500_and_nothing_is_recorded(auth_client, failing_storage):
    resp = auth_client.post(FILES, files={"file": ("menu.pdf", b"data", "application/pdf")})
    assert resp.status_code == 500
    assert auth_client.get(FILES).json() == []


def test_upload_image_to_default_bucket(auth_client, fake_storage):
    resp = auth_client.post(UPLOAD_IMAGES, files={"file": ("Dish.PNG", PNG, "image/png")})
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["bucket"] == "images"
    assert re.fullmatch(r"images/\d{13}-[0-9a-f]{8}\.png", body["path"])
    assert body["url"] == f"http://cdn.test/images/{body['path']}"
    assert fake_storage.objects[("images", body["path"])] == (PNG, "image/png")


def test_upload_image_bucket_name_is_slugified(auth_client, fake_storage):
    resp = auth_client.post(
        UPLOAD_IMAGES,
        params={"bucket": "Restaurant Covers"},
        files={"file": ("cover.jpg", b"jpeg", "image/jpeg")},
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["bucket"] == "restaurant-covers"


@pytest.mark.parametrize(
    "upload, detail",
    [
        (("doc.pdf", b"data", "application/pdf"), "Please select an image file"),
        (("huge.png", b"0" * (5 * 1024 * 1024 + 1), "image/png"), "Image size must be less than 5MB"),
    ],
)
def test_upload_image_rejections(auth_client, fake_storage, upload, detail):
    resp = auth_client.post(UPLOAD_IMAGES, files={"file": upload})
    assert resp.status_code == 400
    assert resp.json() == {"detail": detail}
    assert fake_storage.objects == {}


def test_image_limit_message_follows_setting(auth_client, fake_storage, monkeypatch):
    monkeypatch.setattr(service_file, "MAX_IMAGE_SIZE_BYTES", 512 * 1024)
    resp = auth_client.post(UPLOAD_IMAGES, files={"file": ("big.png", b"0" * (600 * 1024), "image/png")})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Image size must be less than 0.5MB"}


class _UnreadableStream(io.BytesIO):
    def read(self, *args):
        raise AssertionError("oversized upload must not be read")


def test_declared_size_is_checked_before_reading():
    upload = SimpleNamespace(
        filename="huge.png",
        content_type="image/png",
        size=50 * 1024 * 1024,
        file=_UnreadableStream(),
    )
    with pytest.raises(HTTPException) as exc:
        service_file.upload_image(upload)
    assert exc.value.status_code == 400
    assert exc.value.detail == "Image size must be less than 5MB"


def test_read_is_bounded_without_declared_size(fake_storage):
    stream = io.BytesIO(b"0" * (10 * 1024 * 1024))
    upload = SimpleNamespace(filename="huge.png", content_type="image/png", size=None, file=stream)
    with pytest.raises(HTTPException) as exc:
        service_file.upload_image(upload)
    assert exc.value.status_code == 400
    assert stream.tell() == service_file.MAX_IMAGE_SIZE_BYTES + 1
    assert fake_storage.objects == {}


def test_upload_image_invalid_bucket(auth_client, fake_storage):
    resp = auth_client.post(UPLOAD_IMAGES, params={"bucket": "!!"}, files={"file": ("a.png", PNG, "image/png")})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid bucket name"}


def test_bucket_name_for():
    assert minio_client.bucket_name_for("Menu Photos") == "menu-photos"
    assert len(minio_client.bucket_name_for("x" * 100)) == 63
