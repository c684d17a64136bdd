from fastapi.testclient import TestClient

from graymap.main import app
from graymap.services.image_store import image_service

PGM_2X2 = b"P5\n# test\n2 2\n255\n" + bytes([1, 2, 3, 4])


def upload(client: TestClient, data: bytes, filename: str = "image.pgm"):
    return client.post(
        "/api/v1/images",
        files={"file": (filename, data, "application/octet-stream")},
    )


def test_health():
    client = TestClient(app)

    assert client.get("/health").json() == {"status": "ok"}


def test_upload_and_inspect_image():
    client = TestClient(app)
    image_service._images = {}

    response = upload(client, PGM_2X2)
    assert response.status_code == 201

    data = response.json()
    assert data["format"] == "P5"
    assert data["width"] == 2
    assert data["height"] == 2
    assert data["max_value"] == 255
    assert data["comment"] == "test"
    assert data["truncated"] is False
    assert data["initialized"] is True

    image_id = data["image_id"]
    assert client.get(f"/api/v1/images/{image_id}").json()["filename"] == "image.pgm"
    assert [item["image_id"] for item in client.get("/api/v1/images").json()] == [image_id]

    pixel = client.get(f"/api/v1/images/{image_id}/pixels/1/1")
    assert pixel.status_code == 200
    assert pixel.json() == {"x": 1, "y": 1, "value": 4}


def test_pixel_out_of_range_returns_404():
    client = TestClient(app)
    image_service._images = {}
    image_id = upload(client, PGM_2X2).json()["image_id"]

    response = client.get(f"/api/v1/images/{image_id}/pixels/5/5")

    assert response.status_code == 404


def test_rejects_empty_and_unsupported_uploads():
    client = TestClient(app)
    image_service._images = {}

    assert upload(client, b"").status_code == 400
    assert upload(client, b"P6\n1 1\n255\nabc").status_code == 400
    assert upload(client, b"P2\n1 1\n1024\n7\n").status_code == 400
    assert image_service.list_images() == []


def test_unknown_image_returns_404():
    client = TestClient(app)
    image_service._images = {}

    assert client.get("/api/v1/images/does-not-exist").status_code == 404
    assert client.get("/api/v1/images/does-not-exist/pixels/0/0").status_code == 404
    assert client.delete("/api/v1/images/does-not-exist").status_code == 404


def test_delete_image():
    client = TestClient(app)
    image_service._images = {}
    image_id = upload(client, PGM_2X2).json()["image_id"]

    assert client.delete(f"/api/v1/images/{image_id}").status_code == 204
    assert client.get(f"/api/v1/images/{image_id}").status_code == 404
