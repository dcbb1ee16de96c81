from fastapi import status
from fastapi.testclient import TestClient

from tests.consts import (
    TEST_FOLDER_ID,
    TEST_PDF_CONTENT,
    TEST_PDF_CONTENT_TYPE,
    TEST_PDF_NAME,
)


def test__upload_file__uses_original_filename(client: TestClient, fake_drive, staging_dir):
    response = client.post(
        "/upload",
        files={"file": (TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"]
    assert data["name"] == TEST_PDF_NAME
    assert data["webViewLink"].startswith("https://drive.google.com/file/d/")

    assert len(fake_drive.created_files) == 1
    created = fake_drive.created_files[0]
    assert created["id"] == data["id"]
    assert created["body"] == {"name": TEST_PDF_NAME, "parents": [TEST_FOLDER_ID]}
    assert created["fields"] == "id, name, webViewLink"
    assert created["mimetype"] == TEST_PDF_CONTENT_TYPE
    assert created["content"] == TEST_PDF_CONTENT

    # exactly one staged file existed during the Drive call, and none remain
    assert len(created["staged_files"]) == 1
    assert list(staging_dir.iterdir()) == []


def test__upload_file__desired_file_name_overrides_original(client: TestClient, fake_drive):
    response = client.post(
        "/upload",
        files={"file": ("scan-0001.pdf", TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)},
        data={"desiredFileName": "custom.pdf"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "custom.pdf"
    assert fake_drive.created_files[0]["body"]["name"] == "custom.pdf"


def test__upload_file__empty_desired_file_name_falls_back(client: TestClient, fake_drive):
    response = client.post(
        "/upload",
        files={"file": (TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)},
        data={"desiredFileName": ""},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == TEST_PDF_NAME


def test__upload_file__builds_link_when_drive_omits_it(client: TestClient, fake_drive):
    fake_drive.omit_link = True

    response = client.post(
        "/upload",
        files={"file": (TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["webViewLink"] == f"https://drive.google.com/file/d/{data['id']}/view"


def test__grant_access__happy_path(client: TestClient, fake_drive):
    response = client.post("/grant-access", json={"fileId": "abc123", "email": "a@example.com"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Access granted to a@example.com"}
    assert fake_drive.granted == [
        {
            "fileId": "abc123",
            "body": {"type": "user", "role": "reader", "emailAddress": "a@example.com"},
            "fields": "id",
        }
    ]


def test__grant_access__repeat_call_is_passed_through(client: TestClient, fake_drive):
    payload = {"fileId": "abc123", "email": "a@example.com"}

    first = client.post("/grant-access", json=payload)
    second = client.post("/grant-access", json=payload)

    assert first.status_code == second.status_code == status.HTTP_200_OK
    assert len(fake_drive.granted) == 2


def test__create_order__happy_path(client: TestClient, fake_razorpay):
    response = client.post("/create-razorpay-order", json={"orderId": "ord-1", "amount": 10000})

    assert response.status_code == status.HTTP_200_OK
    order = response.json()
    assert order["receipt"] == "ord-1"
    assert order["amount"] == 10000
    assert order["currency"] == "INR"
    assert order["id"].startswith("order_")

    assert fake_razorpay.requests == [
        {"amount": 10000, "currency": "INR", "receipt": "ord-1", "payment_capture": 1}
    ]


def test__create_order__gateway_object_is_passed_through(client: TestClient):
    response = client.post("/create-razorpay-order", json={"orderId": "ord-7", "amount": 4999})

    order = response.json()
    # fields the gateway adds are returned untouched
    assert order["entity"] == "order"
    assert order["status"] == "created"
    assert order["amount_due"] == 4999
    assert order["notes"] == []


def test__create_order__repeated_call_creates_a_second_order(client: TestClient, fake_razorpay):
    payload = {"orderId": "ord-1", "amount": 10000}

    first = client.post("/create-razorpay-order", json=payload).json()
    second = client.post("/create-razorpay-order", json=payload).json()

    assert first["id"] != second["id"]
    assert first["receipt"] == second["receipt"] == "ord-1"
    assert len(fake_razorpay.requests) == 2


def test__create_order__numeric_order_id_is_used_as_receipt(client: TestClient):
    response = client.post("/create-razorpay-order", json={"orderId": 42, "amount": 100})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["receipt"] == "42"


def test__health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": "ok",
        "components": {"api": "ready", "storage": "ready", "payments": "ready"},
    }


def test__cors__any_origin_is_allowed(client: TestClient):
    response = client.options(
        "/grant-access",
        headers={
            "Origin": "https://shop.example.org",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"


def test__grant_access__numeric_file_id_is_forwarded(client: TestClient, fake_drive):
    response = client.post("/grant-access", json={"fileId": 123, "email": "a@example.com"})

    assert response.status_code == status.HTTP_200_OK
    assert fake_drive.granted[0]["fileId"] == "123"
