"""Tests for vendor profiles and bookings."""

from __future__ import annotations

from fastapi.testclient import TestClient

from sehra.domain.entities import UserRole

PROFILE = {
    "business_name": "Golden Lens",
    "vendor_type": "photographer",
    "services": ["candid", "drone"],
    "pricing": {"basic": 1500},
}


def _authenticate(websocket, headers: dict[str, str]) -> dict:
    token = headers["Authorization"].split(" ", 1)[1]
    websocket.send_json({"type": "authenticate", "data": {"token": token}})
    authenticated = websocket.receive_json()
    assert authenticated["type"] == "authenticated"
    assert websocket.receive_json()["type"] == "unread_count"
    return authenticated["data"]


def test_vendor_profile_lifecycle(client: TestClient, make_user) -> None:
    vendor, vendor_headers = make_user("Vera", "vera@example.com", role=UserRole.VENDOR)
    _, client_headers = make_user("Asha", "asha@example.com")

    assert client.get("/api/vendors/me", headers=vendor_headers).status_code == 404
    assert client.post("/api/vendors", json=PROFILE, headers=client_headers).status_code == 403

    created = client.post("/api/vendors", json=PROFILE, headers=vendor_headers)
    assert created.status_code == 201
    profile = created.json()
    assert profile["user_id"] == vendor["id"]
    assert profile["services"] == ["candid", "drone"]
    assert profile["verified"] is False

    again = client.post("/api/vendors", json=PROFILE, headers=vendor_headers)
    assert again.status_code == 400
    assert again.json() == {"message": "Vendor profile already exists"}

    own = client.get("/api/vendors/me", headers=vendor_headers)
    assert own.status_code == 200
    assert own.json()["id"] == profile["id"]

    public = client.get(f"/api/vendors/{profile['id']}")
    assert public.status_code == 200
    assert public.json()["business_name"] == "Golden Lens"


def test_vendor_curation_flags_are_admin_only(client: TestClient, make_user) -> None:
    _, vendor_headers = make_user("Vera", "vera@example.com", role=UserRole.VENDOR)
    _, admin_headers = make_user("Root", "root@example.com", role=UserRole.ADMIN)
    _, rival_headers = make_user("Rita", "rita@example.com", role=UserRole.VENDOR)
    vendor_id = client.post("/api/vendors", json=PROFILE, headers=vendor_headers).json()["id"]

    self_verify = client.patch(
        f"/api/vendors/{vendor_id}",
        json={"verified": True, "description": "Award winning"},
        headers=vendor_headers,
    )
    assert self_verify.status_code == 200
    assert self_verify.json()["verified"] is False
    assert self_verify.json()["description"] == "Award winning"

    rival = client.patch(f"/api/vendors/{vendor_id}", json={"description": "x"}, headers=rival_headers)
    assert rival.status_code == 403

    verified = client.patch(
        f"/api/vendors/{vendor_id}", json={"verified": True, "rating": 4.5}, headers=admin_headers
    )
    assert verified.status_code == 200
    assert verified.json()["verified"] is True
    assert verified.json()["rating"] == 4.5


def test_vendor_listing_orders_featured_first_and_filters(client: TestClient, make_user) -> None:
    _, admin_headers = make_user("Root", "root@example.com", role=UserRole.ADMIN)
    ids = {}
    for name, email, vendor_type in (
        ("Plain Photo", "p1@example.com", "photographer"),
        ("Star Photo", "p2@example.com", "photographer"),
        ("Feast", "c1@example.com", "catering"),
    ):
        _, headers = make_user(name, email, role=UserRole.VENDOR)
        ids[name] = client.post(
            "/api/vendors",
            json={"business_name": name, "vendor_type": vendor_type},
            headers=headers,
        ).json()["id"]

    client.patch(f"/api/vendors/{ids['Star Photo']}", json={"featured": True}, headers=admin_headers)

    listing = client.get("/api/vendors").json()
    assert listing[0]["business_name"] == "Star Photo"

    photographers = client.get("/api/vendors", params={"type": "photographer"}).json()
    assert {vendor["business_name"] for vendor in photographers} == {"Plain Photo", "Star Photo"}

    assert client.get("/api/vendors", params={"type": "juggler"}).status_code == 400


def test_booking_flow_notifies_vendor(client: TestClient, make_user) -> None:
    vendor, vendor_headers = make_user("Vera", "vera@example.com", role=UserRole.VENDOR)
    _, client_headers = make_user("Asha", "asha@example.com", package="Gold")
    _, stranger_headers = make_user("Meera", "meera@example.com")
    vendor_id = client.post("/api/vendors", json=PROFILE, headers=vendor_headers).json()["id"]

    with client.websocket_connect("/ws") as vendor_socket:
        _authenticate(vendor_socket, vendor_headers)

        created = client.post(
            "/api/bookings",
            json={"vendor_id": vendor_id, "event_date": "2027-02-14", "amount": 1500},
            headers=client_headers,
        )
        assert created.status_code == 201
        booking = created.json()
        assert booking["status"] == "pending"

        pushed = vendor_socket.receive_json()
        assert pushed["type"] == "booking_created"
        assert pushed["data"]["id"] == booking["id"]
        assert pushed["data"]["client_name"] == "Asha"

    vendor_view = client.get("/api/bookings", headers=vendor_headers).json()
    assert [entry["id"] for entry in vendor_view] == [booking["id"]]
    assert client.get("/api/bookings", headers=stranger_headers).json() == []

    forbidden = client.patch(
        f"/api/bookings/{booking['id']}", json={"status": "canceled"}, headers=stranger_headers
    )
    assert forbidden.status_code == 403

    confirmed = client.patch(
        f"/api/bookings/{booking['id']}", json={"status": "confirmed"}, headers=vendor_headers
    )
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "confirmed"
    assert vendor["id"] != confirmed.json()["user_id"]


def test_booking_requires_existing_vendor(client: TestClient, make_user) -> None:
    _, headers = make_user("Asha", "asha@example.com")

    response = client.post(
        "/api/bookings", json={"vendor_id": 404, "event_date": "2027-02-14"}, headers=headers
    )
    assert response.status_code == 404
    assert response.json() == {"message": "Vendor not found"}
