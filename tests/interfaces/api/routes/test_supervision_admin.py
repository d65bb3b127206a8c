"""Tests for admin account management and supervisor curation."""

from __future__ import annotations

import importlib

import pytest
from fastapi.testclient import TestClient

from sehra.domain.entities import UserRole
from sehra.infrastructure import database
from sehra.infrastructure.models import TaskModel

PROFILE = {"business_name": "Golden Lens", "vendor_type": "photographer"}


@pytest.fixture()
def outbox(monkeypatch) -> list[tuple]:
    """Capture the account emails instead of handing them to SendGrid."""

    sent: list[tuple] = []

    def _capture(kind):
        def _send(*args, **kwargs) -> bool:
            sent.append((kind, args, kwargs))
            return True

        return _send

    monkeypatch.setattr(
        importlib.import_module("sehra.application.use_cases.users.create_account"),
        "send_account_credentials_email",
        _capture("credentials"),
    )
    monkeypatch.setattr(
        importlib.import_module("sehra.application.use_cases.users.set_password"),
        "send_password_reset_email",
        _capture("reset"),
    )
    monkeypatch.setattr(
        importlib.import_module("sehra.application.use_cases.supervision"),
        "send_supervisor_assignment_email",
        _capture("supervisor"),
    )
    return sent


def _login(client: TestClient, email: str, password: str):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def _authenticate(websocket, headers: dict[str, str]) -> None:
    token = headers["Authorization"].split(" ", 1)[1]
    websocket.send_json({"type": "authenticate", "data": {"token": token}})
    assert websocket.receive_json()["type"] == "authenticated"
    assert websocket.receive_json()["type"] == "unread_count"


def test_admin_creates_accounts(client: TestClient, make_user, outbox) -> None:
    _, admin_headers = make_user("Ada", "ada@example.com", role=UserRole.ADMIN)
    _, bride_headers = make_user("Asha", "asha@example.com")
    body = {"name": "Sam", "email": "Sam@Example.com", "role": "supervisor"}

    assert client.post("/api/admin/users/create", json=body, headers=bride_headers).status_code == 403

    created = client.post("/api/admin/users/create", json=body, headers=admin_headers)
    assert created.status_code == 201, created.text
    payload = created.json()
    assert payload["user"]["email"] == "sam@example.com"
    assert payload["user"]["role"] == "supervisor"
    generated = payload["generated_password"]
    assert len(generated) == 12
    assert outbox == [
        ("credentials", ("Sam", "sam@example.com"), {"role": "supervisor", "password": generated})
    ]
    assert _login(client, "sam@example.com", generated).status_code == 200

    duplicate = client.post("/api/admin/users/create", json=body, headers=admin_headers)
    assert duplicate.status_code == 400
    assert duplicate.json() == {"message": "User with this email already exists"}

    chosen = client.post(
        "/api/admin/users/create",
        json={"name": "Vera", "email": "vera@example.com", "role": "vendor", "password": "Chosen123"},
        headers=admin_headers,
    )
    assert chosen.status_code == 201
    assert chosen.json()["generated_password"] is None
    assert len(outbox) == 1
    assert _login(client, "vera@example.com", "Chosen123").status_code == 200


def test_admin_sets_and_resets_passwords(client: TestClient, make_user, outbox) -> None:
    _, admin_headers = make_user("Ada", "ada@example.com", role=UserRole.ADMIN)
    asha, asha_headers = make_user("Asha", "asha@example.com")
    url = f"/api/admin/users/{asha['id']}/password"

    assert client.patch(url, json={"password": "NewSecret1"}, headers=asha_headers).status_code == 403

    updated = client.patch(url, json={"password": "NewSecret1"}, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json() == {"message": "Password updated successfully", "new_password": None}
    assert client.get("/api/users/me", headers=asha_headers).status_code == 401
    assert _login(client, "asha@example.com", "NewSecret1").status_code == 200

    reset = client.patch(url, json={"send_reset_email": True}, headers=admin_headers)
    assert reset.status_code == 200
    new_password = reset.json()["new_password"]
    assert outbox == [("reset", ("Asha", "asha@example.com", new_password), {})]
    assert _login(client, "asha@example.com", "NewSecret1").status_code == 400
    assert _login(client, "asha@example.com", new_password).status_code == 200

    missing = client.patch(url, json={}, headers=admin_headers)
    assert missing.status_code == 400
    assert missing.json() == {"message": "Password is required"}

    unknown = client.patch("/api/admin/users/9999/password", json={"password": "Whatever1"}, headers=admin_headers)
    assert unknown.status_code == 404


def test_admin_deletes_users(client: TestClient, make_user, outbox) -> None:
    admin, admin_headers = make_user("Ada", "ada@example.com", role=UserRole.ADMIN)
    sam, _ = make_user("Sam", "sam@example.com", role=UserRole.SUPERVISOR)
    asha, asha_headers = make_user("Asha", "asha@example.com")

    own = client.delete(f"/api/admin/users/{admin['id']}", headers=admin_headers)
    assert own.status_code == 400
    assert own.json() == {"message": "You cannot delete your own account"}

    allocated = client.patch(
        f"/api/admin/users/{asha['id']}/supervisor",
        json={"supervisor_id": sam["id"]},
        headers=admin_headers,
    )
    assert allocated.json()["supervisor_id"] == sam["id"]

    removed = client.delete(f"/api/admin/users/{sam['id']}", headers=admin_headers)
    assert removed.status_code == 200
    assert removed.json() == {"message": "User deleted successfully"}
    detached = client.get(f"/api/admin/users/{asha['id']}", headers=admin_headers).json()
    assert detached["supervisor_id"] is None

    assert client.post("/api/tasks", json={"title": "Book venue"}, headers=asha_headers).status_code == 201
    assert client.delete(f"/api/admin/users/{asha['id']}", headers=admin_headers).status_code == 200
    assert client.get(f"/api/admin/users/{asha['id']}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/admin/users/{asha['id']}", headers=admin_headers).status_code == 404

    session = database.SessionLocal()
    try:
        assert session.query(TaskModel).filter(TaskModel.user_id == asha["id"]).count() == 0
    finally:
        session.close()


def test_supervisor_curates_vendors_for_own_clients(client: TestClient, make_user, outbox) -> None:
    _, admin_headers = make_user("Ada", "ada@example.com", role=UserRole.ADMIN)
    sam, sam_headers = make_user("Sam", "sam@example.com", role=UserRole.SUPERVISOR)
    _, other_headers = make_user("Omar", "omar@example.com", role=UserRole.SUPERVISOR)
    asha, asha_headers = make_user("Asha", "asha@example.com", package="Gold")
    vera, vera_headers = make_user("Vera", "vera@example.com", role=UserRole.VENDOR)
    vik, _ = make_user("Vik", "vik@example.com", role=UserRole.VENDOR)
    assert client.post("/api/vendors", json=PROFILE, headers=vera_headers).status_code == 201

    assert client.get("/api/supervisor/clients", headers=sam_headers).json() == []
    client.patch(
        f"/api/admin/users/{asha['id']}/supervisor",
        json={"supervisor_id": sam["id"]},
        headers=admin_headers,
    )
    assert outbox == [
        ("supervisor", ("Asha", "asha@example.com"), {"supervisor_name": "Sam", "supervisor_email": "sam@example.com"})
    ]
    clients = client.get("/api/supervisor/clients", headers=sam_headers).json()
    assert [c["id"] for c in clients] == [asha["id"]]
    assert client.get("/api/supervisor/clients", headers=asha_headers).status_code == 403

    body = {"client_id": asha["id"], "vendor_ids": [vera["id"], vik["id"], vera["id"]]}
    assigned = client.post("/api/supervisor/assign-vendors", json=body, headers=sam_headers)
    assert assigned.status_code == 200, assigned.text
    by_id = {vendor["id"]: vendor for vendor in assigned.json()}
    assert set(by_id) == {vera["id"], vik["id"]}
    assert by_id[vera["id"]]["profile"]["business_name"] == "Golden Lens"
    assert by_id[vik["id"]]["profile"] is None

    foreign = client.post("/api/supervisor/assign-vendors", json=body, headers=other_headers)
    assert foreign.status_code == 403
    assert client.get(f"/api/supervisor/assigned-vendors/{asha['id']}", headers=other_headers).status_code == 403

    not_vendor = client.post(
        "/api/supervisor/assign-vendors",
        json={"client_id": asha["id"], "vendor_ids": [sam["id"]]},
        headers=sam_headers,
    )
    assert not_vendor.status_code == 404

    seen_by_supervisor = client.get(f"/api/supervisor/assigned-vendors/{asha['id']}", headers=sam_headers)
    assert {vendor["id"] for vendor in seen_by_supervisor.json()} == {vera["id"], vik["id"]}
    seen_by_client = client.get("/api/client/assigned-vendors", headers=asha_headers)
    assert {vendor["id"] for vendor in seen_by_client.json()} == {vera["id"], vik["id"]}
    assert client.get("/api/client/assigned-vendors", headers=sam_headers).status_code == 403

    cleared = client.post(
        "/api/supervisor/assign-vendors",
        json={"client_id": asha["id"], "vendor_ids": []},
        headers=sam_headers,
    )
    assert cleared.json() == []
    assert client.get("/api/client/assigned-vendors", headers=asha_headers).json() == []


def test_supervisor_allocation_over_the_socket(client: TestClient, make_user, outbox) -> None:
    _, admin_headers = make_user("Ada", "ada@example.com", role=UserRole.ADMIN)
    sam, sam_headers = make_user("Sam", "sam@example.com", role=UserRole.SUPERVISOR)
    asha, asha_headers = make_user("Asha", "asha@example.com", package="Gold")
    allocation = {
        "type": "supervisor_allocated",
        "data": {"client_id": asha["id"], "supervisor_id": sam["id"]},
    }

    with (
        client.websocket_connect("/ws") as admin_socket,
        client.websocket_connect("/ws") as sam_socket,
        client.websocket_connect("/ws") as asha_socket,
    ):
        _authenticate(admin_socket, admin_headers)
        _authenticate(sam_socket, sam_headers)
        _authenticate(asha_socket, asha_headers)

        asha_socket.send_json(allocation)
        assert asha_socket.receive_json() == {"type": "error", "data": {"message": "Not authorized"}}

        admin_socket.send_json(allocation)
        assert admin_socket.receive_json() == {
            "type": "allocation_success",
            "data": {"success": True, "client_id": asha["id"], "supervisor_id": sam["id"]},
        }
        assert asha_socket.receive_json() == {
            "type": "supervisor_assigned",
            "data": {"supervisor_id": sam["id"], "supervisor_name": "Sam", "supervisor_email": "sam@example.com"},
        }
        assert sam_socket.receive_json() == {
            "type": "client_assigned",
            "data": {
                "client_id": asha["id"],
                "client_name": "Asha",
                "client_email": "asha@example.com",
                "package": "Gold",
            },
        }

        admin_socket.send_json(
            {"type": "supervisor_allocated", "data": {"client_id": asha["id"], "supervisor_id": asha["id"]}}
        )
        assert admin_socket.receive_json() == {"type": "error", "data": {"message": "Supervisor not found"}}

    clients = client.get("/api/supervisor/clients", headers=sam_headers).json()
    assert [c["id"] for c in clients] == [asha["id"]]
