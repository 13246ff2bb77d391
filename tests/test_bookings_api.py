import pytest

from maid_easy_api.app.schemas.user import UserRole


VALID_STATUSES = ["pending", "confirmed", "completed", "cancelled"]


@pytest.fixture
def booking(client, maid, customer_headers, booking_payload):
    resp = client.post("/api/bookings", json=booking_payload(maid["id"]), headers=customer_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_anonymous_booking_is_rejected(client, maid, booking_payload):
    resp = client.post("/api/bookings", json=booking_payload(maid["id"]))
    assert resp.status_code == 401


def test_booking_unknown_maid(client, customer_headers, booking_payload):
    resp = client.post("/api/bookings", json=booking_payload(999999), headers=customer_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Maid not found"


@pytest.mark.parametrize("maid_id", [0, -1])
def test_booking_non_positive_maid_id_is_unknown(client, customer_headers, booking_payload, maid_id):
    resp = client.post("/api/bookings", json=booking_payload(maid_id), headers=customer_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Maid not found"


def test_booking_created_pending_for_requester(client, maid, customer, booking_payload):
    user, headers = customer
    resp = client.post(
        "/api/bookings",
        json=booking_payload(maid["id"], notes="Ring the bell", status="completed", userId=12345),
        headers=headers,
    )
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["status"] == "pending"
    assert data["userId"] == user["id"]
    assert data["maidId"] == maid["id"]
    assert data["notes"] == "Ring the bell"


def test_booking_validation(client, maid, customer_headers, booking_payload):
    resp = client.post(
        "/api/bookings",
        json=booking_payload(maid["id"], address="x", bookingDate=""),
        headers=customer_headers,
    )
    assert resp.status_code == 400
    assert {e["field"] for e in resp.json()["errors"]} == {"address", "bookingDate"}


def test_list_bookings_is_scoped_by_role(
    client, maid, register_user, admin_headers, booking_payload
):
    alice, alice_headers = register_user("alice")
    bob, bob_headers = register_user("bobby")
    for _ in range(2):
        client.post("/api/bookings", json=booking_payload(maid["id"]), headers=alice_headers)
    client.post("/api/bookings", json=booking_payload(maid["id"]), headers=bob_headers)

    alice_view = client.get("/api/bookings", headers=alice_headers).json()["data"]
    assert len(alice_view) == 2
    assert {b["userId"] for b in alice_view} == {alice["id"]}

    bob_view = client.get("/api/bookings", headers=bob_headers).json()["data"]
    assert [b["userId"] for b in bob_view] == [bob["id"]]

    admin_view = client.get("/api/bookings", headers=admin_headers).json()["data"]
    assert len(admin_view) == 3


def test_promoted_user_sees_every_booking(app, client, booking, register_user):
    staff, staff_headers = register_user("staff")
    assert client.get("/api/bookings", headers=staff_headers).json()["data"] == []

    store = app.state.store
    store._users[staff["id"]] = store.get_user(staff["id"]).model_copy(update={"role": UserRole.ADMIN})

    view = client.get("/api/bookings", headers=staff_headers).json()["data"]
    assert [b["id"] for b in view] == [booking["id"]]


def test_list_bookings_requires_authentication(client):
    assert client.get("/api/bookings").status_code == 401


def test_get_booking_access(client, booking, customer_headers, other_headers, admin_headers):
    url = f"/api/bookings/{booking['id']}"
    assert client.get(url, headers=customer_headers).status_code == 200
    assert client.get(url, headers=admin_headers).status_code == 200
    resp = client.get(url, headers=other_headers)
    assert resp.status_code == 403
    assert client.get(url).status_code == 401


def test_get_unknown_booking(client, customer_headers):
    assert client.get("/api/bookings/424242", headers=customer_headers).status_code == 404


@pytest.mark.parametrize("status", VALID_STATUSES)
def test_owner_can_set_any_valid_status(client, booking, customer_headers, status):
    resp = client.patch(
        f"/api/bookings/{booking['id']}/status", json={"status": status}, headers=customer_headers
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == status


@pytest.mark.parametrize("status", VALID_STATUSES)
def test_other_user_cannot_set_status(client, booking, other_headers, status):
    resp = client.patch(
        f"/api/bookings/{booking['id']}/status", json={"status": status}, headers=other_headers
    )
    assert resp.status_code == 403


def test_admin_can_set_status(client, booking, admin_headers, customer_headers):
    resp = client.patch(
        f"/api/bookings/{booking['id']}/status", json={"status": "confirmed"}, headers=admin_headers
    )
    assert resp.status_code == 200
    current = client.get(f"/api/bookings/{booking['id']}", headers=customer_headers).json()["data"]
    assert current["status"] == "confirmed"


@pytest.mark.parametrize("status", ["done", "PENDING", "", None, 3])
def test_invalid_status_is_rejected_whatever_the_current_status(
    client, booking, customer_headers, admin_headers, status
):
    url = f"/api/bookings/{booking['id']}/status"
    for current in ("pending", "cancelled"):
        client.patch(url, json={"status": current}, headers=admin_headers)
        resp = client.patch(url, json={"status": status}, headers=customer_headers)
        assert resp.status_code == 400
        assert resp.json()["errors"][0]["field"] == "status"
    stored = client.get(f"/api/bookings/{booking['id']}", headers=customer_headers).json()["data"]
    assert stored["status"] == "cancelled"


def test_status_update_on_unknown_booking(client, customer_headers):
    resp = client.patch("/api/bookings/999/status", json={"status": "confirmed"}, headers=customer_headers)
    assert resp.status_code == 404
