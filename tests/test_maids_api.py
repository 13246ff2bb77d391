from fastapi.testclient import TestClient

from maid_easy_api.app.core.config import Settings
from maid_easy_api.app.main import create_app


def test_register_maid_fills_defaults(client, maid_payload):
    resp = client.post("/api/maids", json=maid_payload())
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["services"] == []
    assert data["isAvailable"] is True
    assert data["address"] is None
    assert "joinedAt" in data


def test_register_maid_keeps_services_order(client, maid_payload):
    services = ["Cooking", "Cleaning", "Pet Care"]
    resp = client.post("/api/maids", json=maid_payload(services=services))
    assert resp.json()["data"]["services"] == services
    maid_id = resp.json()["data"]["id"]
    assert client.get(f"/api/maids/{maid_id}").json()["data"]["services"] == services


def test_duplicate_maid_email_conflicts(client, maid_payload):
    assert client.post("/api/maids", json=maid_payload(email="a@x.com")).status_code == 201
    resp = client.post("/api/maids", json=maid_payload(email="a@x.com", name="Other Person"))
    assert resp.status_code == 409
    assert len(client.get("/api/maids").json()["data"]) == 1


def test_maid_email_does_not_clash_with_user_email(client, register_user, maid_payload):
    register_user("priya", email="priya@example.com")
    assert client.post("/api/maids", json=maid_payload(email="priya@example.com")).status_code == 201


def test_register_maid_validation(client, maid_payload):
    resp = client.post("/api/maids", json=maid_payload(phone="123", email="bad"))
    assert resp.status_code == 400
    assert {e["field"] for e in resp.json()["errors"]} == {"phone", "email"}

    resp = client.post("/api/maids", json={"name": "Priya"})
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert {"email", "phone", "city", "locality"} <= fields


def test_filter_by_city_and_locality(client, maid_payload):
    client.post("/api/maids", json=maid_payload(email="a@example.com", city="Mumbai", locality="Andheri"))
    client.post("/api/maids", json=maid_payload(email="b@example.com", city="MUMBAI", locality="Bandra"))
    client.post("/api/maids", json=maid_payload(email="c@example.com", city="Delhi", locality="Saket"))

    resp = client.get("/api/maids/city/Mumbai")
    assert resp.status_code == 200
    assert [m["email"] for m in resp.json()["data"]] == ["a@example.com", "b@example.com"]

    resp = client.get("/api/maids/locality/saket")
    assert [m["email"] for m in resp.json()["data"]] == ["c@example.com"]

    assert client.get("/api/maids/city/Pune").json()["data"] == []


def test_get_maid_by_id(client, maid):
    resp = client.get(f"/api/maids/{maid['id']}")
    assert resp.status_code == 200
    assert resp.json()["data"]["email"] == maid["email"]


def test_get_maid_unknown_and_malformed_id(client):
    assert client.get("/api/maids/999999").status_code == 404
    resp = client.get("/api/maids/abc")
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "maid_id"


def test_availability_toggle_is_admin_only(client, maid, admin_headers, customer_headers):
    url = f"/api/maids/{maid['id']}/availability"
    assert client.patch(url, json={"isAvailable": False}).status_code == 401
    assert client.patch(url, json={"isAvailable": False}, headers=customer_headers).status_code == 403

    resp = client.patch(url, json={"isAvailable": False}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["isAvailable"] is False

    listed = {m["id"]: m for m in client.get("/api/maids").json()["data"]}
    assert listed[maid["id"]]["isAvailable"] is False


def test_availability_toggle_unknown_maid(client, admin_headers):
    resp = client.patch("/api/maids/999/availability", json={"isAvailable": True}, headers=admin_headers)
    assert resp.status_code == 404


def test_availability_requires_boolean(client, maid, admin_headers):
    resp = client.patch(f"/api/maids/{maid['id']}/availability", json={}, headers=admin_headers)
    assert resp.status_code == 400


def test_maid_bookings_for_admin(client, maid, admin_headers, customer_headers, booking_payload):
    client.post("/api/bookings", json=booking_payload(maid["id"]), headers=customer_headers)
    url = f"/api/maids/{maid['id']}/bookings"
    assert client.get(url, headers=customer_headers).status_code == 403
    resp = client.get(url, headers=admin_headers)
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 1
    assert client.get("/api/maids/999/bookings", headers=admin_headers).status_code == 404


def test_sample_directory_is_seeded():
    app = create_app(Settings(seed_sample_data=True, api_prefix="/api"))
    with TestClient(app) as client:
        maids = client.get("/api/maids").json()["data"]
        assert len(maids) == 10
        mumbai = client.get("/api/maids/city/mumbai").json()["data"]
        assert {m["locality"] for m in mumbai} == {"Andheri", "Bandra"}
        assert all(m["isAvailable"] for m in maids)


def test_maid_email_is_stored_lowercase_and_unique(client, maid_payload):
    resp = client.post("/api/maids", json=maid_payload(email="A@X.COM"))
    assert resp.status_code == 201
    assert resp.json()["data"]["email"] == "a@x.com"

    resp = client.post("/api/maids", json=maid_payload(email="a@x.com", name="Another Maid"))
    assert resp.status_code == 409
