import pytest
from fastapi.testclient import TestClient

from maid_easy_api.app.core.config import Settings
from maid_easy_api.app.main import create_app


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def settings():
    return Settings(
        seed_sample_data=False,
        api_prefix="/api",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        admin_email="admin@maideasy.com",
        debug=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def login(client):
    """Log in and return bearer headers; the session cookie is dropped
    so that requests without headers stay anonymous."""

    def _login(username, password):
        resp = client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _login


@pytest.fixture
def register_user(client):
    def _register(username, email=None, password="secret123", name="Test Customer"):
        resp = client.post(
            "/api/register",
            json={
                "username": username,
                "password": password,
                "email": email or f"{username}@example.com",
                "name": name,
            },
        )
        assert resp.status_code == 201, resp.text
        client.cookies.clear()
        body = resp.json()
        return body["data"], {"Authorization": f"Bearer {body['token']}"}

    return _register


@pytest.fixture
def admin_headers(login):
    return login(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def customer(register_user):
    return register_user("customer1")


@pytest.fixture
def customer_headers(customer):
    return customer[1]


@pytest.fixture
def other_headers(register_user):
    return register_user("customer2")[1]


@pytest.fixture
def maid_payload():
    def _payload(**overrides):
        payload = {
            "name": "Priya Sharma",
            "email": "priya@example.com",
            "phone": "9876543210",
            "city": "Mumbai",
            "locality": "Andheri",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def maid(client, maid_payload):
    resp = client.post("/api/maids", json=maid_payload())
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture
def booking_payload():
    def _payload(maid_id, **overrides):
        payload = {
            "maidId": maid_id,
            "serviceType": "Cleaning",
            "bookingDate": "2025-09-01",
            "bookingTime": "10:00",
            "address": "45 Park Avenue, Bandra West",
        }
        payload.update(overrides)
        return payload

    return _payload
