def register_payload(**overrides):
    payload = {
        "username": "priya",
        "password": "secret123",
        "email": "priya@example.com",
        "name": "Priya Sharma",
    }
    payload.update(overrides)
    return payload


def test_register_returns_customer_without_password(client):
    resp = client.post("/api/register", json=register_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["data"]["role"] == "customer"
    assert body["data"]["username"] == "priya"
    assert "password" not in body["data"]
    assert body["token"]


def test_register_cannot_choose_role(client):
    resp = client.post("/api/register", json=register_payload(role="admin"))
    assert resp.status_code == 201
    assert resp.json()["data"]["role"] == "customer"


def test_register_logs_the_user_in(client):
    client.post("/api/register", json=register_payload())
    resp = client.get("/api/user")
    assert resp.status_code == 200
    assert resp.json()["data"]["username"] == "priya"


def test_register_conflicts(client):
    assert client.post("/api/register", json=register_payload()).status_code == 201
    resp = client.post("/api/register", json=register_payload(email="other@example.com"))
    assert resp.status_code == 409
    resp = client.post("/api/register", json=register_payload(username="another"))
    assert resp.status_code == 409


def test_register_validation(client):
    resp = client.post("/api/register", json=register_payload(username="ab", password="123"))
    assert resp.status_code == 400
    assert {e["field"] for e in resp.json()["errors"]} == {"username", "password"}


def test_login_returns_user_with_role(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["data"]["role"] == "admin"
    assert "password" not in body["data"]
    assert body["token"]


def test_login_with_bad_credentials(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "wrongpass"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid username or password"
    resp = client.post("/api/login", json={"username": "nobody", "password": "whatever"})
    assert resp.status_code == 401


def test_login_validation(client):
    resp = client.post("/api/login", json={"username": "ad"})
    assert resp.status_code == 400


def test_cookie_session_and_logout(client):
    client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert client.get("/api/user").status_code == 200

    resp = client.post("/api/logout")
    assert resp.status_code == 200
    assert client.get("/api/user").status_code == 401


def test_bearer_token_is_invalid_after_logout(client, admin_headers):
    assert client.get("/api/user", headers=admin_headers).status_code == 200
    assert client.post("/api/logout", headers=admin_headers).status_code == 200
    assert client.get("/api/user", headers=admin_headers).status_code == 401


def test_logout_requires_authentication(client):
    resp = client.post("/api/logout")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


def test_unknown_token_is_rejected(client):
    resp = client.get("/api/user", headers={"Authorization": "Bearer not-a-session"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired session"


def test_session_expires_after_ttl(client, app, admin_headers):
    sessions = app.state.sessions
    for session in list(sessions._sessions.values()):
        session.expires_at = 0
    assert client.get("/api/user", headers=admin_headers).status_code == 401


def test_register_email_matching_ignores_case(client):
    resp = client.post("/api/register", json=register_payload(email="A@X.COM"))
    assert resp.status_code == 201
    assert resp.json()["data"]["email"] == "a@x.com"

    resp = client.post("/api/register", json=register_payload(username="lower", email="a@x.com"))
    assert resp.status_code == 409
    assert resp.json()["message"] == "Email already registered"


def test_session_cookie_has_no_fixed_lifetime(client, settings):
    resp = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    cookie = resp.headers["set-cookie"]
    assert cookie.startswith(f"{settings.session_cookie_name}=")
    assert "HttpOnly" in cookie
    assert "Max-Age" not in cookie
    assert "expires" not in cookie.lower()
