from datetime import timedelta

from catalog_server.api.auth import create_access_token
from conftest import register


def test_register_returns_user_and_token(client):
    body = register(client, email="ana@example.com", username="ana")
    assert body["token"]
    assert body["user"]["email"] == "ana@example.com"
    assert body["user"]["username"] == "ana"
    assert "password" not in body["user"]
    assert "hashedPassword" not in body["user"]


def test_register_with_optional_names(client):
    res = client.post(
        "/auth/register",
        json={
            "username": "demo",
            "email": "demo@demo.com",
            "password": "demo123",
            "firstName": "Demo",
            "lastName": "User",
        },
    )
    assert res.status_code == 201
    user = res.json()["user"]
    assert user["firstName"] == "Demo"
    assert user["lastName"] == "User"


def test_register_duplicate_email_conflicts(client):
    register(client)
    res = client.post(
        "/auth/register",
        json={"username": "other", "email": "demo@demo.com", "password": "secret1"},
    )
    assert res.status_code == 409
    assert res.json()["message"] == "Email already exists"


def test_register_rejects_bad_email(client):
    res = client.post(
        "/auth/register",
        json={"username": "x", "email": "not-an-email", "password": "secret1"},
    )
    assert res.status_code == 400
    assert res.json()["status"] == "error"


def test_login(client):
    register(client)
    res = client.post("/auth/login", json={"email": "demo@demo.com", "password": "demo123"})
    assert res.status_code == 200
    body = res.json()
    assert body["token"]
    assert body["user"]["username"] == "demo"


def test_login_wrong_password(client):
    register(client)
    res = client.post("/auth/login", json={"email": "demo@demo.com", "password": "nope"})
    assert res.status_code == 401
    assert res.json() == {"status": "error", "statusCode": 401, "message": "Invalid credentials"}


def test_login_unknown_email(client):
    res = client.post("/auth/login", json={"email": "ghost@example.com", "password": "demo123"})
    assert res.status_code == 401


def test_me_requires_token(client):
    assert client.get("/auth/me").status_code == 401


def test_me_with_token(client, auth_headers):
    res = client.get("/auth/me", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["email"] == "demo@demo.com"


def test_me_with_garbage_token(client):
    res = client.get("/auth/me", headers={"Authorization": "Bearer not.a.jwt"})
    assert res.status_code == 401


def test_me_with_expired_token(client):
    user = register(client)["user"]
    token = create_access_token({"sub": user["id"]}, expires_delta=timedelta(minutes=-5))
    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_token_for_unknown_user(client):
    token = create_access_token({"sub": "00000000-0000-0000-0000-000000000000"})
    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
