import time
from datetime import timedelta

import jwt

from airline_api.core.config import settings
from airline_api.core.security import create_access_token


def test_login_returns_token_and_profile(client):
    r = client.post("/auth/login", json={"username": "passenger", "password": "pass123"})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["role"] == "passenger"
    assert data["name"] == "Passenger User"
    assert data["email"] == "passenger@example.com"
    claims = jwt.decode(data["token"], settings.secret_key, algorithms=[settings.algorithm])
    assert claims["sub"] == "passenger"
    assert claims["role"] == "passenger"
    # 12h session
    assert abs(claims["exp"] - time.time() - 12 * 3600) < 60


def test_login_bad_credentials_share_one_message(client):
    wrong_pw = client.post("/auth/login", json={"username": "agent", "password": "nope"})
    unknown = client.post("/auth/login", json={"username": "ghost", "password": "agent123"})
    assert wrong_pw.status_code == 401
    assert unknown.status_code == 401
    assert wrong_pw.json() == unknown.json() == {"message": "Invalid credentials."}


def test_login_requires_both_fields(client):
    r = client.post("/auth/login", json={"username": "agent"})
    assert r.status_code == 400
    assert r.json()["message"] == "username and password are required."


def test_register_then_login(client):
    r = client.post(
        "/auth/register",
        json={"username": "newagent", "password": "pw12345", "name": "Nina Agent", "email": "nina@example.com", "role": "Agent"},
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["username"] == "newagent"
    assert body["role"] == "agent"
    assert body["message"] == "Registration successful. You can now login."

    r2 = client.post("/auth/login", json={"username": "newagent", "password": "pw12345"})
    assert r2.status_code == 200
    assert r2.json()["role"] == "agent"
    assert r2.json()["name"] == "Nina Agent"


def test_register_duplicate_username(client):
    payload = {"username": "crew", "password": "x", "name": "Dup", "email": "dup@example.com", "role": "crew"}
    r = client.post("/auth/register", json=payload)
    assert r.status_code == 409
    assert r.json() == {"message": "Username already exists."}


def test_register_admin_forbidden(client):
    payload = {"username": "boss", "password": "x", "name": "Boss", "email": "boss@example.com", "role": "admin"}
    r = client.post("/auth/register", json=payload)
    assert r.status_code == 403
    assert r.json() == {"message": "Cannot register as admin."}


def test_register_unknown_role(client):
    payload = {"username": "pilot1", "password": "x", "name": "P", "email": "p@example.com", "role": "pilot"}
    r = client.post("/auth/register", json=payload)
    assert r.status_code == 400
    assert r.json()["message"].startswith("Invalid role")


def test_register_missing_fields(client):
    r = client.post("/auth/register", json={"username": "half", "password": "x"})
    assert r.status_code == 400
    assert "required" in r.json()["message"]


def test_register_rejects_malformed_email(client):
    payload = {"username": "bad", "password": "x", "name": "Bad", "email": "not-an-email", "role": "passenger"}
    r = client.post("/auth/register", json=payload)
    assert r.status_code == 400
    assert "email" in r.json()["message"]


def test_missing_token(client):
    r = client.get("/passenger/tickets")
    assert r.status_code == 401
    assert r.json() == {"message": "Missing or invalid Authorization header."}


def test_garbage_token(client):
    r = client.get("/passenger/tickets", headers={"Authorization": "Bearer not.a.jwt"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid or expired token."}


def test_expired_token(client):
    token = create_access_token("passenger", "passenger", expires_delta=timedelta(minutes=-1))
    r = client.get("/passenger/tickets", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json() == {"message": "Invalid or expired token."}


def test_token_with_unknown_role_rejected(client):
    token = create_access_token("mallory", "superuser")
    r = client.get("/admin/flights", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_wrong_role_forbidden(client, login):
    r = client.get("/admin/aircraft", headers=login("agent"))
    assert r.status_code == 403
    assert r.json() == {"message": "Forbidden for this role."}


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Airline API is running."}
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
