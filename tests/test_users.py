"""
Tests for registration, login and token handling.
"""

from datetime import timedelta
from types import SimpleNamespace

from test_fixtures import auth_headers, make_user, meal_scenario
from app.config import settings
from services.auth_service import AuthService


# =============================================================================
# REGISTRATION
# =============================================================================


def test_register_returns_user_and_token(client):
    r = client.post(
        "/api/users",
        json={
            "username": "bob",
            "email": "Bob@Example.com",
            "password": "123456",
            "calories": 2400,
        },
    )

    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "bob@example.com"
    assert body["admin"] is False
    assert body["calories"] == 2400
    assert "password" not in body and "passwordDigest" not in body

    token = r.headers[settings.auth_header_name]
    me = client.get("/api/users/me", headers=auth_headers(token=token))
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_register_duplicate_email_conflicts(client, db_session):
    make_user(db_session, email="bob@example.com")

    r = client.post(
        "/api/users",
        json={"username": "bob2", "email": "bob@example.com", "password": "abcdef"},
    )

    assert r.status_code == 409


def test_register_validates_body(client):
    r = client.post("/api/users", json={"username": "bob", "email": "nope", "password": "123456"})
    assert r.status_code == 400

    r = client.post(
        "/api/users", json={"username": "bob", "email": "bob@example.com", "password": "123"}
    )
    assert r.status_code == 400


# =============================================================================
# LOGIN
# =============================================================================


def test_login_issues_token_for_valid_credentials(client, db_session):
    user = make_user(db_session, email="seth@example.com", password="s3cret!")

    r = client.post("/api/auth", json={"email": "seth@example.com", "password": "s3cret!"})

    assert r.status_code == 200
    payload = AuthService.decode_token(r.json()["token"])
    assert payload.user_id == user.id
    assert payload.username == "bob"


def test_login_rejects_bad_credentials(client, db_session):
    make_user(db_session, email="seth@example.com", password="s3cret!")

    r = client.post("/api/auth", json={"email": "seth@example.com", "password": "wrong"})
    assert r.status_code == 401

    r = client.post("/api/auth", json={"email": "nobody@example.com", "password": "s3cret!"})
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "INVALID_CREDENTIALS"


# =============================================================================
# TOKENS
# =============================================================================


def test_expired_token_is_rejected(client, db_session):
    s = meal_scenario(db_session)
    expired = AuthService.create_access_token(s.user, expires_delta=timedelta(seconds=-5))

    r = client.get(
        f"/api/meals/{s.meal_id}/meal-ingredients/{s.meal_ingredient_id}",
        headers=auth_headers(token=expired),
    )

    assert r.status_code == 401
    assert r.json()["error"]["code"] == "TOKEN_EXPIRED"


def test_token_for_deleted_user_is_rejected(client, db_session):
    user = make_user(db_session)
    headers = auth_headers(user)
    db_session.delete(user)
    db_session.commit()

    assert client.get("/api/users/me", headers=headers).status_code == 401


def test_token_signed_with_other_secret_is_rejected(client, db_session, monkeypatch):
    user = make_user(db_session)
    monkeypatch.setattr(settings, "jwt_secret_key", "someone-else")
    forged = AuthService.create_access_token(user)
    monkeypatch.undo()

    assert client.get("/api/users/me", headers=auth_headers(token=forged)).status_code == 401


def test_password_hash_round_trip():
    digest = AuthService.hash_password("123456")

    assert digest != "123456"
    assert AuthService.verify_password("123456", digest)
    assert not AuthService.verify_password("654321", digest)
    # legacy plain-text digests never verify
    assert not AuthService.verify_password("123456", "123456")


def test_token_carries_admin_claim():
    admin = SimpleNamespace(id=7, username="root", admin=True)

    payload = AuthService.decode_token(AuthService.create_access_token(admin))

    assert payload.sub == "7"
    assert payload.admin is True
