"""Tests for authentication endpoints and helpers."""
from datetime import datetime, timedelta
from app.backend.core.security import extract_bearer_token, hash_password, verify_password
from app.backend.db.models import AuthSession


def test_hash_and_verify_password():
    """Test PBKDF2 hashing round trip."""
    stored = hash_password("correct horse")
    assert stored != "correct horse"
    assert verify_password("correct horse", stored)
    assert not verify_password("wrong", stored)
    assert not verify_password("anything", "malformed")


def test_extract_bearer_token():
    """Test Authorization header parsing."""
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("bearer abc ") == "abc"
    assert extract_bearer_token("Basic abc") is None
    assert extract_bearer_token("Bearer ") is None
    assert extract_bearer_token(None) is None


def test_sign_up_returns_session(client, sample_user_data):
    """Test registering a user."""
    response = client.post("/api/auth/signup", json=sample_user_data)
    assert response.status_code == 201
    data = response.json()
    assert data["access_token"]
    assert data["user"]["email"] == "ana@example.com"
    assert data["user"]["display_name"] == "Ana Souza"


def test_sign_up_twice_conflicts(client, sample_user_data):
    """Test that an e-mail can only register once."""
    client.post("/api/auth/signup", json=sample_user_data)
    response = client.post(
        "/api/auth/signup", json={**sample_user_data, "email": "ANA@example.com"}
    )
    assert response.status_code == 409


def test_sign_in(client, sample_user_data):
    """Test password sign-in."""
    client.post("/api/auth/signup", json=sample_user_data)

    ok = client.post(
        "/api/auth/signin",
        json={"email": sample_user_data["email"], "password": sample_user_data["password"]}
    )
    assert ok.status_code == 200
    assert ok.json()["token_type"] == "bearer"

    bad = client.post(
        "/api/auth/signin", json={"email": sample_user_data["email"], "password": "nope"}
    )
    assert bad.status_code == 400
    assert bad.json()["detail"]["code"] == "invalid_credentials"


def test_current_user_and_sign_out(client, signed_in):
    """Test resolving and revoking a token."""
    user_id, headers = signed_in

    me = client.get("/api/auth/user", headers=headers)
    assert me.status_code == 200
    assert me.json()["id"] == user_id

    assert client.post("/api/auth/signout", headers=headers).status_code == 204
    assert client.get("/api/auth/user", headers=headers).status_code == 401


def test_expired_session_is_rejected(client, db_session, signed_in):
    """Test that expired tokens no longer authenticate."""
    _, headers = signed_in
    session = db_session.query(AuthSession).first()
    session.expires_at = datetime.utcnow() - timedelta(minutes=1)
    db_session.commit()

    assert client.get("/api/auth/user", headers=headers).status_code == 401
