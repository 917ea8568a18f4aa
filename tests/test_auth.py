"""Registration, login and bearer-token authentication."""

from photofeed.core.security import create_access_token


def test_register_returns_created_user(client):
    res = client.post("/auth/register", json={
        "username": "alice",
        "email": "alice@example.com",
        "password": "wonderland",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "alice"
    assert body["avatar_url"] is None
    assert "password" not in body


def test_register_rejects_duplicate_username(client, make_user):
    make_user("alice")
    res = client.post("/auth/register", json={
        "username": "alice",
        "email": "other@example.com",
        "password": "wonderland",
    })
    assert res.status_code == 400


def test_register_rejects_invalid_email(client):
    res = client.post("/auth/register", json={
        "username": "alice",
        "email": "not-an-email",
        "password": "wonderland",
    })
    assert res.status_code == 400


def test_login_accepts_email_as_username(client, make_user):
    make_user("alice")
    res = client.post("/auth/login", data={"username": "alice@example.com", "password": "s3cret-pass"})
    assert res.status_code == 200
    assert res.json()["username"] == "alice"
    assert res.json()["token_type"] == "bearer"


def test_login_with_wrong_password_is_401(client, make_user):
    make_user("alice")
    res = client.post("/auth/login", data={"username": "alice", "password": "nope"})
    assert res.status_code == 401


def test_me_requires_token(client):
    res = client.get("/users/me")
    assert res.status_code == 401


def test_garbage_token_is_401(client):
    res = client.get("/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


def test_token_for_unknown_user_is_401(client):
    token = create_access_token({"sub": "9999"})
    res = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_me_returns_current_user(client, make_user):
    user_id, headers = make_user("alice")
    res = client.get("/users/me", headers=headers)
    assert res.status_code == 200
    assert res.json()["id"] == user_id
