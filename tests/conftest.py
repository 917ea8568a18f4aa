"""Shared fixtures: in-memory database, FastAPI test client, fake media store.

Every test gets a fresh SQLite database shared by the app and the test
through a StaticPool, and the Cloudinary uploader is replaced by a fake
that records uploads and deletions.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import photofeed.db.models  # noqa: F401
from photofeed.db.base import Base
from photofeed.db.session import get_db
from photofeed.services import media
from main import app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class FakeUploader:
    def __init__(self):
        self.uploaded = []
        self.destroyed = []

    def upload(self, data, folder=None, public_id=None, **kwargs):
        self.uploaded.append(f"{folder}/{public_id}")
        return {
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/{folder}/{public_id}.jpg",
            "public_id": f"{folder}/{public_id}",
        }

    def destroy(self, public_id):
        self.destroyed.append(public_id)
        return {"result": "ok"}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def enforce_foreign_keys(dbapi_connection, connection_record):
        # match PostgreSQL: reject likes and comments on missing posts
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def fake_uploader(monkeypatch):
    uploader = FakeUploader()
    monkeypatch.setattr(media, "uploader", uploader)
    return uploader


@pytest.fixture
def client(session_factory):
    """FastAPI test client with get_db overridden to use the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register and log in a user; returns ``(user_id, auth_headers)``."""
    def _make_user(username: str):
        password = "s3cret-pass"
        res = client.post("/auth/register", json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
        })
        assert res.status_code == 201, res.text
        res = client.post("/auth/login", data={"username": username, "password": password})
        assert res.status_code == 200, res.text
        token = res.json()
        return token["user_id"], {"Authorization": f"Bearer {token['access_token']}"}

    return _make_user


@pytest.fixture
def create_post(client):
    def _create_post(headers, description="sunset"):
        data = {"description": description} if description is not None else {}
        res = client.post(
            "/posts",
            data=data,
            files={"image": ("photo.png", PNG_BYTES, "image/png")},
            headers=headers,
        )
        assert res.status_code == 201, res.text
        return res.json()

    return _create_post
