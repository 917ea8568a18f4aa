"""Unexpected failures surface as a generic 500 without internals."""

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from photofeed.crud import post as crud
from main import app


def test_database_error_is_generic_500(client, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))

    monkeypatch.setattr(crud, "list_posts", broken)
    res = client.get("/posts")
    assert res.status_code == 500
    assert res.json() == {"detail": "Internal server error"}


def test_unexpected_exception_is_generic_500(client, monkeypatch):
    def broken(db):
        raise RuntimeError("secret stack detail")

    monkeypatch.setattr(crud, "list_posts", broken)
    res = TestClient(app, raise_server_exceptions=False).get("/posts")
    assert res.status_code == 500
    assert "secret" not in res.text


def test_failed_post_insert_cleans_up_uploaded_image(client, make_user, monkeypatch, fake_uploader):
    from conftest import PNG_BYTES

    def broken(db, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk full"))

    _, headers = make_user("alice")
    monkeypatch.setattr(crud, "create_post", broken)
    res = client.post("/posts", files={"image": ("photo.png", PNG_BYTES, "image/png")}, headers=headers)

    assert res.status_code == 500
    assert fake_uploader.destroyed == fake_uploader.uploaded
    assert len(fake_uploader.destroyed) == 1
